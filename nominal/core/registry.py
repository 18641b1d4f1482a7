"""Marker registry: binds interface types to markers and tags implementors."""

from __future__ import annotations

import logging
import weakref
from typing import Any, Callable, Optional, TypeVar

from nominal.core.exceptions import (
    ConflictingMarkerError,
    UnboundInterfaceError,
    UntaggableTargetError,
)
from nominal.core.installer import install_capability, recorded_marker
from nominal.core.markers import InterfaceMarker
from nominal.core.predicates import InterfacePredicate, installed_predicate
from nominal.core.tagging import DEFAULT_TAG_ATTRIBUTE, TagTable

logger = logging.getLogger(__name__)

T = TypeVar("T")
C = TypeVar("C", bound=type)

_MISSING = object()


def _name(value: Any) -> str:
    return getattr(value, "__qualname__", None) or type(value).__name__


class MarkerRegistry:
    """
    Owns interface markers and the tags stamped on implementors.

    Classes are tagged on their instance template: the tag applies to every
    instance of the class and of its subclasses. Any other value is tagged
    on itself only. A value satisfies an interface when it carries the
    interface's marker as an own tag or when some class in
    ``type(value).__mro__`` carries it as a template tag.
    """

    def __init__(self, tag_attribute: str = DEFAULT_TAG_ATTRIBUTE):
        self._markers: "weakref.WeakKeyDictionary[type, InterfaceMarker]" = (
            weakref.WeakKeyDictionary()
        )
        self._templates = TagTable(tag_attribute)
        self._objects = TagTable(tag_attribute)

    @property
    def tag_attribute(self) -> str:
        """Instance attribute holding tags of objects without weakref support."""
        return self._objects.fallback_attribute

    # Marker store -----------------------------------------------------------

    def lookup_marker(self, interface: Any) -> Optional[InterfaceMarker]:
        """Return the marker bound to ``interface``, or None. Never raises."""
        try:
            return self._markers.get(interface)
        except TypeError:
            return None

    def bind_marker(self, interface: type, marker: InterfaceMarker) -> None:
        """
        Bind ``marker`` to ``interface``.

        Binding also stamps the marker on the interface's own template, so
        classes that simply inherit from ``interface`` satisfy it, and
        installs the interface's predicate unless it already has one.

        Raises:
            ConflictingMarkerError: ``interface`` is bound to another marker
            UntaggableTargetError: ``interface`` is not a mutable class
            TypeError: ``marker`` is not an InterfaceMarker
        """
        if not isinstance(interface, type):
            raise UntaggableTargetError(interface, "only classes can be interfaces")
        if not isinstance(marker, InterfaceMarker):
            raise TypeError(f"Expected an InterfaceMarker, got {type(marker).__name__}")

        # The marker recorded on the class wins over this registry's store:
        # another registry may have bound the class first.
        current = recorded_marker(interface) or self._markers.get(interface)
        if current is not None and current is not marker:
            raise ConflictingMarkerError(interface, current, marker)
        if self._markers.get(interface) is marker:
            logger.debug("%s is already bound to %r", _name(interface), marker)
            return

        install_capability(interface, marker, self)
        self._templates.stamp(interface, marker, marker)
        self._markers[interface] = marker
        logger.debug("Bound %s to %r", _name(interface), marker)

    def bind_new_marker(self, interface: type) -> InterfaceMarker:
        """Bind a freshly created marker to ``interface`` and return it."""
        marker = InterfaceMarker(getattr(interface, "__qualname__", None))
        self.bind_marker(interface, marker)
        return marker

    # Tagging ----------------------------------------------------------------

    def tag_with_markers(self, target: T, *markers: InterfaceMarker, value: Any = None) -> T:
        """
        Stamp each marker on ``target`` and return ``target``.

        Markers ``target`` already carries keep their original tag value.
        """
        table = self._templates if isinstance(target, type) else self._objects
        for marker in markers:
            if not isinstance(marker, InterfaceMarker):
                raise TypeError(f"Expected an InterfaceMarker, got {type(marker).__name__}")
            if table.stamp(target, marker, value):
                logger.debug("Tagged %s with %r", _name(target), marker)
        return target

    def tag_with_interfaces(self, target: T, *interfaces: type) -> T:
        """
        Tag ``target`` as implementing each interface, in order.

        Raises:
            UnboundInterfaceError: an interface has no marker; interfaces
                listed before it have already been applied
        """
        for interface in interfaces:
            marker = self.lookup_marker(interface)
            if marker is None:
                raise UnboundInterfaceError(interface)
            self.tag_with_markers(target, marker)
        return target

    def implements_interface(self, cls: type, *interfaces: type) -> None:
        """Declare that instances of ``cls`` implement ``interfaces``."""
        if not isinstance(cls, type):
            raise UntaggableTargetError(cls, "implements_interface() expects a class")
        self.tag_with_interfaces(cls, *interfaces)

    def implements(self, *interfaces: type) -> Callable[[C], C]:
        """Class decorator form of :meth:`implements_interface`."""

        def decorator(cls: C) -> C:
            self.implements_interface(cls, *interfaces)
            return cls

        return decorator

    def interface(
        self, cls: Optional[C] = None, *, marker: Optional[InterfaceMarker] = None
    ) -> Any:
        """
        Class decorator binding a class as an interface.

        Usable bare (``@registry.interface``) or with an explicit marker
        (``@registry.interface(marker=FOO)``).
        """

        def decorator(target: C) -> C:
            if marker is None:
                self.bind_new_marker(target)
            else:
                self.bind_marker(target, marker)
            return target

        if cls is None:
            return decorator
        return decorator(cls)

    # Evaluation -------------------------------------------------------------

    def carries(self, value: Any, marker: InterfaceMarker) -> bool:
        own = self._objects.get(value)
        if own is not None and marker in own:
            return True
        return self.template_carries(type(value), marker)

    def template_carries(self, cls: type, marker: InterfaceMarker) -> bool:
        for klass in cls.__mro__:
            tags = self._templates.get(klass)
            if tags is not None and marker in tags:
                return True
        return False

    def satisfies(self, value: Any, interface: Any) -> bool:
        """
        Whether ``value`` satisfies ``interface``; never raises.

        Works for bound classes that do not use ``InterfaceMeta`` and gives
        the same answer as the predicate installed on ``interface``. Unbound
        classes fall back to ``isinstance``.
        """
        marker = self.lookup_marker(interface)
        if marker is not None:
            predicate = installed_predicate(interface)
            if predicate is None or predicate.marker is not marker:
                predicate = InterfacePredicate(marker, self)
            return predicate(value)
        if not isinstance(interface, type):
            return False
        try:
            return isinstance(value, interface)
        except Exception:
            return False

    def tag_value(self, target: Any, marker: InterfaceMarker, default: Any = None) -> Any:
        """
        Return the value stored with ``marker`` for ``target``.

        Own tags win over template tags; templates are searched along the
        MRO of ``target`` (for classes) or of its type.
        """
        if not isinstance(target, type):
            own = self._objects.get(target)
            if own is not None and marker in own:
                return own[marker]
            target = type(target)

        for klass in target.__mro__:
            tags = self._templates.get(klass)
            if tags is not None:
                found = tags.get(marker, _MISSING)
                if found is not _MISSING:
                    return found
        return default
