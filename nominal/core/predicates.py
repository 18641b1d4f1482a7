"""The "is-a" check installed on bound interface types."""

from __future__ import annotations

from abc import ABCMeta
from typing import Any, Optional

from nominal.core.interfaces import TagLookup
from nominal.core.markers import InterfaceMarker

PREDICATE_ATTRIBUTE = "__interface_predicate__"


class InterfacePredicate:
    """
    Decides whether a value carries one interface marker.

    A predicate reads tags from every registry that bound its interface, so
    objects tagged through any of them pass ``isinstance``.
    """

    __slots__ = ("marker", "_sources")

    def __init__(self, marker: InterfaceMarker, tags: TagLookup):
        self.marker = marker
        self._sources: tuple[TagLookup, ...] = (tags,)

    def __repr__(self) -> str:
        return f"InterfacePredicate({self.marker!r})"

    def attach(self, tags: TagLookup) -> None:
        """Also consult ``tags`` when evaluating."""
        if not any(source is tags for source in self._sources):
            self._sources += (tags,)

    def __call__(self, value: Any) -> bool:
        try:
            return any(source.carries(value, self.marker) for source in self._sources)
        except Exception:
            return False

    def covers_class(self, cls: type) -> bool:
        try:
            return any(
                source.template_carries(cls, self.marker) for source in self._sources
            )
        except Exception:
            return False


def installed_predicate(cls: Any) -> Optional[InterfacePredicate]:
    """Return the predicate installed directly on ``cls``, ignoring base classes."""
    if not isinstance(cls, type):
        return None
    return cls.__dict__.get(PREDICATE_ATTRIBUTE)


class InterfaceMeta(ABCMeta):
    """
    Metaclass routing ``isinstance``/``issubclass`` through installed predicates.

    Only the class a predicate was installed on uses it. Every other class
    with this metaclass answers by plain inheritance; ABC virtual subclasses
    are not supported, use ``implements_interface()`` instead.
    """

    def __instancecheck__(cls, instance: Any) -> bool:
        predicate = installed_predicate(cls)
        if predicate is not None:
            return predicate(instance)
        return type.__instancecheck__(cls, instance)

    def __subclasscheck__(cls, subclass: Any) -> bool:
        predicate = installed_predicate(cls)
        if predicate is None:
            return type.__subclasscheck__(cls, subclass)
        if not isinstance(subclass, type):
            raise TypeError("issubclass() arg 1 must be a class")
        return predicate.covers_class(subclass)

    def register(cls, subclass: type) -> type:
        raise TypeError(
            f"{cls.__qualname__} does not accept virtual subclasses; "
            "use implements_interface() instead"
        )


class Interface(metaclass=InterfaceMeta):
    """Convenience base for nominal interfaces."""

    __slots__ = ()
