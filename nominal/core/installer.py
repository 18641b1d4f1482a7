"""Installs marker discovery and the "is-a" predicate on interface types."""

from __future__ import annotations

import logging
from typing import Any, Optional

from nominal.core.exceptions import UntaggableTargetError
from nominal.core.interfaces import TagLookup
from nominal.core.markers import InterfaceMarker
from nominal.core.predicates import (
    PREDICATE_ATTRIBUTE,
    InterfaceMeta,
    InterfacePredicate,
    installed_predicate,
)

logger = logging.getLogger(__name__)

INTERFACE_MARKER_ATTRIBUTE = "__interface_marker__"


def recorded_marker(interface: Any) -> Optional[InterfaceMarker]:
    """Return the marker recorded directly on ``interface``, if any."""
    if not isinstance(interface, type):
        return None
    return interface.__dict__.get(INTERFACE_MARKER_ATTRIBUTE)


def install_capability(interface: type, marker: InterfaceMarker, tags: TagLookup) -> bool:
    """
    Record ``marker`` on ``interface`` and install its predicate.

    Both attributes are written only when the class does not define them
    itself yet. When a predicate is already installed, ``tags`` is attached
    to it instead, so the check also sees tags stamped through ``tags``.

    Args:
        interface: Interface class
        marker: Marker bound to ``interface``
        tags: Tag storage the predicate reads from

    Returns:
        True if the predicate was installed by this call

    Raises:
        UntaggableTargetError: ``interface`` is an immutable (builtin) type
    """
    existing = installed_predicate(interface)
    if existing is not None:
        existing.attach(tags)
        return False

    try:
        if INTERFACE_MARKER_ATTRIBUTE not in interface.__dict__:
            setattr(interface, INTERFACE_MARKER_ATTRIBUTE, marker)
        setattr(interface, PREDICATE_ATTRIBUTE, InterfacePredicate(marker, tags))
    except TypeError as exc:
        raise UntaggableTargetError(interface, f"cannot install interface check: {exc}") from exc

    if not isinstance(interface, InterfaceMeta):
        logger.debug(
            "%s does not use InterfaceMeta; isinstance() is not routed through "
            "its predicate, use satisfies() instead",
            interface.__qualname__,
        )
    return True
