"""Nominal interfaces satisfied by explicit marker tags."""

import logging

from nominal.api import (
    bind_marker,
    bind_new_marker,
    implements,
    implements_interface,
    interface,
    interface_marker,
    satisfies,
    tag_value,
    tag_with_interfaces,
    tag_with_markers,
)
from nominal.core import (
    INTERFACE_MARKER_ATTRIBUTE,
    ConflictingMarkerError,
    Interface,
    InterfaceError,
    InterfaceMarker,
    InterfaceMeta,
    MarkerRegistry,
    UnboundInterfaceError,
    UntaggableTargetError,
)
from nominal.core.container import get_registry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "bind_marker",
    "bind_new_marker",
    "implements",
    "implements_interface",
    "interface",
    "interface_marker",
    "satisfies",
    "tag_value",
    "tag_with_interfaces",
    "tag_with_markers",
    "INTERFACE_MARKER_ATTRIBUTE",
    "ConflictingMarkerError",
    "Interface",
    "InterfaceError",
    "InterfaceMarker",
    "InterfaceMeta",
    "MarkerRegistry",
    "UnboundInterfaceError",
    "UntaggableTargetError",
    "get_registry",
]
