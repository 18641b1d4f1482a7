"""Marker registry, capability installer, tagging and predicate evaluation."""

from nominal.core.exceptions import (
    ConflictingMarkerError,
    InterfaceError,
    UnboundInterfaceError,
    UntaggableTargetError,
)
from nominal.core.installer import INTERFACE_MARKER_ATTRIBUTE
from nominal.core.markers import InterfaceMarker
from nominal.core.predicates import (
    Interface,
    InterfaceMeta,
    InterfacePredicate,
)
from nominal.core.registry import MarkerRegistry
from nominal.core.tagging import DEFAULT_TAG_ATTRIBUTE, TagTable

__all__ = [
    "ConflictingMarkerError",
    "InterfaceError",
    "UnboundInterfaceError",
    "UntaggableTargetError",
    "INTERFACE_MARKER_ATTRIBUTE",
    "InterfaceMarker",
    "Interface",
    "InterfaceMeta",
    "InterfacePredicate",
    "MarkerRegistry",
    "DEFAULT_TAG_ATTRIBUTE",
    "TagTable",
]
