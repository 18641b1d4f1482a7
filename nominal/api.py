"""
Module-level API bound to the process-wide registry.

Every function resolves the registry from the DI container on each call,
so a container reset takes effect immediately.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from nominal.core.container import get_registry
from nominal.core.markers import InterfaceMarker

T = TypeVar("T")
C = TypeVar("C", bound=type)


def interface_marker(interface: Any) -> Optional[InterfaceMarker]:
    """Return the marker bound to ``interface``, or None."""
    return get_registry().lookup_marker(interface)


def bind_marker(interface: type, marker: InterfaceMarker) -> None:
    get_registry().bind_marker(interface, marker)


def bind_new_marker(interface: type) -> InterfaceMarker:
    return get_registry().bind_new_marker(interface)


def tag_with_markers(target: T, *markers: InterfaceMarker, value: Any = None) -> T:
    return get_registry().tag_with_markers(target, *markers, value=value)


def tag_with_interfaces(target: T, *interfaces: type) -> T:
    return get_registry().tag_with_interfaces(target, *interfaces)


def implements_interface(cls: type, *interfaces: type) -> None:
    get_registry().implements_interface(cls, *interfaces)


def implements(*interfaces: type) -> Callable[[C], C]:
    """
    Class decorator declaring that a class implements ``interfaces``.

    Example:
        @implements(Named, Keyed)
        class Record:
            ...
    """
    return get_registry().implements(*interfaces)


def interface(cls: Optional[C] = None, *, marker: Optional[InterfaceMarker] = None) -> Any:
    """
    Class decorator binding the decorated class as an interface.

    Example:
        @interface
        class Named(Interface):
            name: str
    """
    return get_registry().interface(cls, marker=marker)


def satisfies(value: Any, interface: Any) -> bool:
    return get_registry().satisfies(value, interface)


def tag_value(target: Any, marker: InterfaceMarker, default: Any = None) -> Any:
    return get_registry().tag_value(target, marker, default)
