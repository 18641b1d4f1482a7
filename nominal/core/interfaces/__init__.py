"""
Protocols shared between the registry and the predicates it installs.

Predicates only need read access to tag storage, so they depend on this
protocol rather than on ``MarkerRegistry`` itself.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from nominal.core.markers import InterfaceMarker


@runtime_checkable
class TagLookup(Protocol):
    """Read-only view of marker tags."""

    def carries(self, value: Any, marker: InterfaceMarker) -> bool:
        """Whether ``value`` carries ``marker`` as an own or template tag."""
        ...

    def template_carries(self, cls: type, marker: InterfaceMarker) -> bool:
        """Whether any class in ``cls.__mro__`` carries ``marker`` on its template."""
        ...


__all__ = ["TagLookup"]
