"""Opaque identity tokens bound to interface types."""

from __future__ import annotations

from typing import Optional


class InterfaceMarker:
    """
    Unique token identifying one interface's satisfaction condition.

    Markers compare and hash by identity only. The optional description is
    shown in ``repr`` and has no other meaning, so two markers with the same
    description are still different markers.
    """

    __slots__ = ("description",)

    def __init__(self, description: Optional[str] = None):
        self.description = description

    def __repr__(self) -> str:
        if self.description:
            return f"InterfaceMarker({self.description!r})"
        return f"InterfaceMarker(at {id(self):#x})"

    # Copies must keep the identity, otherwise a copied marker would silently
    # stop matching the interface it came from.
    def __copy__(self) -> "InterfaceMarker":
        return self

    def __deepcopy__(self, memo: dict) -> "InterfaceMarker":
        return self

    def __reduce__(self):
        raise TypeError("InterfaceMarker instances cannot be serialized")
