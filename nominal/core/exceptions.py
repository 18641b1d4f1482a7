"""Errors raised while binding interfaces and tagging implementors."""

from __future__ import annotations

from typing import Any


def _describe(value: Any) -> str:
    return getattr(value, "__qualname__", None) or repr(value)


class InterfaceError(Exception):
    """Base class for interface binding and tagging errors."""


class ConflictingMarkerError(InterfaceError):
    """Raised when an interface type is rebound with a different marker."""

    def __init__(self, interface: type, current: Any, requested: Any):
        self.interface = interface
        self.current = current
        self.requested = requested
        super().__init__(
            f"Interface {_describe(interface)} is already bound to {current!r}; "
            f"cannot rebind it to {requested!r}"
        )


class UnboundInterfaceError(InterfaceError):
    """Raised when an implementor references an interface that has no marker."""

    def __init__(self, interface: Any):
        self.interface = interface
        super().__init__(
            f"Interface {_describe(interface)} must be bound to a marker "
            "before anything can implement it"
        )


class UntaggableTargetError(InterfaceError, TypeError):
    """Raised when a value cannot carry markers or act as an interface."""

    def __init__(self, target: Any, reason: str):
        self.target = target
        super().__init__(f"{_describe(target)}: {reason}")
