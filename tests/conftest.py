"""
Pytest configuration and helpers for the nominal test-suite.

The module-level API shares one registry for the whole process, so unit
tests work against a fresh ``MarkerRegistry`` from the ``registry`` fixture
and only the integration scenarios go through the global container.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Environment bootstrap
# ---------------------------------------------------------------------------

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ["NOMINAL_LOG_LEVEL"] = "DEBUG"
os.environ.pop("NOMINAL_TAG_ATTRIBUTE", None)

from nominal.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from nominal.core.predicates import Interface, InterfaceMeta  # noqa: E402
from nominal.core.registry import MarkerRegistry  # noqa: E402


# ---------------------------------------------------------------------------
# Registry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def registry() -> MarkerRegistry:
    """Isolated registry so tests never leak bindings into each other."""
    return MarkerRegistry()


@pytest.fixture
def make_interface():
    """Factory creating a new, unbound ``Interface`` subclass."""

    def _make(name: str = "Iface") -> type:
        return InterfaceMeta(name, (Interface,), {})

    return _make
