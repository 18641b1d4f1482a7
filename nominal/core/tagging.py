"""Identity-keyed storage for the markers an implementor carries."""

from __future__ import annotations

import logging
import weakref
from functools import partial
from typing import Any, Optional

from nominal.core.exceptions import UntaggableTargetError

logger = logging.getLogger(__name__)

DEFAULT_TAG_ATTRIBUTE = "__interface_tags__"


class TagTable:
    """
    Non-owning mapping from a target to the markers stamped on it.

    Targets are keyed by identity, so unhashable objects and objects with a
    custom ``__eq__`` are fine. Weakly referenceable targets live in a side
    table whose entries disappear together with the target. Targets that
    cannot be weakly referenced but have an instance ``__dict__`` keep their
    tags in ``fallback_attribute`` inside that dict instead.
    """

    def __init__(self, fallback_attribute: str = DEFAULT_TAG_ATTRIBUTE):
        self.fallback_attribute = fallback_attribute
        self._entries: dict[int, tuple[weakref.ref, dict]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, target: Any) -> Optional[dict]:
        """
        Return the tags stamped directly on ``target``.

        Args:
            target: Any value

        Returns:
            Mapping of marker to tag value, or None if ``target`` has no tags
        """
        entry = self._entries.get(id(target))
        if entry is not None and entry[0]() is target:
            return entry[1]

        namespace = getattr(target, "__dict__", None)
        # Class namespaces are mappingproxy objects and never hold tags.
        if type(namespace) is dict:
            return namespace.get(self.fallback_attribute)
        return None

    def stamp(self, target: Any, marker: Any, value: Any = None) -> bool:
        """
        Stamp ``marker`` on ``target`` unless it is already there.

        Returns:
            True if the tag was added, False if ``target`` already carried it
        """
        tags = self.get(target)
        if tags is None:
            tags = self._create(target)
        elif marker in tags:
            return False

        tags[marker] = value
        return True

    def _create(self, target: Any) -> dict:
        tags: dict = {}
        key = id(target)
        try:
            ref = weakref.ref(target, partial(self._discard, key))
        except TypeError:
            namespace = getattr(target, "__dict__", None)
            if type(namespace) is not dict:
                raise UntaggableTargetError(
                    target,
                    f"{type(target).__name__} values support neither weak "
                    "references nor instance attributes",
                ) from None
            namespace[self.fallback_attribute] = tags
            logger.debug(
                "Storing tags in %s.%s", type(target).__name__, self.fallback_attribute
            )
        else:
            self._entries[key] = (ref, tags)
        return tags

    def _discard(self, key: int, ref: weakref.ref) -> None:
        entry = self._entries.get(key)
        if entry is not None and entry[0] is ref:
            del self._entries[key]
