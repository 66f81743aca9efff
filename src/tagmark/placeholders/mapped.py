"""Resolver backed by a key to replacement mapping."""

from collections.abc import Mapping
from typing import Optional

from .models import Replacement
from .resolver import PlaceholderResolver


class MapPlaceholderResolver(PlaceholderResolver):
    """Resolve placeholders by direct lookup in a mapping.

    The mapping is held by reference, so later changes to it are visible
    to subsequent resolve calls.
    """

    def __init__(self, mapping: Mapping[str, Replacement]):
        self._mapping = mapping

    def resolve(self, key: str) -> Optional[Replacement]:
        return self._mapping.get(key)

    def __repr__(self) -> str:
        return f"MapPlaceholderResolver(keys={list(self._mapping)!r})"
