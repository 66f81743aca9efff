"""Resolver that never resolves anything."""

from typing import Optional

from .models import Replacement
from .resolver import PlaceholderResolver


class EmptyPlaceholderResolver(PlaceholderResolver):
    """Singleton resolver that returns None for every key."""

    _instance: "EmptyPlaceholderResolver | None" = None

    def __new__(cls) -> "EmptyPlaceholderResolver":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def resolve(self, key: str) -> Optional[Replacement]:
        return None

    def __repr__(self) -> str:
        return "EmptyPlaceholderResolver()"


EMPTY = EmptyPlaceholderResolver()
