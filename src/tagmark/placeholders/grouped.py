"""Resolver that tries several resolvers in order."""

from typing import Optional

from .models import Replacement
from .resolver import PlaceholderResolver, SupportsResolve


class GroupedPlaceholderResolver(PlaceholderResolver):
    """Resolve from multiple sources, first match wins.

    Children are consulted in construction order and scanning stops at the
    first one that returns a replacement. The group keeps no cache of its
    own; every call goes back to the children.
    """

    def __init__(self, resolvers: tuple[SupportsResolve, ...]):
        self._resolvers = resolvers

    @property
    def resolvers(self) -> tuple[SupportsResolve, ...]:
        """Child resolvers in priority order."""
        return self._resolvers

    def resolve(self, key: str) -> Optional[Replacement]:
        for resolver in self._resolvers:
            replacement = resolver.resolve(key)
            if replacement is not None:
                return replacement
        return None

    def __repr__(self) -> str:
        return f"GroupedPlaceholderResolver({list(self._resolvers)!r})"
