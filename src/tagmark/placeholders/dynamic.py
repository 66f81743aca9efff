"""Resolver that computes replacements on demand and caches them."""

import logging
import threading
from collections.abc import Callable
from typing import Optional

from .models import Replacement
from .resolver import PlaceholderResolver

logger = logging.getLogger(__name__)

# Generator functions return None when they cannot resolve a key
Generator = Callable[[str], Optional[Replacement]]


class DynamicPlaceholderResolver(PlaceholderResolver):
    """Resolve placeholders through a generator function.

    Successful results are cached per key so the replacement is only built
    once; a None result is never cached and the generator will be asked
    again next time.

    The generator runs outside the cache lock. Two threads resolving the
    same uncached key may both call it, in which case the cache keeps the
    result that was stored last.
    """

    def __init__(self, generator: Generator, cache_enabled: bool = True):
        self._generator = generator
        self._cache_enabled = cache_enabled
        self._cache: dict[str, Replacement] = {}
        self._lock = threading.Lock()

    @property
    def cache_enabled(self) -> bool:
        return self._cache_enabled

    def resolve(self, key: str) -> Optional[Replacement]:
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        replacement = self._generator(key)
        if replacement is None:
            return None

        if self._cache_enabled:
            with self._lock:
                self._cache[key] = replacement
            logger.debug(f"Cached dynamic replacement for '{key}'")

        return replacement

    def size(self) -> int:
        """Get the number of cached replacements."""
        return len(self._cache)

    def clear(self):
        """Drop all cached replacements."""
        with self._lock:
            self._cache.clear()

    def __repr__(self) -> str:
        return (
            f"DynamicPlaceholderResolver(generator={self._generator!r}, "
            f"cached={len(self._cache)})"
        )
