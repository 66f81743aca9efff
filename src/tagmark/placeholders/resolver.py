"""Base placeholder resolver interface."""

from abc import ABC, abstractmethod
from typing import Optional, Protocol, runtime_checkable

from .models import Replacement


@runtime_checkable
class SupportsResolve(Protocol):
    """Any object with a resolve(key) method can take part in combining()."""

    def resolve(self, key: str) -> Optional[Replacement]: ...


class PlaceholderResolver(ABC):
    """Abstract base class for placeholder resolvers."""

    @abstractmethod
    def resolve(self, key: str) -> Optional[Replacement]:
        """
        Return the replacement for a key, if any exists.

        The tag engine may call this several times per key during a single
        parse attempt (it is also used to check whether a tag is a
        placeholder at all), so implementations should serve fixed or cached
        replacements rather than build new ones on every call.

        Args:
            key: The placeholder key

        Returns:
            The replacement, or None if this resolver has nothing for the key
        """
        pass
