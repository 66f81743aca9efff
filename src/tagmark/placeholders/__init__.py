"""Placeholder resolution for tag evaluation.

This module provides the resolvers the tag engine asks for placeholder
replacements, and the factory functions that build and compose them
(from a mapping, from placeholders, from several resolvers, or from a
generator function).
"""

from .models import (
    Placeholder,
    Replacement,
    ReplacementType,
    ResolverArgumentError,
)
from .resolver import PlaceholderResolver, SupportsResolve
from .mapped import MapPlaceholderResolver
from .empty import EmptyPlaceholderResolver
from .grouped import GroupedPlaceholderResolver
from .dynamic import DynamicPlaceholderResolver
from .factory import (
    combining,
    combining_from,
    dynamic,
    empty,
    map_resolver,
    placeholders,
    placeholders_from,
)

__all__ = [
    "Placeholder",
    "Replacement",
    "ReplacementType",
    "ResolverArgumentError",
    "PlaceholderResolver",
    "SupportsResolve",
    "MapPlaceholderResolver",
    "EmptyPlaceholderResolver",
    "GroupedPlaceholderResolver",
    "DynamicPlaceholderResolver",
    "combining",
    "combining_from",
    "dynamic",
    "empty",
    "map_resolver",
    "placeholders",
    "placeholders_from",
]
