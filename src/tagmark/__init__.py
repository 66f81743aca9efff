"""tagmark - placeholder resolution for tagged markup text."""

__version__ = "0.1.0"

from .placeholders import (
    Placeholder,
    PlaceholderResolver,
    Replacement,
    ReplacementType,
    ResolverArgumentError,
    SupportsResolve,
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
    "PlaceholderResolver",
    "Replacement",
    "ReplacementType",
    "ResolverArgumentError",
    "SupportsResolve",
    "combining",
    "combining_from",
    "dynamic",
    "empty",
    "map_resolver",
    "placeholders",
    "placeholders_from",
]
