"""Factory functions for building placeholder resolvers.

Every function validates its arguments immediately and raises
ResolverArgumentError on bad input, so mistakes surface where the resolver
is built rather than on the first resolve call.

Some shortcuts are part of the contract, not just optimizations:
- combining a single resolver returns that same resolver object
- combining an empty iterable, or building from zero placeholders,
  returns the shared empty resolver
"""

import logging
from collections.abc import Iterable, Mapping

from ..config import settings
from .dynamic import DynamicPlaceholderResolver, Generator
from .empty import EMPTY
from .grouped import GroupedPlaceholderResolver
from .mapped import MapPlaceholderResolver
from .models import Placeholder, Replacement, ResolverArgumentError
from .resolver import PlaceholderResolver, SupportsResolve

logger = logging.getLogger(__name__)


def _require_iterable(value, name: str):
    if value is None:
        raise ResolverArgumentError(f"{name} must not be None")
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise ResolverArgumentError(
            f"{name} must be an iterable, got {type(value).__name__}"
        )
    return value


def _check_placeholder(placeholder) -> Placeholder:
    if placeholder is None:
        raise ResolverArgumentError("placeholders must not contain None elements")
    if not isinstance(placeholder, Placeholder):
        raise ResolverArgumentError(
            f"placeholders must contain Placeholder objects, got {type(placeholder).__name__}"
        )
    return placeholder


def _check_resolver(resolver) -> SupportsResolve:
    if resolver is None:
        raise ResolverArgumentError("resolvers must not contain None elements")
    # Plain functions are not accepted here, wrap them with dynamic()
    if not isinstance(resolver, SupportsResolve) or not callable(resolver.resolve):
        raise ResolverArgumentError(
            f"resolvers must have a resolve() method, got {type(resolver).__name__}"
        )
    return resolver


def empty() -> PlaceholderResolver:
    """Get the shared resolver that returns None for every key."""
    return EMPTY


def map_resolver(mapping: Mapping[str, Replacement]) -> PlaceholderResolver:
    """
    Build a resolver backed by a mapping.

    The mapping is used directly, not copied: changes made to it later are
    reflected in what the resolver returns.

    Args:
        mapping: Key to replacement mapping

    Returns:
        A MapPlaceholderResolver over the mapping
    """
    if mapping is None:
        raise ResolverArgumentError("mapping must not be None")
    if not isinstance(mapping, Mapping):
        raise ResolverArgumentError(
            f"mapping must be a Mapping, got {type(mapping).__name__}"
        )
    return MapPlaceholderResolver(mapping)


def placeholders(*placeholders: Placeholder) -> PlaceholderResolver:
    """Build a resolver from some placeholders; later keys win."""
    if not placeholders:
        return EMPTY
    return placeholders_from(placeholders)


def placeholders_from(placeholders: Iterable[Placeholder]) -> PlaceholderResolver:
    """
    Build a resolver from an iterable of placeholders.

    A private mapping is built up front. When two placeholders share a key,
    the one that comes later in iteration order wins.

    Args:
        placeholders: The placeholders

    Returns:
        A MapPlaceholderResolver, or the empty resolver if there were none
    """
    _require_iterable(placeholders, "placeholders")

    mapping: dict[str, Replacement] = {}
    for placeholder in placeholders:
        _check_placeholder(placeholder)
        if settings.warn_duplicate_keys and placeholder.key in mapping:
            logger.warning(
                f"Placeholder '{placeholder.key}' defined more than once, later value wins"
            )
        mapping[placeholder.key] = placeholder.replacement

    if not mapping:
        return EMPTY

    return MapPlaceholderResolver(mapping)


def combining(*resolvers: SupportsResolve) -> SupportsResolve:
    """
    Build a resolver that tries several resolvers in argument order.

    A single argument is returned unchanged. Unlike combining_from(), no
    arguments at all still yields a (permanently empty) grouped resolver
    rather than the shared empty resolver.

    Args:
        *resolvers: Resolvers, highest priority first

    Returns:
        The only resolver, or a GroupedPlaceholderResolver
    """
    for resolver in resolvers:
        _check_resolver(resolver)

    if len(resolvers) == 1:
        logger.debug("Single resolver passed to combining(), returning it unchanged")
        return resolvers[0]

    return GroupedPlaceholderResolver(resolvers)


def combining_from(resolvers: Iterable[SupportsResolve]) -> SupportsResolve:
    """
    Build a resolver that tries several resolvers in iteration order.

    The iterable is copied, so changing it afterwards does not affect the
    returned resolver.

    Args:
        resolvers: Resolvers, highest priority first

    Returns:
        The empty resolver, the only resolver, or a GroupedPlaceholderResolver
    """
    _require_iterable(resolvers, "resolvers")

    snapshot = tuple(_check_resolver(resolver) for resolver in resolvers)

    if not snapshot:
        logger.debug("No resolvers passed to combining_from(), using empty resolver")
        return EMPTY
    if len(snapshot) == 1:
        return snapshot[0]

    return GroupedPlaceholderResolver(snapshot)


def dynamic(generator: Generator, *, cache: bool = True) -> PlaceholderResolver:
    """
    Build a resolver that computes replacements with a generator function.

    The generator returns None for keys it cannot resolve. Successful
    results are cached per key so each replacement is only built once.

    Args:
        generator: Function from key to replacement or None
        cache: Pass False to call the generator on every resolve. The
            resolver then no longer memoizes successful results.

    Returns:
        A DynamicPlaceholderResolver wrapping the generator
    """
    if generator is None:
        raise ResolverArgumentError("generator must not be None")
    if not callable(generator):
        raise ResolverArgumentError(
            f"generator must be callable, got {type(generator).__name__}"
        )

    return DynamicPlaceholderResolver(generator, cache_enabled=cache)
