"""
Method Memoization

Decorator that serves repeated method calls from a cache store.

Usage:
    class Catalog:
        @cache_method(ttl=60)
        async def compute(self, n):
            ...

Each call derives a key from the instance, the method name and the
arguments, checks the store and only runs the method body on a miss.
"""

import functools
import inspect
import json
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import structlog

from ...constants import DEFAULT_KEY_PREFIX
from ...domain.cache.exceptions import ConfigurationError, SerializationError
from ...domain.cache.store_interfaces import CacheStore
from ...domain.cache.value_objects import (
    TTL,
    KeyFunction,
    KeywordArguments,
    MemoizeOptions,
)
from .default_store import get_default_store
from .object_registry import ObjectIdRegistry, object_registry

logger = structlog.get_logger(__name__)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def default_cache_key(
    object_id: int,
    method_name: str,
    args: List[Any],
    kwargs: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Build the default key: cache#{obj_<id>}#<method>#<json args>.

    Arguments bound by name get their own trailing segment,
    #<json kwargs> with sorted names, so f(b=3) and f({"b": 3}) differ.

    Raises:
        SerializationError: If an argument is not JSON serializable
    """
    try:
        encoded_args = json.dumps(args, separators=(",", ":"))
        if kwargs:
            encoded_args += "#" + json.dumps(kwargs, separators=(",", ":"), sort_keys=True)
    except (TypeError, ValueError) as e:
        raise SerializationError(
            message=f"Arguments of {method_name} are not JSON serializable: {e}",
            operation="key",
            original_error=e,
        )
    return f"{DEFAULT_KEY_PREFIX}#{{obj_{object_id}}}#{method_name}#{encoded_args}"


def _validate_target(method: Any) -> inspect.Signature:
    """Ensure method is a plain function able to receive an instance."""
    if not inspect.isfunction(method):
        raise ConfigurationError(
            "cache_method only supports methods defined with def",
            config_key="target",
            config_value=method,
        )
    if inspect.isgeneratorfunction(method) or inspect.isasyncgenfunction(method):
        raise ConfigurationError(
            "cache_method cannot cache generator methods",
            config_key="target",
            config_value=method,
        )

    signature = inspect.signature(method)
    if not any(p.kind in _POSITIONAL_KINDS for p in signature.parameters.values()):
        raise ConfigurationError(
            f"{method.__qualname__} takes no positional parameter for the instance",
            config_key="target",
            config_value=method,
        )
    return signature


def cache_method(
    ttl: Optional[Union[TTL, int, float]] = None,
    key: Optional[KeyFunction] = None,
    store: Optional[CacheStore] = None,
    *,
    options: Optional[MemoizeOptions] = None,
    registry: Optional[ObjectIdRegistry] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Memoize a method's results in a cache store.

    Args:
        ttl: Seconds a cached result stays valid (required unless options given)
        key: Optional key(object_id, method_name, args) -> str
        store: Explicit store; when omitted the default store is resolved per call
        options: Prebuilt MemoizeOptions instead of ttl/key
        registry: Object id registry (defaults to the shared one)

    Returns:
        Decorator producing an async method

    Raises:
        ConfigurationError: At decoration time, for invalid options or targets

    The wrapped method is always a coroutine function. Synchronous methods
    are called directly; awaitable results are awaited before caching.
    Store errors propagate to the caller; the method is never run as a
    fallback.
    """
    if options is None:
        options = MemoizeOptions(ttl=ttl, key=key)
    elif ttl is not None or key is not None:
        raise ConfigurationError("Pass either options or ttl/key, not both")

    if store is not None and not isinstance(store, CacheStore):
        raise ConfigurationError(
            "store must provide set, forever, get, has and delete",
            config_key="store",
            config_value=store,
        )

    ids = registry or object_registry

    def decorator(method: Callable[..., Any]) -> Callable[..., Any]:
        signature = _validate_target(method)
        method_name = method.__name__

        def resolve_store() -> CacheStore:
            return store if store is not None else get_default_store()

        def derive_key(instance: Any, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> str:
            bound = signature.bind(instance, *args, **kwargs)
            key_args = list(bound.args[1:])
            key_kwargs = KeywordArguments(sorted(bound.kwargs.items()))

            object_id = ids.identify(instance)
            if options.key is not None:
                if key_kwargs:
                    key_args.append(key_kwargs)
                return options.key(object_id, method_name, key_args)
            return default_cache_key(object_id, method_name, key_args, key_kwargs)

        @functools.wraps(method)
        async def wrapper(self, *args, **kwargs):
            cache_store = resolve_store()
            cache_key = derive_key(self, args, kwargs)

            if await cache_store.has(cache_key):
                logger.debug("cache_hit", method=method_name, key=cache_key)
                return await cache_store.get(cache_key)

            logger.debug("cache_miss", method=method_name, key=cache_key)
            value = method(self, *args, **kwargs)
            if inspect.isawaitable(value):
                value = await value

            await cache_store.set(cache_key, options.ttl, value)
            return value

        async def invalidate(instance: Any, *args, **kwargs) -> bool:
            """Drop the cached result for this call; returns whether one existed."""
            return await resolve_store().delete(derive_key(instance, args, kwargs))

        wrapper.cache_options = options
        wrapper.cache_key = lambda instance, *args, **kwargs: derive_key(instance, args, kwargs)
        wrapper.invalidate = invalidate
        return wrapper

    return decorator
