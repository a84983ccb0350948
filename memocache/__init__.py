"""
memocache - method memoization over pluggable cache stores.

This package provides:
- cache_method: decorator caching method results per instance and arguments
- MemoryCacheStore: in-process store with lazy TTL expiry
- RedisCacheStore: Redis-backed store using native key expiry
- set_default_store / get_default_store: process-wide default store
"""

from .constants import NEVER_EXPIRES
from .domain.cache import (
    CacheException,
    StoreError,
    SerializationError,
    ConfigurationError,
    CacheStore,
    TTL,
    CachePayload,
    MemoizeOptions,
    KeywordArguments,
)
from .infrastructure.stores import MemoryCacheStore, RedisCacheStore
from .services.cache import (
    cache_method,
    default_cache_key,
    get_default_store,
    set_default_store,
    reset_default_store,
    build_store,
    configure_default_store,
)

__all__ = [
    "NEVER_EXPIRES",
    # Errors
    "CacheException",
    "StoreError",
    "SerializationError",
    "ConfigurationError",
    # Domain
    "CacheStore",
    "TTL",
    "CachePayload",
    "MemoizeOptions",
    "KeywordArguments",
    # Stores
    "MemoryCacheStore",
    "RedisCacheStore",
    # Memoization
    "cache_method",
    "default_cache_key",
    "get_default_store",
    "set_default_store",
    "reset_default_store",
    "build_store",
    "configure_default_store",
]
