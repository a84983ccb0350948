"""
Cache Services

Memoization decorator, process-wide default store and store factory.
"""

from .default_store import (
    DefaultStore,
    default_store,
    get_default_store,
    set_default_store,
    reset_default_store,
)
from .memoize import cache_method, default_cache_key
from .object_registry import ObjectIdRegistry, object_registry
from .store_factory import build_store, configure_default_store

__all__ = [
    "DefaultStore",
    "default_store",
    "get_default_store",
    "set_default_store",
    "reset_default_store",
    "cache_method",
    "default_cache_key",
    "ObjectIdRegistry",
    "object_registry",
    "build_store",
    "configure_default_store",
]
