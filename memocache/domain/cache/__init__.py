"""
Cache Domain Layer

Store contract, value objects and error taxonomy.
"""

from .exceptions import (
    CacheException,
    StoreError,
    SerializationError,
    ConfigurationError,
)
from .store_interfaces import CacheStore
from .value_objects import (
    TTL,
    CachePayload,
    MemoizeOptions,
    KeyFunction,
    KeywordArguments,
)

__all__ = [
    "CacheException",
    "StoreError",
    "SerializationError",
    "ConfigurationError",
    "CacheStore",
    "TTL",
    "CachePayload",
    "MemoizeOptions",
    "KeyFunction",
    "KeywordArguments",
]
