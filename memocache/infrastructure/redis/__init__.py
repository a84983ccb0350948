"""
Redis Infrastructure Module

Connection management and error types for the Redis cache store.
"""

from .connection_factory import RedisConnectionFactory
from .exceptions import (
    RedisStoreException,
    RedisConnectionException,
    RedisOperationTimeoutException,
)

__all__ = [
    # Connection management
    "RedisConnectionFactory",
    # Exceptions
    "RedisStoreException",
    "RedisConnectionException",
    "RedisOperationTimeoutException",
]
