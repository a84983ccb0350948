"""
Redis Infrastructure Exceptions

Redis-specific store errors.
Follows project standards for error handling without fallbacks.
"""

from typing import Optional

from ...domain.cache.exceptions import StoreError


class RedisStoreException(StoreError):
    """Raised when a Redis command fails.

    All Redis store operations should raise this or its subclasses.
    """

    def __init__(
        self,
        message: str = "Redis command failed",
        operation: Optional[str] = None,
        key: Optional[str] = None,
        error_code: str = "REDIS_COMMAND_ERROR",
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            operation=operation,
            key=key,
            error_code=error_code,
            original_error=original_error,
        )


class RedisConnectionException(RedisStoreException):
    """Raised when Redis connection fails or is lost."""

    def __init__(
        self,
        message: str = "Redis connection failed",
        operation: Optional[str] = None,
        key: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            operation=operation,
            key=key,
            error_code="REDIS_CONNECTION_ERROR",
            original_error=original_error,
        )


class RedisOperationTimeoutException(RedisStoreException):
    """Raised when Redis operation times out."""

    def __init__(
        self,
        operation: str,
        key: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=f"Redis operation '{operation}' timed out",
            operation=operation,
            key=key,
            error_code="REDIS_TIMEOUT_ERROR",
            original_error=original_error,
        )
