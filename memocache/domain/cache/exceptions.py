"""
Cache Domain Exceptions

Backend-independent error taxonomy for cache stores and memoization.
A cache miss is never an exception; only failures are.
"""

from typing import Optional, Any, Dict


class CacheException(Exception):
    """Base exception for cache-related errors.

    All cache operations should raise this or its subclasses.
    Never swallow store exceptions - always preserve context.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        if original_error:
            self.details["original_error"] = str(original_error)
            self.details["original_error_type"] = type(original_error).__name__
        super().__init__(self.message)
        # Preserve exception context for debugging (exception chaining)
        if original_error:
            self.__cause__ = original_error


class StoreError(CacheException):
    """Raised when a cache store cannot complete an operation."""

    def __init__(
        self,
        message: str = "Cache store operation failed",
        operation: Optional[str] = None,
        key: Optional[str] = None,
        error_code: str = "CACHE_STORE_ERROR",
        original_error: Optional[Exception] = None,
    ):
        details: Dict[str, Any] = {}
        if operation:
            details["operation"] = operation
        if key:
            details["key"] = key

        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            original_error=original_error,
        )


class SerializationError(StoreError):
    """Raised when a value cannot be encoded for, or decoded from, a store."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        key: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            operation=operation,
            key=key,
            error_code="CACHE_SERIALIZATION_ERROR",
            original_error=original_error,
        )


class ConfigurationError(CacheException):
    """Raised when memoization or a store is configured incorrectly.

    Raised at decoration time, never from a cached call.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        original_error: Optional[Exception] = None,
    ):
        details: Dict[str, Any] = {}
        if config_key:
            details["config_key"] = config_key
        if config_value is not None:
            details["config_value"] = repr(config_value)

        super().__init__(
            message=message,
            error_code="CACHE_CONFIGURATION_ERROR",
            details=details,
            original_error=original_error,
        )
