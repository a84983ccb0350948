"""
Redis Cache Store Implementation

Infrastructure implementation of the cache store interface using Redis.
Values travel as JSON text; Redis' native key expiry is authoritative.
"""

import json
import logging
import math
from contextlib import asynccontextmanager
from typing import Any, Optional, Union

from redis.asyncio import Redis
from redis.exceptions import (
    ConnectionError as RedisConnectionError,
    TimeoutError as RedisTimeoutError,
    RedisError,
)

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from ...core.config import Settings
from ...domain.cache.exceptions import SerializationError
from ...domain.cache.store_interfaces import CacheStore
from ...domain.cache.value_objects import TTL
from ..redis.connection_factory import RedisConnectionFactory
from ..redis.exceptions import (
    RedisStoreException,
    RedisConnectionException,
    RedisOperationTimeoutException,
)

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class RedisCacheStore(CacheStore):
    """Redis implementation of the cache store."""

    def __init__(
        self,
        redis: Redis,
        connection_factory: Optional[RedisConnectionFactory] = None,
    ):
        self.redis = redis
        self._connection_factory = connection_factory

    @classmethod
    def from_url(cls, url: str, settings: Optional[Settings] = None) -> "RedisCacheStore":
        """Create store with a pooled client for url."""
        factory = RedisConnectionFactory(settings)
        return cls(factory.create_client(url), connection_factory=factory)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RedisCacheStore":
        """Create store connected to settings.REDIS_URL."""
        factory = RedisConnectionFactory(settings)
        return cls(factory.create_client(), connection_factory=factory)

    async def set(self, key: str, ttl: Union[TTL, int, float], value: Any) -> None:
        """Store value with SET ... EX (or PX for fractional TTLs)."""
        seconds = TTL.of(ttl).seconds
        encoded = self._encode(value, "set", key)

        async with self._command("set", key):
            if seconds == 0:
                # Redis rejects EX 0; a zero TTL is already expired
                await self.redis.delete(key)
            elif float(seconds).is_integer():
                await self.redis.set(key, encoded, ex=int(seconds))
            else:
                await self.redis.set(key, encoded, px=math.ceil(seconds * 1000))

    async def forever(self, key: str, value: Any) -> None:
        """Store value with plain SET (no expiry)."""
        encoded = self._encode(value, "forever", key)

        async with self._command("forever", key):
            await self.redis.set(key, encoded)

    async def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Get value with GET; missing keys return default without decoding."""
        async with self._command("get", key):
            reply = await self.redis.get(key)

        if reply is None:
            return default

        try:
            return json.loads(reply)
        except (TypeError, ValueError) as e:
            raise SerializationError(
                message=f"Failed to decode cached value for {key}: {e}",
                operation="get",
                key=key,
                original_error=e,
            )

    async def has(self, key: str) -> bool:
        """Check key with EXISTS."""
        async with self._command("has", key):
            reply = await self.redis.exists(key)
        return bool(reply)

    async def delete(self, key: str) -> bool:
        """Delete key with DEL."""
        async with self._command("delete", key):
            removed = await self.redis.delete(key)
        return removed > 0

    async def close(self) -> None:
        """Release the client and any pools this store created."""
        await self.redis.aclose()
        if self._connection_factory is not None:
            await self._connection_factory.close()

    def _encode(self, value: Any, operation: str, key: str) -> str:
        """Encode value as JSON text."""
        try:
            return json.dumps(value)
        except (TypeError, ValueError) as e:
            raise SerializationError(
                message=f"Value for {key} is not JSON serializable: {e}",
                operation=operation,
                key=key,
                original_error=e,
            )

    @asynccontextmanager
    async def _command(self, operation: str, key: str):
        """
        Run a Redis command inside a span and translate transport errors.

        Raises:
            RedisConnectionException: If the connection fails
            RedisOperationTimeoutException: If the command times out
            RedisStoreException: If Redis rejects the command
        """
        with tracer.start_as_current_span(f"cache_store.redis.{operation}") as span:
            span.set_attribute("cache.key", key)
            try:
                yield
                span.set_status(Status(StatusCode.OK))

            except RedisTimeoutError as e:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                logger.error(f"Redis {operation} timed out for {key}: {e}")
                raise RedisOperationTimeoutException(
                    operation=operation, key=key, original_error=e
                )

            except (RedisConnectionError, OSError) as e:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                logger.error(f"Redis connection error during {operation} for {key}: {e}")
                raise RedisConnectionException(
                    message=f"Redis connection failed: {str(e)}",
                    operation=operation,
                    key=key,
                    original_error=e,
                )

            except RedisError as e:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                logger.error(f"Redis {operation} failed for {key}: {e}")
                raise RedisStoreException(
                    message=f"Redis {operation} failed: {str(e)}",
                    operation=operation,
                    key=key,
                    original_error=e,
                )
