"""
Redis Connection Factory

Connection management for Redis-backed cache stores.
Builds pooled asyncio clients from settings or an explicit URL.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from redis.asyncio import ConnectionPool, Redis

from ...core.config import Settings, get_settings
from ...domain.cache.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class RedisConnectionFactory:
    """
    Factory for creating Redis clients for cache stores.

    Clients decode responses to str so JSON payloads round-trip as text.
    Pools are created lazily and released by close().
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._pools: Dict[str, ConnectionPool] = {}

    def _connection_kwargs(self) -> Dict[str, Any]:
        """Build pool options from settings."""
        return {
            "encoding": "utf-8",
            "decode_responses": True,
            "socket_connect_timeout": self.settings.REDIS_CONNECTION_TIMEOUT,
            "socket_timeout": self.settings.REDIS_OPERATION_TIMEOUT,
            "max_connections": self.settings.REDIS_MAX_CONNECTIONS,
        }

    def create_client(self, url: Optional[str] = None, **overrides: Any) -> Redis:
        """
        Create Redis client backed by a shared pool for url.

        Args:
            url: Redis URL (defaults to settings.REDIS_URL)
            **overrides: Extra connection pool options

        Returns:
            redis.asyncio.Redis client

        Raises:
            ConfigurationError: If the URL cannot be parsed into a pool
        """
        redis_url = url or self.settings.REDIS_URL

        if redis_url not in self._pools:
            connection_kwargs = {**self._connection_kwargs(), **overrides}
            try:
                self._pools[redis_url] = ConnectionPool.from_url(
                    redis_url, **connection_kwargs
                )
            except ValueError as e:
                raise ConfigurationError(
                    message=f"Invalid Redis URL: {e}",
                    config_key="REDIS_URL",
                    config_value=redis_url,
                    original_error=e,
                )

            parsed_url = urlparse(redis_url)
            logger.info(
                "Redis connection pool created",
                extra={
                    "host": parsed_url.hostname or "localhost",
                    "port": parsed_url.port or 6379,
                    "max_connections": connection_kwargs["max_connections"],
                },
            )

        return Redis(connection_pool=self._pools[redis_url])

    async def close(self) -> None:
        """Disconnect all pools created by this factory."""
        for pool in self._pools.values():
            await pool.disconnect()
        self._pools.clear()
        logger.info("Redis connection factory closed")

    def get_metrics(self) -> Dict[str, Any]:
        """Get connection factory metrics."""
        return {
            "pools": len(self._pools),
            "max_connections": self.settings.REDIS_MAX_CONNECTIONS,
        }
