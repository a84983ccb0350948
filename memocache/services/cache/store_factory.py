"""
Cache Store Factory

Builds the configured cache backend and installs it as the default store.
"""

from typing import Optional

import structlog

from ...core.config import Settings, get_settings
from ...domain.cache.exceptions import ConfigurationError
from ...domain.cache.store_interfaces import CacheStore
from ...infrastructure.stores.memory_store import MemoryCacheStore
from ...infrastructure.stores.redis_store import RedisCacheStore
from .default_store import set_default_store

logger = structlog.get_logger(__name__)


def build_store(settings: Optional[Settings] = None) -> CacheStore:
    """
    Create the cache store selected by settings.CACHE_BACKEND.

    Raises:
        ConfigurationError: If the backend name is unknown
    """
    settings = settings or get_settings()

    if settings.CACHE_BACKEND == "memory":
        return MemoryCacheStore()
    if settings.CACHE_BACKEND == "redis":
        return RedisCacheStore.from_settings(settings)

    raise ConfigurationError(
        f"Unknown cache backend: {settings.CACHE_BACKEND}",
        config_key="CACHE_BACKEND",
        config_value=settings.CACHE_BACKEND,
    )


def configure_default_store(settings: Optional[Settings] = None) -> CacheStore:
    """Build the configured store and make it the process-wide default."""
    store = build_store(settings)
    set_default_store(store)
    logger.info("default_cache_store_configured", backend=type(store).__name__)
    return store
