"""
Process-wide Default Cache Store

Holds the store used by memoized methods that were not given one explicitly.
The slot is read on every call, so replacing it affects already-decorated methods.
"""

import threading
from typing import Optional

import structlog

from ...domain.cache.exceptions import ConfigurationError
from ...domain.cache.store_interfaces import CacheStore
from ...infrastructure.stores.memory_store import MemoryCacheStore

logger = structlog.get_logger(__name__)


class DefaultStore:
    """Lock-guarded cell holding the active cache store."""

    def __init__(self, store: Optional[CacheStore] = None):
        self._lock = threading.RLock()
        self._store: CacheStore = store or MemoryCacheStore()

    def get(self) -> CacheStore:
        with self._lock:
            return self._store

    def replace(self, store: CacheStore) -> CacheStore:
        """Install store and return the one it replaced."""
        if not isinstance(store, CacheStore):
            raise ConfigurationError(
                "Default store must provide set, forever, get, has and delete",
                config_key="store",
                config_value=store,
            )
        with self._lock:
            previous, self._store = self._store, store
        logger.info(
            "default_cache_store_replaced",
            previous=type(previous).__name__,
            current=type(store).__name__,
        )
        return previous

    def reset(self) -> CacheStore:
        """Reinstall a fresh in-memory store."""
        return self.replace(MemoryCacheStore())


# Global default store instance
default_store = DefaultStore()


def get_default_store() -> CacheStore:
    """Get the current process-wide cache store."""
    return default_store.get()


def set_default_store(store: CacheStore) -> CacheStore:
    """Replace the process-wide cache store; returns the previous one."""
    return default_store.replace(store)


def reset_default_store() -> CacheStore:
    """Restore a fresh in-memory default store; returns the previous one."""
    return default_store.reset()
