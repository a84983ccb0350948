"""
In-Memory Cache Store

Process-local cache store with lazy, time-based expiry.
Expired payloads are detected and removed on access; nothing sweeps in the background.
"""

import logging
import threading
from typing import Any, Callable, Dict, Optional, Union

from ...constants import get_current_timestamp
from ...domain.cache.store_interfaces import CacheStore
from ...domain.cache.value_objects import TTL, CachePayload

logger = logging.getLogger(__name__)


class MemoryCacheStore(CacheStore):
    """In-memory implementation of the cache store."""

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._cache: Dict[str, CachePayload] = {}
        self._clock = clock or get_current_timestamp
        self._lock = threading.RLock()

    async def set(self, key: str, ttl: Union[TTL, int, float], value: Any) -> None:
        """Store value with a finite expiry, overwriting any existing payload."""
        payload = CachePayload.expiring(value, ttl, self._clock())
        with self._lock:
            self._cache[key] = payload

    async def forever(self, key: str, value: Any) -> None:
        """Store value without expiry."""
        with self._lock:
            self._cache[key] = CachePayload.permanent(value)

    async def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Get live value for key."""
        payload = self._live_payload(key)
        if payload is None:
            return default
        return payload.data

    async def has(self, key: str) -> bool:
        """Check if a live value exists for key."""
        return self._live_payload(key) is not None

    async def delete(self, key: str) -> bool:
        """Delete key if present."""
        with self._lock:
            return self._cache.pop(key, None) is not None

    async def clear(self) -> None:
        """Drop every stored payload."""
        with self._lock:
            count = len(self._cache)
            self._cache.clear()
        logger.debug(f"Cleared {count} in-memory cache entries")

    def _live_payload(self, key: str) -> Optional[CachePayload]:
        """Return payload for key unless missing or expired.

        Expired payloads are evicted eagerly as a side effect.
        """
        with self._lock:
            payload = self._cache.get(key)
            if payload is None:
                return None
            if payload.is_expired(self._clock()):
                del self._cache[key]
                logger.debug(f"Evicted expired cache entry: {key}")
                return None
            return payload

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
