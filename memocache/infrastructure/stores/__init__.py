"""
Cache Store Implementations

- MemoryCacheStore: process-local store with lazy expiry
- RedisCacheStore: Redis-backed store with native key expiry
"""

from .memory_store import MemoryCacheStore
from .redis_store import RedisCacheStore

__all__ = ["MemoryCacheStore", "RedisCacheStore"]
