"""
Main pytest configuration for memocache tests.

Fixtures shared by store, domain and memoization tests.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set test environment variables before importing package modules
os.environ["CACHE_BACKEND"] = "memory"

from memocache.infrastructure.stores.memory_store import MemoryCacheStore
from memocache.services.cache.default_store import reset_default_store


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


class DictStore:
    """Store that provides the operations without inheriting CacheStore."""

    def __init__(self):
        self.data = {}

    async def set(self, key, ttl, value):
        self.data[key] = value

    async def forever(self, key, value):
        self.data[key] = value

    async def get(self, key, default=None):
        return self.data.get(key, default)

    async def has(self, key):
        return key in self.data

    async def delete(self, key):
        found = key in self.data
        self.data.pop(key, None)
        return found


@pytest.fixture
def clock():
    """Provide a simulated clock."""
    return FakeClock()


@pytest.fixture
def memory_store(clock):
    """Create in-memory store driven by the simulated clock."""
    return MemoryCacheStore(clock=clock)


@pytest.fixture
def dict_store():
    """Create a plain store class that does not inherit CacheStore."""
    return DictStore()


@pytest.fixture
def mock_redis():
    """Create mock asyncio Redis client."""
    redis = MagicMock()
    redis.set = AsyncMock(return_value=True)
    redis.get = AsyncMock(return_value=None)
    redis.exists = AsyncMock(return_value=0)
    redis.delete = AsyncMock(return_value=0)
    redis.aclose = AsyncMock()
    return redis


@pytest.fixture(autouse=True)
def isolated_default_store():
    """Give every test a fresh process-wide default store."""
    reset_default_store()
    yield
    reset_default_store()
