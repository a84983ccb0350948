"""
Unit tests for the process-wide default store and the store factory.
"""

import pytest

from memocache.core.config import Settings
from memocache.domain.cache.store_interfaces import CacheStore
from memocache.domain.cache.exceptions import ConfigurationError
from memocache.infrastructure.stores.memory_store import MemoryCacheStore
from memocache.infrastructure.stores.redis_store import RedisCacheStore
from memocache.services.cache.default_store import (
    DefaultStore,
    get_default_store,
    set_default_store,
    reset_default_store,
)
from memocache.services.cache.store_factory import build_store, configure_default_store


class TestDefaultStore:
    """Test DefaultStore cell."""

    def test_initialized_with_memory_store(self):
        """Test a fresh cell holds an in-memory store."""
        assert isinstance(DefaultStore().get(), MemoryCacheStore)

    def test_replace_returns_previous(self):
        """Test replace swaps the store and hands back the old one."""
        initial = MemoryCacheStore()
        cell = DefaultStore(initial)
        replacement = MemoryCacheStore()

        assert cell.replace(replacement) is initial
        assert cell.get() is replacement

    def test_replace_rejects_non_store(self):
        """Test only CacheStore implementations are accepted."""
        cell = DefaultStore()

        with pytest.raises(ConfigurationError):
            cell.replace(object())

    def test_structural_store_accepted(self, dict_store):
        """Test a class with the five operations is accepted without inheriting."""
        assert isinstance(dict_store, CacheStore)
        set_default_store(dict_store)
        assert get_default_store() is dict_store

    def test_partial_store_rejected(self):
        """Test a class missing operations is still rejected."""

        class ReadOnly:
            async def get(self, key, default=None):
                return default

            async def has(self, key):
                return False

        with pytest.raises(ConfigurationError):
            DefaultStore().replace(ReadOnly())
        with pytest.raises(ConfigurationError):
            DefaultStore().replace({})

    def test_module_helpers(self):
        """Test set/get/reset helpers operate on the global cell."""
        store = MemoryCacheStore()
        set_default_store(store)
        assert get_default_store() is store

        assert reset_default_store() is store
        assert get_default_store() is not store
        assert isinstance(get_default_store(), MemoryCacheStore)


class TestStoreFactory:
    """Test building stores from settings."""

    def test_build_memory_store(self):
        """Test memory backend."""
        assert isinstance(build_store(Settings(CACHE_BACKEND="memory")), MemoryCacheStore)

    def test_build_redis_store(self):
        """Test redis backend uses REDIS_URL."""
        store = build_store(
            Settings(CACHE_BACKEND="redis", REDIS_URL="redis://cache:6379/3")
        )

        assert isinstance(store, RedisCacheStore)
        assert store.redis.connection_pool.connection_kwargs["host"] == "cache"

    def test_unknown_backend(self):
        """Test unknown backends raise ConfigurationError."""
        settings = Settings.model_construct(CACHE_BACKEND="memcached")

        with pytest.raises(ConfigurationError, match="Unknown cache backend"):
            build_store(settings)

    def test_configure_default_store(self):
        """Test configured store becomes the process-wide default."""
        store = configure_default_store(Settings(CACHE_BACKEND="redis"))

        assert get_default_store() is store
        assert isinstance(store, RedisCacheStore)
