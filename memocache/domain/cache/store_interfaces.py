"""
Cache Store Interfaces

Abstract store interface following the Repository pattern.
Defines the contract every cache backend implements.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Union

from .value_objects import TTL

_STORE_OPERATIONS = ("set", "forever", "get", "has", "delete")


class CacheStore(ABC):
    """
    Abstract cache store.

    A miss is reported as the default value (get) or False (has),
    never as an exception. Transport failures raise StoreError.

    Any class providing the five operations counts as a CacheStore for
    isinstance checks, so stores need not inherit from it.
    """

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is CacheStore:
            if all(callable(getattr(subclass, name, None)) for name in _STORE_OPERATIONS):
                return True
        return NotImplemented

    @abstractmethod
    async def set(self, key: str, ttl: Union[TTL, int, float], value: Any) -> None:
        """Store value under key, expiring ttl seconds from now."""
        pass

    @abstractmethod
    async def forever(self, key: str, value: Any) -> None:
        """Store value under key without expiry."""
        pass

    @abstractmethod
    async def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Get live value for key, or default when missing or expired."""
        pass

    @abstractmethod
    async def has(self, key: str) -> bool:
        """Check if a live value exists for key."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete key; return whether anything was removed."""
        pass
