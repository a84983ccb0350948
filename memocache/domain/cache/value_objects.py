"""
Cache Value Objects

Immutable value objects for the cache domain.
Provides type safety and validation for payloads, TTLs and memoize options.
"""

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Callable, Optional, Sequence, Union

from ...constants import NEVER_EXPIRES
from .exceptions import ConfigurationError

KeyFunction = Callable[[int, str, Sequence[Any]], str]


class KeywordArguments(dict):
    """
    Arguments a call bound by name, passed to key functions as the last item.

    A distinct type so a key function can tell it apart from a dict that was
    passed positionally.
    """


@dataclass(frozen=True)
class TTL:
    """
    Time To Live value object for cache expiration.

    Zero is allowed and means "already expired when written".
    """

    seconds: Union[int, float]

    def __post_init__(self) -> None:
        """Validate TTL value."""
        if isinstance(self.seconds, bool) or not isinstance(self.seconds, Real):
            raise ConfigurationError(
                "TTL must be a number of seconds",
                config_key="ttl",
                config_value=self.seconds,
            )
        if self.seconds < 0:
            raise ConfigurationError(
                "TTL cannot be negative", config_key="ttl", config_value=self.seconds
            )
        if not math.isfinite(self.seconds):
            raise ConfigurationError(
                "TTL must be finite", config_key="ttl", config_value=self.seconds
            )

    @classmethod
    def of(cls, value: Union["TTL", int, float]) -> "TTL":
        """Coerce a TTL or a number of seconds into a TTL."""
        if isinstance(value, TTL):
            return value
        return cls(value)

    @classmethod
    def minutes(cls, minutes: Union[int, float]) -> "TTL":
        """Create TTL from minutes."""
        return cls(minutes * 60)

    @classmethod
    def hours(cls, hours: Union[int, float]) -> "TTL":
        """Create TTL from hours."""
        return cls(hours * 3600)

    @classmethod
    def days(cls, days: Union[int, float]) -> "TTL":
        """Create TTL from days."""
        return cls(days * 86400)

    def __str__(self) -> str:
        return f"{self.seconds}s"


@dataclass(frozen=True)
class CachePayload:
    """
    Stored cache entry: the value and its absolute expiry.

    expire_at is seconds since the epoch, or NEVER_EXPIRES.
    """

    data: Any
    expire_at: Optional[float] = NEVER_EXPIRES

    @classmethod
    def expiring(cls, value: Any, ttl: Union[TTL, int, float], now: float) -> "CachePayload":
        """Create payload that expires ttl seconds after now."""
        return cls(data=value, expire_at=now + TTL.of(ttl).seconds)

    @classmethod
    def permanent(cls, value: Any) -> "CachePayload":
        """Create payload that never expires."""
        return cls(data=value, expire_at=NEVER_EXPIRES)

    @property
    def never_expires(self) -> bool:
        return self.expire_at is NEVER_EXPIRES

    def is_expired(self, now: float) -> bool:
        """Check if payload is expired at the given time."""
        return not self.never_expires and self.expire_at <= now


@dataclass(frozen=True)
class MemoizeOptions:
    """
    Memoization configuration for a single decorated method.

    key, when given, is called as key(object_id, method_name, args). Arguments
    bound by name arrive as a trailing KeywordArguments item.
    """

    ttl: TTL
    key: Optional[KeyFunction] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate options."""
        if self.ttl is None:
            raise ConfigurationError("ttl is required", config_key="ttl")
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "ttl", TTL.of(self.ttl))
        if self.key is not None and not callable(self.key):
            raise ConfigurationError(
                "key must be callable", config_key="key", config_value=self.key
            )
