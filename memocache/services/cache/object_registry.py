"""
Object Identity Registry

Assigns each memoizing instance a stable, monotonically increasing integer id
without touching the instance itself.
"""

import itertools
import threading
import weakref
from typing import Any, Dict


class ObjectIdRegistry:
    """
    Registry mapping live objects to integer ids.

    Entries are dropped when the object is garbage collected, so a recycled
    id() never inherits an old number. Objects that cannot be weakly
    referenced are kept alive by the registry instead.
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._ids: Dict[int, int] = {}
        self._pinned: Dict[int, Any] = {}
        # Reentrant: finalizers may run while the lock is held
        self._lock = threading.RLock()

    def identify(self, obj: Any) -> int:
        """Return obj's id, assigning the next one on first sight."""
        address = id(obj)
        with self._lock:
            object_id = self._ids.get(address)
            if object_id is not None:
                return object_id

            object_id = next(self._counter)
            self._ids[address] = object_id
            try:
                weakref.finalize(obj, self._forget, address)
            except TypeError:
                self._pinned[address] = obj
            return object_id

    def _forget(self, address: int) -> None:
        with self._lock:
            self._ids.pop(address, None)

    def __contains__(self, obj: Any) -> bool:
        with self._lock:
            return id(obj) in self._ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)


# Global registry shared by all memoized methods
object_registry = ObjectIdRegistry()
