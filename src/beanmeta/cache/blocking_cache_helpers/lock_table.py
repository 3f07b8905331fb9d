"""Per-key lock registry for ``BlockingCache``."""

from __future__ import annotations

import logging
import threading
from typing import Any, Hashable, Optional

from .key_lock import ReentrantKeyLock

logger = logging.getLogger(__name__)


class LockTable:
    """Maps each key ever requested to its lock.

    A key's lock is created once, on first request, and kept for the life of
    the table even after the key leaves the underlying store. Lock identity
    therefore survives remove/re-populate races.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[Hashable, ReentrantKeyLock] = {}

    def lock_for(self, key: Hashable) -> ReentrantKeyLock:
        """Return the lock for ``key``, creating it if absent."""
        existing = self._locks.get(key)
        if existing is not None:
            return existing
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = ReentrantKeyLock()
                self._locks[key] = lock
                logger.debug("Created lock for key %r (%d keys tracked)", key, len(self._locks))
            return lock

    def get(self, key: Any) -> Optional[ReentrantKeyLock]:
        return self._locks.get(key)

    def __len__(self) -> int:
        return len(self._locks)

    def __contains__(self, key: Any) -> bool:
        return key in self._locks


__all__ = ["LockTable"]
