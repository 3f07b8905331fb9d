"""Blocking memoizing cache decorator.

``BlockingCache`` wraps a ``CacheStore`` so that, for each key, only one
thread computes a missing value while other threads asking for the same key
wait. A ``get`` that misses returns ``None`` and leaves the caller holding the
key's lock; the caller is expected to compute the value and ``put`` it, which
releases the lock and wakes the waiters. A ``get`` that hits releases the lock
at once, so readers of populated keys never serialize.

The lock guards only the miss-then-fill window for one key. It is not a
read/write lock over the stored value.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, Optional

from beanmeta.config import CacheSettings
from beanmeta.exceptions import InterruptedWaitError, LockTimeoutError

from .blocking_cache_helpers import LockTable, ReentrantKeyLock
from .interruption import ThreadInterrupted
from .store import CacheStore

logger = logging.getLogger(__name__)


class BlockingCache:
    """Per-key blocking decorator over a ``CacheStore``.

    Args:
        delegate: Inner store the values are read from and written to.
        timeout_ms: Maximum wait for a key's lock in ``get``; ``0`` waits forever.
        release_on_remove: When true, ``remove`` also releases the caller's
            lock on the key. The default keeps the lock held, so a thread that
            removes a key after a miss must still ``put`` to unblock waiters.
    """

    def __init__(self, delegate: CacheStore, timeout_ms: int = 0, *, release_on_remove: bool = False):
        self._delegate = delegate
        self._locks = LockTable()
        self._timeout_ms = 0
        self.timeout_ms = timeout_ms
        self._release_on_remove = release_on_remove

    @classmethod
    def from_settings(cls, delegate: CacheStore, settings: Optional[CacheSettings] = None) -> "BlockingCache":
        resolved = settings if settings is not None else CacheSettings.from_env()
        return cls(
            delegate,
            resolved.timeout_ms,
            release_on_remove=resolved.release_on_remove,
        )

    @property
    def identity(self) -> str:
        return self._delegate.identity

    @property
    def delegate(self) -> CacheStore:
        return self._delegate

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    @timeout_ms.setter
    def timeout_ms(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"timeout_ms must be >= 0, got {value}")
        self._timeout_ms = int(value)

    @property
    def release_on_remove(self) -> bool:
        return self._release_on_remove

    def size(self) -> int:
        return self._delegate.size()

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` and release the caller's lock on ``key``."""
        try:
            self._delegate.put(key, value)
        finally:
            self._release_lock(key)

    def get(self, key: Hashable) -> Optional[Any]:
        """Return the cached value, or ``None`` while keeping the key locked.

        Raises:
            LockTimeoutError: the lock was not acquired within ``timeout_ms``.
            InterruptedWaitError: the waiting thread was interrupted.
        """
        self._acquire_lock(key)
        try:
            value = self._delegate.get(key)
        except Exception:
            self._release_lock(key)
            raise
        if value is not None:
            self._release_lock(key)
        return value

    def remove(self, key: Hashable) -> Optional[Any]:
        try:
            return self._delegate.remove(key)
        finally:
            if self._release_on_remove:
                self._release_lock(key)

    def clear(self) -> None:
        self._delegate.clear()

    def compute_if_absent(self, key: Hashable, factory: Callable[[Hashable], Any]) -> Any:
        """Return the value for ``key``, computing and storing it on a miss.

        Only one thread runs ``factory`` for a given key at a time. If the
        factory raises, the lock is released so waiters can retry.
        """
        value = self.get(key)
        if value is not None:
            return value
        try:
            value = factory(key)
        except Exception:
            self._release_lock(key)
            raise
        self.put(key, value)
        return value

    def _acquire_lock(self, key: Hashable) -> None:
        lock = self._locks.lock_for(key)
        try:
            if self._timeout_ms > 0:
                acquired = lock.acquire(timeout=self._timeout_ms / 1000)
                if not acquired:
                    logger.warning(
                        "Timed out after %dms waiting for key %r at cache %s",
                        self._timeout_ms,
                        key,
                        self.identity,
                    )
                    raise LockTimeoutError.for_key(key, self.identity, self._timeout_ms)
            else:
                lock.acquire()
        except ThreadInterrupted as exc:
            raise InterruptedWaitError.for_key(key, self.identity) from exc

    def _release_lock(self, key: Hashable) -> None:
        lock: Optional[ReentrantKeyLock] = self._locks.get(key)
        if lock is None or not lock.is_held_by_current_thread():
            return
        lock.release()

    def __repr__(self) -> str:
        return f"BlockingCache(identity={self.identity!r}, timeout_ms={self._timeout_ms})"


__all__ = ["BlockingCache"]
