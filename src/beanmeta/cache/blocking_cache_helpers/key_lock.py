"""Reentrant lock with ownership checks, timed and interruptible acquisition."""

from __future__ import annotations

import threading
import time
from typing import Optional

from ..interruption import interruptible_wait


class ReentrantKeyLock:
    """Exclusive lock owned by one thread at a time.

    Unlike ``threading.RLock`` it can tell whether the calling thread holds
    it, and a blocked ``acquire`` can be woken by ``interrupt()``.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._owner: Optional[int] = None
        self._hold_count = 0

    def acquire(self, timeout: Optional[float] = None) -> bool:
        """Acquire the lock, waiting at most ``timeout`` seconds (forever when ``None``).

        Returns ``False`` on timeout; raises ``ThreadInterrupted`` when the
        waiting thread is interrupted. Neither outcome leaves the lock held.
        """
        me = threading.get_ident()
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._condition:
            if self._owner == me:
                self._hold_count += 1
                return True
            while self._owner is not None:
                if not interruptible_wait(self._condition, deadline):
                    return False
            self._owner = me
            self._hold_count = 1
            return True

    def release(self) -> None:
        with self._condition:
            if self._owner != threading.get_ident():
                raise RuntimeError("cannot release a lock held by another thread")
            self._hold_count -= 1
            if self._hold_count == 0:
                self._owner = None
                self._condition.notify_all()

    def is_held_by_current_thread(self) -> bool:
        with self._condition:
            return self._owner == threading.get_ident()

    @property
    def locked(self) -> bool:
        with self._condition:
            return self._owner is not None


__all__ = ["ReentrantKeyLock"]
