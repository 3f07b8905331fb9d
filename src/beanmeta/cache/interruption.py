"""Cooperative thread interruption for blocking waits.

Python threads cannot be interrupted from outside. ``interrupt(thread)``
sets a per-thread flag and wakes the condition the thread is blocked on, if
any; waits performed through ``interruptible_wait`` then raise
``ThreadInterrupted`` and clear the flag.

Flags are held weakly against the ``Thread`` object rather than its ident,
which the interpreter recycles once a thread exits.
"""

from __future__ import annotations

import threading
import time
import weakref
from typing import Optional

_registry_lock = threading.Lock()
_interrupted: weakref.WeakSet[threading.Thread] = weakref.WeakSet()
_waiting_on: weakref.WeakKeyDictionary[threading.Thread, threading.Condition] = weakref.WeakKeyDictionary()


class ThreadInterrupted(Exception):
    """The current thread was interrupted while waiting."""


def interrupt(thread: threading.Thread) -> None:
    """Set the interrupt flag of ``thread`` and wake it if it is waiting.

    A thread that has not started or has already finished is left alone.
    """
    if not thread.is_alive():
        return
    with _registry_lock:
        _interrupted.add(thread)
        condition = _waiting_on.get(thread)
    if condition is not None:
        with condition:
            condition.notify_all()


def is_interrupted(*, clear: bool = False) -> bool:
    """Return the current thread's interrupt flag, optionally clearing it."""
    current = threading.current_thread()
    with _registry_lock:
        flagged = current in _interrupted
        if clear:
            _interrupted.discard(current)
    return flagged


def _raise_if_interrupted() -> None:
    if is_interrupted(clear=True):
        raise ThreadInterrupted(f"Thread {threading.current_thread().name} was interrupted")


def interruptible_wait(condition: threading.Condition, deadline: Optional[float]) -> bool:
    """Wait once on ``condition``, which the caller must hold.

    Returns ``False`` when ``deadline`` (a ``time.monotonic()`` value) has
    passed, ``True`` after a wake-up. Raises ``ThreadInterrupted`` if the
    thread is interrupted before or during the wait.
    """
    current = threading.current_thread()
    with _registry_lock:
        _waiting_on[current] = condition
    try:
        _raise_if_interrupted()
        if deadline is None:
            condition.wait()
        else:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            condition.wait(remaining)
        _raise_if_interrupted()
        return True
    finally:
        with _registry_lock:
            _waiting_on.pop(current, None)


__all__ = ["ThreadInterrupted", "interrupt", "interruptible_wait", "is_interrupted"]
