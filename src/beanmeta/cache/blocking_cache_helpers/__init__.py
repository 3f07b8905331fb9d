"""Locking primitives used by ``BlockingCache``."""

from .key_lock import ReentrantKeyLock
from .lock_table import LockTable

__all__ = ["LockTable", "ReentrantKeyLock"]
