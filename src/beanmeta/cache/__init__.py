"""Blocking memoizing cache and its inner stores."""

from .blocking_cache import BlockingCache
from .interruption import ThreadInterrupted, interrupt, is_interrupted
from .redis_store import RedisStore
from .store import CacheStore, InMemoryStore

__all__ = [
    "BlockingCache",
    "CacheStore",
    "InMemoryStore",
    "RedisStore",
    "ThreadInterrupted",
    "interrupt",
    "is_interrupted",
]
