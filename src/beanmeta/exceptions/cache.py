"""Cache exceptions."""

from __future__ import annotations

from typing import Any

from . import ApplicationError


class CacheError(ApplicationError):
    """Base cache error."""

    pass


class LockTimeoutError(CacheError):
    """Per-key lock was not acquired within the configured timeout."""

    @classmethod
    def for_key(cls, key: Any, identity: str, timeout_ms: int) -> "LockTimeoutError":
        return cls(
            f"Couldn't get a lock in {timeout_ms}ms for the key {key!r} at the cache {identity}",
            key=key,
            identity=identity,
            timeout_ms=timeout_ms,
        )


class InterruptedWaitError(CacheError):
    """Thread was interrupted while waiting for a per-key lock."""

    @classmethod
    def for_key(cls, key: Any, identity: str) -> "InterruptedWaitError":
        return cls(
            f"Got interrupted while trying to acquire lock for key {key!r} at the cache {identity}",
            key=key,
            identity=identity,
        )


class StoreError(CacheError):
    """Inner cache store operation failed."""

    @classmethod
    def operation_failed(cls, identity: str, operation: str, key: Any = None) -> "StoreError":
        msg = f"Cache store {identity} failed to {operation}"
        if key is not None:
            msg += f" for key {key!r}"
        return cls(msg, identity=identity, operation=operation, key=key)


__all__ = ["CacheError", "InterruptedWaitError", "LockTimeoutError", "StoreError"]
