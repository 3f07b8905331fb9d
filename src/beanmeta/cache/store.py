"""Key-value store capability wrapped by ``BlockingCache``."""

from __future__ import annotations

from typing import Any, Hashable, Optional, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Minimal store interface; ``None`` signals an absent key."""

    @property
    def identity(self) -> str: ...

    def put(self, key: Hashable, value: Any) -> None: ...

    def get(self, key: Hashable) -> Optional[Any]: ...

    def remove(self, key: Hashable) -> Optional[Any]: ...

    def clear(self) -> None: ...

    def size(self) -> int: ...


class InMemoryStore:
    """Unbounded dict-backed store."""

    def __init__(self, identity: str):
        if not identity:
            raise ValueError("Cache stores require a non-empty identity")
        self._identity = identity
        self._entries: dict[Hashable, Any] = {}

    @property
    def identity(self) -> str:
        return self._identity

    def put(self, key: Hashable, value: Any) -> None:
        self._entries[key] = value

    def get(self, key: Hashable) -> Optional[Any]:
        return self._entries.get(key)

    def remove(self, key: Hashable) -> Optional[Any]:
        return self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def size(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"InMemoryStore(identity={self._identity!r}, size={len(self._entries)})"


__all__ = ["CacheStore", "InMemoryStore"]
