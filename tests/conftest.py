"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import fnmatch
from typing import Any, Iterator

import pytest

from beanmeta.config import runtime


class FakeRedis:
    """In-memory stand-in for the synchronous ``redis.Redis`` client."""

    def __init__(self):
        self._data: dict[str, bytes] = {}
        self.fail_with: Exception | None = None

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def set(self, key: str, value: str | bytes) -> bool:
        """Set a string value."""
        self._check_failure()
        self._data[key] = value if isinstance(value, bytes) else value.encode()
        return True

    def get(self, key: str) -> bytes | None:
        """Get a string value."""
        self._check_failure()
        return self._data.get(key)

    def getdel(self, key: str) -> bytes | None:
        """Get a value and delete its key."""
        self._check_failure()
        return self._data.pop(key, None)

    def delete(self, *keys: str) -> int:
        """Delete keys, returning how many existed."""
        self._check_failure()
        removed = 0
        for key in keys:
            if self._data.pop(key, None) is not None:
                removed += 1
        return removed

    def scan_iter(self, match: str | None = None, count: int | None = None) -> Iterator[str]:
        """Iterate over keys matching a glob pattern."""
        self._check_failure()
        for key in list(self._data):
            if match is None or fnmatch.fnmatchcase(key, match):
                yield key

    def dump_string(self, key: str) -> bytes | None:
        return self._data.get(key)


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture(autouse=True)
def isolate_runtime_defaults(monkeypatch: Any) -> None:
    """Keep local .env and JSON defaults files out of every test."""
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", {})
