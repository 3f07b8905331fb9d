"""Redis-backed ``CacheStore``.

Values are serialized with orjson, so only JSON-compatible values (plus the
types orjson handles natively: dataclasses, datetimes, UUIDs) can be stored.
Keys live under ``<namespace>:<identity>:`` so several stores can share one
Redis database.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Optional

import orjson
import redis
from redis.exceptions import RedisError

from beanmeta.config import CacheSettings
from beanmeta.exceptions import StoreError

logger = logging.getLogger(__name__)

# Redis operations may surface redis-py errors along with socket failures.
REDIS_ERRORS = (RedisError, OSError)

# orjson raises JSONEncodeError (a TypeError) and JSONDecodeError (a ValueError).
SERIALIZATION_ERRORS = (TypeError, ValueError)

_SCAN_BATCH = 500


class RedisStore:
    """Stores cache entries in Redis through a synchronous client."""

    def __init__(self, client: redis.Redis, identity: str, *, namespace: Optional[str] = None):
        if not identity:
            raise ValueError("Cache stores require a non-empty identity")
        self._client = client
        self._identity = identity
        resolved_namespace = namespace if namespace is not None else CacheSettings().redis_namespace
        self._prefix = f"{resolved_namespace}:{identity}:"

    @classmethod
    def from_url(cls, url: str, identity: str, *, settings: Optional[CacheSettings] = None) -> "RedisStore":
        resolved = settings if settings is not None else CacheSettings.from_env()
        client = redis.Redis.from_url(url)
        logger.info("Created Redis cache store %s at namespace %s", identity, resolved.redis_namespace)
        return cls(client, identity, namespace=resolved.redis_namespace)

    @property
    def identity(self) -> str:
        return self._identity

    def _redis_key(self, key: Hashable) -> str:
        if isinstance(key, str):
            return self._prefix + key
        try:
            encoded = orjson.dumps(key, option=orjson.OPT_SORT_KEYS).decode("utf-8")
        except SERIALIZATION_ERRORS as exc:
            raise StoreError.operation_failed(self._identity, "encode key", key) from exc
        return self._prefix + encoded

    def _decode(self, key: Hashable, raw: Any) -> Any:
        if raw is None:
            return None
        try:
            return orjson.loads(raw)
        except SERIALIZATION_ERRORS as exc:
            raise StoreError.operation_failed(self._identity, "decode value", key) from exc

    def put(self, key: Hashable, value: Any) -> None:
        redis_key = self._redis_key(key)
        try:
            payload = orjson.dumps(value)
        except SERIALIZATION_ERRORS as exc:
            raise StoreError.operation_failed(self._identity, "encode value", key) from exc
        try:
            self._client.set(redis_key, payload)
        except REDIS_ERRORS as exc:
            raise StoreError.operation_failed(self._identity, "put", key) from exc

    def get(self, key: Hashable) -> Optional[Any]:
        redis_key = self._redis_key(key)
        try:
            raw = self._client.get(redis_key)
        except REDIS_ERRORS as exc:
            raise StoreError.operation_failed(self._identity, "get", key) from exc
        return self._decode(key, raw)

    def remove(self, key: Hashable) -> Optional[Any]:
        redis_key = self._redis_key(key)
        try:
            raw = self._client.getdel(redis_key)
        except REDIS_ERRORS as exc:
            raise StoreError.operation_failed(self._identity, "remove", key) from exc
        return self._decode(key, raw)

    def clear(self) -> None:
        try:
            keys = list(self._client.scan_iter(match=f"{self._prefix}*", count=_SCAN_BATCH))
            if keys:
                self._client.delete(*keys)
        except REDIS_ERRORS as exc:
            raise StoreError.operation_failed(self._identity, "clear") from exc
        logger.debug("Cleared %d entries from Redis cache store %s", len(keys), self._identity)

    def size(self) -> int:
        try:
            return sum(1 for _ in self._client.scan_iter(match=f"{self._prefix}*", count=_SCAN_BATCH))
        except REDIS_ERRORS as exc:
            raise StoreError.operation_failed(self._identity, "size") from exc


__all__ = ["REDIS_ERRORS", "RedisStore"]
