"""Settings dataclasses for the metadata registry and blocking cache."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError
from .runtime import env_bool, env_int, env_str

CLASS_CACHE_ENABLED_ENV = "BEANMETA_CLASS_CACHE_ENABLED"
BLOCKING_TIMEOUT_MS_ENV = "BEANMETA_BLOCKING_TIMEOUT_MS"
RELEASE_LOCK_ON_REMOVE_ENV = "BEANMETA_RELEASE_LOCK_ON_REMOVE"
REDIS_NAMESPACE_ENV = "BEANMETA_REDIS_NAMESPACE"

DEFAULT_REDIS_NAMESPACE = "beanmeta"


@dataclass(frozen=True)
class ReflectionSettings:
    """Configuration context for a ``MetadataRegistry``."""

    class_cache_enabled: bool = True

    @classmethod
    def from_env(cls) -> "ReflectionSettings":
        enabled = env_bool(CLASS_CACHE_ENABLED_ENV, or_value=True)
        return cls(class_cache_enabled=bool(enabled))


@dataclass(frozen=True)
class CacheSettings:
    """Configuration context for ``BlockingCache`` and its stores.

    ``timeout_ms`` of zero means a blocked ``get`` waits indefinitely.
    """

    timeout_ms: int = 0
    release_on_remove: bool = False
    redis_namespace: str = DEFAULT_REDIS_NAMESPACE

    def __post_init__(self) -> None:
        if self.timeout_ms < 0:
            raise ConfigurationError.invalid_value("timeout_ms", self.timeout_ms, "Must be >= 0")
        if not self.redis_namespace:
            raise ConfigurationError.missing_value("redis_namespace")

    @classmethod
    def from_env(cls) -> "CacheSettings":
        timeout_ms = env_int(BLOCKING_TIMEOUT_MS_ENV, or_value=0, minimum=0)
        release_on_remove = env_bool(RELEASE_LOCK_ON_REMOVE_ENV, or_value=False)
        namespace = env_str(REDIS_NAMESPACE_ENV, or_value=DEFAULT_REDIS_NAMESPACE)
        return cls(
            timeout_ms=int(timeout_ms or 0),
            release_on_remove=bool(release_on_remove),
            redis_namespace=str(namespace),
        )


__all__ = [
    "BLOCKING_TIMEOUT_MS_ENV",
    "CLASS_CACHE_ENABLED_ENV",
    "CacheSettings",
    "DEFAULT_REDIS_NAMESPACE",
    "REDIS_NAMESPACE_ENV",
    "RELEASE_LOCK_ON_REMOVE_ENV",
    "ReflectionSettings",
]
