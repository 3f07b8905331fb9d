"""Shared configuration helpers and settings dataclasses."""

from .errors import ConfigurationError
from .runtime import env_bool, env_int, env_str
from .settings import CacheSettings, ReflectionSettings

__all__ = [
    "CacheSettings",
    "ConfigurationError",
    "ReflectionSettings",
    "env_bool",
    "env_int",
    "env_str",
]
