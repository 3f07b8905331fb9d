"""Exception classes for beanmeta.

All package exceptions inherit from ``ApplicationError`` so callers can catch a
single base class.

Exception classes support two patterns:
1. No-argument raise: raise CacheError()
2. Contextual attributes: err = LockTimeoutError(key="k", timeout_ms=50); raise err
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all beanmeta errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


from .cache import CacheError, InterruptedWaitError, LockTimeoutError, StoreError  # noqa: E402
from .reflection import (  # noqa: E402
    AmbiguousAccessorError,
    InvocationError,
    NoDefaultConstructorError,
    PropertyNotFoundError,
    ReflectionError,
)

__all__ = [
    "AmbiguousAccessorError",
    "ApplicationError",
    "CacheError",
    "InterruptedWaitError",
    "InvocationError",
    "LockTimeoutError",
    "NoDefaultConstructorError",
    "PropertyNotFoundError",
    "ReflectionError",
    "StoreError",
]
