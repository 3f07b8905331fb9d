"""Finds a zero-argument constructor for a class."""

from __future__ import annotations

import inspect
import logging
from typing import Optional

from ..invoker import DefaultConstructor

logger = logging.getLogger(__name__)

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def locate_default_constructor(cls: type) -> Optional[DefaultConstructor]:
    """Return a handle when ``cls()`` is callable without arguments.

    Abstract classes and protocols are never instantiable. Classes whose
    signature cannot be introspected (some builtins) are treated as having no
    default constructor.
    """
    if inspect.isabstract(cls) or getattr(cls, "_is_protocol", False):
        return None
    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError) as exc:
        logger.debug("No introspectable constructor for %s: %s", cls.__qualname__, exc)
        return None

    for parameter in signature.parameters.values():
        if parameter.kind in _VARIADIC:
            continue
        if parameter.default is inspect.Parameter.empty:
            return None
    return DefaultConstructor(cls)


__all__ = ["locate_default_constructor"]
