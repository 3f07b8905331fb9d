"""Annotation lookup and subtype checks used during accessor resolution."""

from __future__ import annotations

import inspect
import logging
import typing
from typing import Any, ClassVar, Final

logger = logging.getLogger(__name__)

_EMPTY = inspect.Parameter.empty


def function_hints(func: Any) -> dict[str, Any]:
    """Return resolved annotations for ``func``, falling back to the raw ones.

    Forward references that cannot be evaluated stay as strings; they still
    take part in equality checks.
    """
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError, AttributeError) as exc:
        logger.debug("Unresolvable annotations on %s (%s); using raw annotations", getattr(func, "__qualname__", func), exc)
        return dict(getattr(func, "__annotations__", None) or {})


def class_hints(cls: type) -> dict[str, Any]:
    """Return resolved annotations declared across ``cls`` and its bases."""
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError, AttributeError) as exc:
        logger.debug("Unresolvable annotations on %s (%s); using raw annotations", cls.__qualname__, exc)
        merged: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            merged.update(inspect.get_annotations(klass))
        return merged


def declared_annotations(cls: type) -> dict[str, Any]:
    """Return the annotations written in the body of ``cls`` itself."""
    return dict(inspect.get_annotations(cls))


def normalize(annotation: Any) -> Any:
    """Map a missing or ``Any`` annotation to ``object``, the root type."""
    if annotation is _EMPTY or annotation is Any:
        return object
    return annotation


def _as_class(annotation: Any) -> type | None:
    if isinstance(annotation, type):
        return annotation
    origin = typing.get_origin(annotation)
    if isinstance(origin, type):
        return origin
    return None


def is_assignable(parent: Any, child: Any) -> bool:
    """True when a value typed ``child`` can be used where ``parent`` is expected."""
    if parent == child or parent is object:
        return True
    parent_cls = _as_class(parent)
    child_cls = _as_class(child)
    if parent_cls is None or child_cls is None:
        return False
    try:
        return issubclass(child_cls, parent_cls)
    except TypeError:
        return False


def unwrap_qualifiers(annotation: Any) -> tuple[Any, bool, bool]:
    """Strip ``ClassVar``/``Final`` wrappers.

    Returns ``(inner_type, is_class_var, is_final)``.
    """
    is_class_var = False
    is_final = False
    current = annotation
    while True:
        if current is ClassVar:
            return object, True, is_final
        if current is Final:
            return object, is_class_var, True
        origin = typing.get_origin(current)
        if origin is ClassVar:
            is_class_var = True
        elif origin is Final:
            is_final = True
        else:
            return normalize(current), is_class_var, is_final
        args = typing.get_args(current)
        current = args[0] if args else object


__all__ = [
    "class_hints",
    "declared_annotations",
    "function_hints",
    "is_assignable",
    "normalize",
    "unwrap_qualifiers",
]
