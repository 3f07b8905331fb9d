"""Discovers declared attributes (class-body annotations and slots)."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Iterator

from .type_hints import class_hints, declared_annotations, unwrap_qualifiers

_SLOT_INTERNALS = frozenset({"__dict__", "__weakref__"})


@dataclass(frozen=True)
class DeclaredField:
    """An attribute declared in a class body."""

    name: str
    declaring_type: type
    value_type: Any
    type_wide: bool
    immutable: bool

    @property
    def is_class_constant(self) -> bool:
        return self.type_wide and self.immutable


def _slot_names(klass: type) -> tuple[str, ...]:
    slots = vars(klass).get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    return tuple(name for name in slots if name not in _SLOT_INTERNALS)


def _instance_field_names(klass: type) -> frozenset[str]:
    """Names that live on instances even when the class body assigns a value."""
    names = set(_slot_names(klass))
    if dataclasses.is_dataclass(klass):
        names.update(dc_field.name for dc_field in dataclasses.fields(klass))
    return frozenset(names)


def _declared_fields(klass: type, hints: dict[str, Any]) -> Iterator[DeclaredField]:
    annotations = declared_annotations(klass)
    instance_names = _instance_field_names(klass)
    names = list(annotations)
    names.extend(slot for slot in _slot_names(klass) if slot not in annotations)

    for name in names:
        resolved = hints.get(name, annotations.get(name, object))
        value_type, is_class_var, is_final = unwrap_qualifiers(resolved)
        # PEP 591: a Final name assigned in the class body is a class attribute
        has_class_value = name in vars(klass) and name not in instance_names
        type_wide = is_class_var or (is_final and has_class_value)
        yield DeclaredField(name, klass, value_type, type_wide, is_final)


def iter_declared_fields(cls: type) -> Iterator[DeclaredField]:
    """Yield fields of ``cls`` first, then those of each base class in MRO order.

    A name declared again in a base class is yielded again; callers keep the
    first (most-derived) occurrence.
    """
    hints = class_hints(cls)
    for klass in cls.__mro__:
        if klass is object:
            continue
        yield from _declared_fields(klass, hints)


__all__ = ["DeclaredField", "iter_declared_fields"]
