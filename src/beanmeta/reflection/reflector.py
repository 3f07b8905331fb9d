"""Resolves the readable and writable properties of a class.

Resolution order:

1. collect accessor methods and descriptors across the whole hierarchy,
   one member per attribute name as attribute lookup sees it, bridge stubs
   excluded;
2. resolve getter conflicts (narrowest return type wins), then setter
   conflicts (parameter type must match the resolved getter type);
3. add field invokers for declared attributes not covered by an accessor;
4. record a zero-argument constructor when there is one;
5. build the case-insensitive name index.

An ambiguity aborts resolution with ``AmbiguousAccessorError``; no partial
model is produced.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .invoker import DefaultConstructor, FieldReader, FieldWriter, Invoker, MethodInvoker, PropertyInvoker
from .property_model import PropertyModel
from .property_namer import is_valid_property_name
from .reflector_helpers import (
    AccessorCandidate,
    collect_getter_candidates,
    collect_setter_candidates,
    collect_unique_members,
    iter_declared_fields,
    locate_default_constructor,
    resolve_getter,
    resolve_setter,
)
from .reflector_helpers.method_collector import PROPERTY

logger = logging.getLogger(__name__)


def _invoker_for(candidate: AccessorCandidate, *, is_setter: bool) -> Invoker:
    if candidate.kind == PROPERTY:
        return PropertyInvoker(candidate.member_name, candidate.function, candidate.value_type, is_setter)
    return MethodInvoker(candidate.member_name, candidate.function, candidate.value_type, is_setter)


class Reflector:
    """Single-use builder of the ``PropertyModel`` for one class."""

    def __init__(self, cls: type):
        if not isinstance(cls, type):
            raise TypeError(f"Reflector requires a class, got {cls!r}")
        self._type = cls
        self._getters: dict[str, Invoker] = {}
        self._setters: dict[str, Invoker] = {}
        self._getter_types: dict[str, Any] = {}
        self._setter_types: dict[str, Any] = {}
        self._default_constructor: Optional[DefaultConstructor] = None

    def build(self) -> PropertyModel:
        cls = self._type
        self._default_constructor = locate_default_constructor(cls)

        members = collect_unique_members(cls)
        self._add_get_methods(collect_getter_candidates(members))
        self._add_set_methods(collect_setter_candidates(members))
        self._add_fields()

        model = PropertyModel.build(
            cls,
            getters=self._getters,
            setters=self._setters,
            getter_types=self._getter_types,
            setter_types=self._setter_types,
            default_constructor=self._default_constructor,
        )
        logger.debug(
            "Resolved %s: %d readable, %d writable properties",
            cls.__qualname__,
            len(model.readable_names),
            len(model.writable_names),
        )
        return model

    def _add_get_methods(self, conflicting_getters: dict[str, list[AccessorCandidate]]) -> None:
        for property_name, candidates in conflicting_getters.items():
            getter = resolve_getter(property_name, candidates)
            if is_valid_property_name(property_name):
                self._getters[property_name] = _invoker_for(getter, is_setter=False)
                self._getter_types[property_name] = getter.value_type

    def _add_set_methods(self, conflicting_setters: dict[str, list[AccessorCandidate]]) -> None:
        for property_name, candidates in conflicting_setters.items():
            setter = resolve_setter(property_name, candidates, self._getter_types)
            if is_valid_property_name(property_name):
                self._setters[property_name] = _invoker_for(setter, is_setter=True)
                self._setter_types[property_name] = setter.value_type

    def _add_fields(self) -> None:
        seen: set[str] = set()
        for declared in iter_declared_fields(self._type):
            name = declared.name
            if name in seen or not is_valid_property_name(name):
                continue
            seen.add(name)
            if name not in self._setters and not declared.is_class_constant:
                self._setters[name] = FieldWriter(name, declared.declaring_type, declared.value_type, declared.type_wide)
                self._setter_types[name] = declared.value_type
            if name not in self._getters:
                self._getters[name] = FieldReader(name, declared.declaring_type, declared.value_type)
                self._getter_types[name] = declared.value_type


def resolve(cls: type) -> PropertyModel:
    """Resolve ``cls`` without consulting any cache."""
    return Reflector(cls).build()


__all__ = ["Reflector", "resolve"]
