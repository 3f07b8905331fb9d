"""Collects accessor candidates across a class hierarchy.

The hierarchy is walked in method resolution order, so base classes, ABCs and
``Protocol`` interfaces declared at any level are all visited once, most
derived first. Each attribute name is claimed by the first class that defines
it, the same way attribute lookup resolves it: an override replaces the
inherited method whatever its annotations, and a property replaces the whole
inherited descriptor, setter included.
"""

from __future__ import annotations

import functools
import inspect
import typing
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from ..markers import is_bridge
from ..property_namer import is_getter_name, is_setter_name, method_to_property
from .type_hints import function_hints, normalize

_SKIPPED_BASES: frozenset[Any] = frozenset({object, typing.Generic, typing.Protocol})
_EMPTY = inspect.Parameter.empty

METHOD = "method"
PROPERTY = "property"

_ROLE_METHOD = "method"
_ROLE_GET = "get"
_ROLE_SET = "set"


@dataclass(frozen=True)
class AccessorCandidate:
    """One getter or setter competing for a property name."""

    property_name: str
    member_name: str
    function: Callable[..., Any]
    value_type: Any
    declaring_type: type
    kind: str = METHOD

    def describe(self) -> str:
        return f"{self.declaring_type.__qualname__}.{self.member_name}"


@dataclass(frozen=True)
class Member:
    """A method or descriptor accessor declared on one class of the hierarchy."""

    name: str
    function: Callable[..., Any]
    declaring_type: type
    kind: str
    role: str
    parameter_types: tuple[Any, ...]
    return_type: Any

    def candidate(self, property_name: str, value_type: Any) -> AccessorCandidate:
        return AccessorCandidate(property_name, self.name, self.function, value_type, self.declaring_type, self.kind)


def walk_hierarchy(cls: type) -> Iterator[type]:
    """Yield ``cls`` and each of its supertypes once, in method resolution order."""
    for klass in cls.__mro__:
        if klass not in _SKIPPED_BASES:
            yield klass


def _instance_parameters(func: Callable[..., Any]) -> list[inspect.Parameter] | None:
    """Parameters after ``self``, or ``None`` when ``func`` cannot take an instance."""
    try:
        parameters = list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        return None
    if not parameters:
        return None
    return parameters[1:]


def _method_member(klass: type, name: str, func: Callable[..., Any]) -> Member | None:
    parameters = _instance_parameters(func)
    if parameters is None:
        return None
    hints = function_hints(func)
    parameter_types = tuple(normalize(hints.get(p.name, _EMPTY)) for p in parameters)
    return_type = normalize(hints.get("return", _EMPTY))
    return Member(name, func, klass, METHOD, _ROLE_METHOD, parameter_types, return_type)


def _getter_member(klass: type, name: str, getter: Callable[..., Any]) -> Member:
    return_type = normalize(function_hints(getter).get("return", _EMPTY))
    return Member(name, getter, klass, PROPERTY, _ROLE_GET, (), return_type)


def _property_members(klass: type, name: str, descriptor: Any) -> Iterator[Member]:
    if isinstance(descriptor, functools.cached_property):
        yield _getter_member(klass, name, descriptor.func)
        return

    if descriptor.fget is not None:
        yield _getter_member(klass, name, descriptor.fget)
    if descriptor.fset is not None:
        parameters = _instance_parameters(descriptor.fset)
        if parameters is None or len(parameters) != 1:
            return
        value_type = normalize(function_hints(descriptor.fset).get(parameters[0].name, _EMPTY))
        yield Member(name, descriptor.fset, klass, PROPERTY, _ROLE_SET, (value_type,), type(None))


def _is_bridge_attribute(value: Any) -> bool:
    if isinstance(value, property):
        return value.fget is not None and is_bridge(value.fget)
    return inspect.isfunction(value) and is_bridge(value)


def _attribute_members(klass: type, name: str, value: Any) -> Iterator[Member]:
    if isinstance(value, (property, functools.cached_property)):
        yield from _property_members(klass, name, value)
    elif inspect.isfunction(value):
        member = _method_member(klass, name, value)
        if member is not None:
            yield member


def collect_unique_members(cls: type) -> list[Member]:
    """Return the accessor-capable members ``cls`` actually exposes.

    Any attribute claims its name for the whole hierarchy below it, so an
    inherited method or descriptor under the same name never competes.
    Bridge-marked functions are skipped without claiming the name; the
    ancestor declaration they forward to stays visible.
    """
    claimed: set[str] = set()
    members: list[Member] = []
    for klass in walk_hierarchy(cls):
        for name, value in vars(klass).items():
            if name in claimed or _is_bridge_attribute(value):
                continue
            claimed.add(name)
            members.extend(_attribute_members(klass, name, value))
    return members


def collect_getter_candidates(members: list[Member]) -> dict[str, list[AccessorCandidate]]:
    """Group zero-argument ``get``/``is`` methods and property getters by property name."""
    groups: dict[str, list[AccessorCandidate]] = {}
    for member in members:
        if member.kind == PROPERTY:
            if member.role == _ROLE_GET:
                groups.setdefault(member.name, []).append(member.candidate(member.name, member.return_type))
            continue
        if member.parameter_types or not is_getter_name(member.name):
            continue
        property_name = method_to_property(member.name)
        if property_name:
            groups.setdefault(property_name, []).append(member.candidate(property_name, member.return_type))
    return groups


def collect_setter_candidates(members: list[Member]) -> dict[str, list[AccessorCandidate]]:
    """Group one-argument ``set`` methods and property setters by property name."""
    groups: dict[str, list[AccessorCandidate]] = {}
    for member in members:
        if member.kind == PROPERTY:
            if member.role == _ROLE_SET:
                groups.setdefault(member.name, []).append(member.candidate(member.name, member.parameter_types[0]))
            continue
        if len(member.parameter_types) != 1 or not is_setter_name(member.name):
            continue
        property_name = method_to_property(member.name)
        if property_name:
            groups.setdefault(property_name, []).append(member.candidate(property_name, member.parameter_types[0]))
    return groups


__all__ = [
    "AccessorCandidate",
    "METHOD",
    "Member",
    "PROPERTY",
    "collect_getter_candidates",
    "collect_setter_candidates",
    "collect_unique_members",
    "walk_hierarchy",
]
