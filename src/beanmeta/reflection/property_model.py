"""Immutable per-class property metadata."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from beanmeta.exceptions import NoDefaultConstructorError, PropertyNotFoundError

from .invoker import DefaultConstructor, Invoker


@dataclass(frozen=True)
class PropertyModel:
    """Readable and writable properties of one class.

    Built once by ``Reflector`` and never mutated afterwards. Two models built
    from the same class compare equal.
    """

    type: type
    readable_names: frozenset[str]
    writable_names: frozenset[str]
    getters: Mapping[str, Invoker]
    setters: Mapping[str, Invoker]
    getter_types: Mapping[str, Any]
    setter_types: Mapping[str, Any]
    case_insensitive_index: Mapping[str, str]
    default_constructor: Optional[DefaultConstructor] = None

    @classmethod
    def build(
        cls,
        owner: type,
        *,
        getters: dict[str, Invoker],
        setters: dict[str, Invoker],
        getter_types: dict[str, Any],
        setter_types: dict[str, Any],
        default_constructor: Optional[DefaultConstructor],
    ) -> "PropertyModel":
        case_insensitive_index: dict[str, str] = {}
        # Readable names first; a writable name colliding under case folding wins
        for name in list(getters) + list(setters):
            case_insensitive_index[name.upper()] = name
        return cls(
            type=owner,
            readable_names=frozenset(getters),
            writable_names=frozenset(setters),
            getters=MappingProxyType(dict(getters)),
            setters=MappingProxyType(dict(setters)),
            getter_types=MappingProxyType(dict(getter_types)),
            setter_types=MappingProxyType(dict(setter_types)),
            case_insensitive_index=MappingProxyType(case_insensitive_index),
            default_constructor=default_constructor,
        )

    def has_getter(self, name: str) -> bool:
        return name in self.getters

    def has_setter(self, name: str) -> bool:
        return name in self.setters

    def getter_type(self, name: str) -> Any:
        try:
            return self.getter_types[name]
        except KeyError:
            raise PropertyNotFoundError.no_getter(name, self.type) from None

    def setter_type(self, name: str) -> Any:
        try:
            return self.setter_types[name]
        except KeyError:
            raise PropertyNotFoundError.no_setter(name, self.type) from None

    def get_getter(self, name: str) -> Invoker:
        try:
            return self.getters[name]
        except KeyError:
            raise PropertyNotFoundError.no_getter(name, self.type) from None

    def get_setter(self, name: str) -> Invoker:
        try:
            return self.setters[name]
        except KeyError:
            raise PropertyNotFoundError.no_setter(name, self.type) from None

    def resolve_case_insensitive(self, name: str) -> Optional[str]:
        return self.case_insensitive_index.get(name.upper())

    @property
    def has_default_constructor(self) -> bool:
        return self.default_constructor is not None

    def get_default_constructor(self) -> DefaultConstructor:
        if self.default_constructor is None:
            raise NoDefaultConstructorError.for_type(self.type)
        return self.default_constructor

    def new_instance(self) -> Any:
        return self.get_default_constructor().new_instance()


__all__ = ["PropertyModel"]
