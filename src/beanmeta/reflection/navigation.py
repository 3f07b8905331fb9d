"""Reads and writes values along property paths in an object graph.

Each path step is resolved against the ``PropertyModel`` of the object at
that point. Mappings are navigated by key instead. A step index is applied
to the value the step yields: mappings use it as a string key, sequences as
an integer offset.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, Optional

from beanmeta.exceptions import InvocationError, PropertyNotFoundError

from .metadata_registry import MetadataRegistry, get_default_registry
from .property_tokenizer import PropertyTokenizer, parse


def _sequence_offset(collection: Any, index: str) -> int:
    try:
        return int(index)
    except ValueError as exc:
        raise InvocationError.index_failed(collection, index, "sequence index must be an integer") from exc


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _read_index(collection: Any, index: str) -> Any:
    if isinstance(collection, Mapping):
        return collection.get(index)
    if _is_sequence(collection):
        offset = _sequence_offset(collection, index)
        try:
            return collection[offset]
        except IndexError as exc:
            raise InvocationError.index_failed(collection, index, "index out of range") from exc
    raise InvocationError.index_failed(collection, index, "value is not indexable")


def _write_index(collection: Any, index: str, value: Any) -> None:
    if isinstance(collection, MutableMapping):
        collection[index] = value
        return
    if isinstance(collection, MutableSequence):
        offset = _sequence_offset(collection, index)
        try:
            collection[offset] = value
        except IndexError as exc:
            raise InvocationError.index_failed(collection, index, "index out of range") from exc
        return
    raise InvocationError.index_failed(collection, index, "value does not support item assignment")


def _element_type(container_type: Any) -> Any:
    origin = typing.get_origin(container_type) or container_type
    args = typing.get_args(container_type)
    if isinstance(origin, type) and issubclass(origin, Mapping):
        return args[1] if len(args) == 2 else object
    if args:
        return args[0]
    return object


class PropertyNavigator:
    """Walks property paths using a shared ``MetadataRegistry``."""

    def __init__(self, registry: Optional[MetadataRegistry] = None):
        self._registry = registry if registry is not None else get_default_registry()

    def get_value(self, target: Any, path: str) -> Any:
        """Return the value at ``path``; ``None`` when an intermediate value is ``None``."""
        current = target
        for step in parse(path):
            if current is None:
                return None
            current = self._read_step(current, step)
        return current

    def set_value(self, target: Any, path: str, value: Any) -> None:
        steps = list(parse(path))
        parent = target
        for step in steps[:-1]:
            parent = self._read_step(parent, step)
            if parent is None:
                raise InvocationError.member_failed(
                    type(target), path, ValueError(f"'{step.indexed_name}' is None; cannot set '{path}'")
                )

        last = steps[-1]
        if last.index is None:
            self._write_property(parent, last.name, value)
        else:
            _write_index(self._read_property(parent, last.name), last.index, value)

    def getter_type(self, cls: type, path: str) -> Any:
        """Return the declared type reached by following ``path`` from ``cls``."""
        current: Any = cls
        for step in parse(path):
            owner = typing.get_origin(current) or current
            if not isinstance(owner, type):
                raise PropertyNotFoundError.no_getter(step.name, current)
            current = self._registry.get(owner).getter_type(step.name)
            if step.index is not None:
                current = _element_type(current)
        return current

    def has_getter(self, cls: type, path: str) -> bool:
        try:
            self.getter_type(cls, path)
        except PropertyNotFoundError:
            return False
        return True

    def _read_step(self, target: Any, step: PropertyTokenizer) -> Any:
        value = self._read_property(target, step.name)
        if step.index is None:
            return value
        return _read_index(value, step.index)

    def _read_property(self, target: Any, name: str) -> Any:
        if not name:
            return target
        if isinstance(target, Mapping):
            return target.get(name)
        return self._registry.get(type(target)).get_getter(name).invoke(target)

    def _write_property(self, target: Any, name: str, value: Any) -> None:
        if isinstance(target, MutableMapping):
            target[name] = value
            return
        self._registry.get(type(target)).get_setter(name).invoke(target, (value,))


__all__ = ["PropertyNavigator"]
