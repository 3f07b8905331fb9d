"""Uniform read/write access to one property of an object.

An ``Invoker`` hides whether a property is backed by an accessor method, a
``property`` descriptor or a plain attribute. Every failure raised by the
underlying member is re-raised as ``InvocationError`` carrying the owning
class and member name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from beanmeta.exceptions import InvocationError


class Invoker(ABC):
    """Reads or writes one property of a target object."""

    value_type: Any

    @abstractmethod
    def invoke(self, target: Any, args: Sequence[Any] = ()) -> Any:
        """Run the accessor against ``target``; setters take one argument."""


def _single_argument(args: Sequence[Any], owner: Any, member: str) -> Any:
    if len(args) != 1:
        raise InvocationError.member_failed(owner, member, TypeError(f"expected exactly one argument, got {len(args)}"))
    return args[0]


@dataclass(frozen=True)
class MethodInvoker(Invoker):
    """Calls an accessor method such as ``get_total()`` or ``set_total(value)``.

    The call is dispatched through the target, so an override defined on a
    subclass of the resolved class still runs.
    """

    name: str
    function: Callable[..., Any]
    value_type: Any = object
    is_setter: bool = False

    def invoke(self, target: Any, args: Sequence[Any] = ()) -> Any:
        try:
            bound = getattr(target, self.name)
        except AttributeError as exc:
            raise InvocationError.member_failed(type(target), self.name, exc) from exc
        try:
            return bound(*args)
        except InvocationError:
            raise
        except Exception as exc:
            raise InvocationError.member_failed(type(target), self.name, exc) from exc


@dataclass(frozen=True)
class PropertyInvoker(Invoker):
    """Reads or writes through a ``property`` (or ``cached_property``) descriptor."""

    name: str
    function: Callable[..., Any]
    value_type: Any = object
    is_setter: bool = False

    def invoke(self, target: Any, args: Sequence[Any] = ()) -> Any:
        try:
            if self.is_setter:
                setattr(target, self.name, _single_argument(args, type(target), self.name))
                return None
            return getattr(target, self.name)
        except InvocationError:
            raise
        except Exception as exc:
            raise InvocationError.member_failed(type(target), self.name, exc) from exc


@dataclass(frozen=True)
class FieldReader(Invoker):
    """Reads a declared attribute directly."""

    name: str
    declaring_type: type
    value_type: Any = object

    def invoke(self, target: Any, args: Sequence[Any] = ()) -> Any:
        try:
            return getattr(target, self.name)
        except AttributeError as exc:
            raise InvocationError.member_failed(self.declaring_type, self.name, exc) from exc


@dataclass(frozen=True)
class FieldWriter(Invoker):
    """Assigns a declared attribute directly.

    Class-level (``ClassVar``) fields are assigned on the declaring class, so
    the write is visible to every instance.
    """

    name: str
    declaring_type: type
    value_type: Any = object
    type_wide: bool = False

    def invoke(self, target: Any, args: Sequence[Any] = ()) -> Any:
        value = _single_argument(args, self.declaring_type, self.name)
        destination = self.declaring_type if self.type_wide else target
        try:
            setattr(destination, self.name, value)
        except (AttributeError, TypeError) as exc:
            raise InvocationError.member_failed(self.declaring_type, self.name, exc) from exc
        return None


@dataclass(frozen=True)
class DefaultConstructor:
    """Zero-argument constructor handle for a class."""

    type: type

    def new_instance(self) -> Any:
        try:
            return self.type()
        except Exception as exc:
            raise InvocationError.instantiation_failed(self.type, exc) from exc


__all__ = [
    "DefaultConstructor",
    "FieldReader",
    "FieldWriter",
    "Invoker",
    "MethodInvoker",
    "PropertyInvoker",
]
