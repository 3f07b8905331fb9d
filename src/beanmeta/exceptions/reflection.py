"""Reflection exceptions."""

from __future__ import annotations

from typing import Any, Iterable

from . import ApplicationError


def _type_name(cls: Any) -> str:
    return getattr(cls, "__qualname__", None) or repr(cls)


class ReflectionError(ApplicationError):
    """Class metadata could not be resolved or used."""

    pass


class AmbiguousAccessorError(ReflectionError):
    """Competing accessors make a property ambiguous."""

    @classmethod
    def for_getters(cls, property_name: str, declaring_type: type, candidates: Iterable[str]) -> "AmbiguousAccessorError":
        """Create error for getters with identical or unrelated return types."""
        members = tuple(candidates)
        msg = (
            f"Illegal overloaded getter method with ambiguous type for property {property_name} "
            f"in class {_type_name(declaring_type)} (candidates: {', '.join(members)})"
        )
        return cls(msg, property_name=property_name, declaring_type=declaring_type, candidates=members)

    @classmethod
    def for_setters(cls, property_name: str, declaring_type: type, candidates: Iterable[str]) -> "AmbiguousAccessorError":
        """Create error for setters that no getter type can disambiguate."""
        members = tuple(candidates)
        msg = (
            f"Illegal overloaded setter method with ambiguous type for property {property_name} "
            f"in class {_type_name(declaring_type)} (candidates: {', '.join(members)})"
        )
        return cls(msg, property_name=property_name, declaring_type=declaring_type, candidates=members)


class PropertyNotFoundError(ReflectionError):
    """No accessor exists for the requested property."""

    @classmethod
    def no_getter(cls, property_name: str, owner: type) -> "PropertyNotFoundError":
        return cls(
            f"There is no getter for property named '{property_name}' in '{_type_name(owner)}'",
            property_name=property_name,
            owner=owner,
        )

    @classmethod
    def no_setter(cls, property_name: str, owner: type) -> "PropertyNotFoundError":
        return cls(
            f"There is no setter for property named '{property_name}' in '{_type_name(owner)}'",
            property_name=property_name,
            owner=owner,
        )


class NoDefaultConstructorError(ReflectionError):
    """Class has no zero-argument constructor."""

    @classmethod
    def for_type(cls, owner: type) -> "NoDefaultConstructorError":
        return cls(f"There is no default constructor for {_type_name(owner)}", owner=owner)


class InvocationError(ReflectionError):
    """Accessor or constructor invocation failed."""

    @classmethod
    def member_failed(cls, owner: Any, member: str, cause: BaseException) -> "InvocationError":
        """Create error wrapping a failure raised while invoking ``member``."""
        msg = f"Error invoking {member} on {_type_name(owner)}. Cause: {type(cause).__name__}: {cause}"
        return cls(msg, owner=owner, member=member)

    @classmethod
    def instantiation_failed(cls, owner: type, cause: BaseException) -> "InvocationError":
        msg = f"Error instantiating {_type_name(owner)}. Cause: {type(cause).__name__}: {cause}"
        return cls(msg, owner=owner, member="__init__")

    @classmethod
    def index_failed(cls, collection: Any, index: str, reason: str) -> "InvocationError":
        msg = f"Cannot resolve index [{index}] on {type(collection).__name__}: {reason}"
        return cls(msg, owner=type(collection), member=f"[{index}]")


__all__ = [
    "AmbiguousAccessorError",
    "InvocationError",
    "NoDefaultConstructorError",
    "PropertyNotFoundError",
    "ReflectionError",
]
