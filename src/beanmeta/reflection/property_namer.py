"""Accessor-name to property-name conversion."""

from __future__ import annotations

from typing import Optional

GETTER_PREFIX = "get"
BOOLEAN_GETTER_PREFIX = "is"
SETTER_PREFIX = "set"

RESERVED_PREFIXES = ("_", "$")
SERIAL_VERSION_NAMES = frozenset({"serialVersionUID", "serial_version_uid"})
TYPE_IDENTIFIER_NAME = "class"


def is_getter_name(name: str) -> bool:
    return (name.startswith(GETTER_PREFIX) and len(name) > len(GETTER_PREFIX)) or (
        name.startswith(BOOLEAN_GETTER_PREFIX) and len(name) > len(BOOLEAN_GETTER_PREFIX)
    )


def is_setter_name(name: str) -> bool:
    return name.startswith(SETTER_PREFIX) and len(name) > len(SETTER_PREFIX)


def method_to_property(name: str) -> Optional[str]:
    """Derive the property name of an accessor method.

    ``getTotal``, ``get_total`` and ``set_total`` all map to ``total``;
    ``isActive`` maps to ``active``. Returns ``None`` for names that carry no
    accessor prefix or nothing after it.
    """
    if name.startswith(BOOLEAN_GETTER_PREFIX):
        remainder = name[len(BOOLEAN_GETTER_PREFIX) :]
    elif name.startswith(GETTER_PREFIX) or name.startswith(SETTER_PREFIX):
        remainder = name[len(GETTER_PREFIX) :]
    else:
        return None

    if remainder.startswith("_"):
        remainder = remainder[1:]
    if not remainder:
        return None
    return remainder[0].lower() + remainder[1:]


def is_valid_property_name(name: str) -> bool:
    return not (name.startswith(RESERVED_PREFIXES) or name in SERIAL_VERSION_NAMES or name == TYPE_IDENTIFIER_NAME)


__all__ = [
    "RESERVED_PREFIXES",
    "SERIAL_VERSION_NAMES",
    "TYPE_IDENTIFIER_NAME",
    "is_getter_name",
    "is_setter_name",
    "is_valid_property_name",
    "method_to_property",
]
