"""Helpers for resolving property accessors of a class."""

from .conflict_resolver import resolve_getter, resolve_setter
from .constructor_locator import locate_default_constructor
from .field_collector import DeclaredField, iter_declared_fields
from .method_collector import (
    AccessorCandidate,
    collect_getter_candidates,
    collect_setter_candidates,
    collect_unique_members,
    walk_hierarchy,
)

__all__ = [
    "AccessorCandidate",
    "DeclaredField",
    "collect_getter_candidates",
    "collect_setter_candidates",
    "collect_unique_members",
    "iter_declared_fields",
    "locate_default_constructor",
    "resolve_getter",
    "resolve_setter",
    "walk_hierarchy",
]
