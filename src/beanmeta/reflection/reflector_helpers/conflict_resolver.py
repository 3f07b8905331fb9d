"""Picks one accessor per property name out of competing candidates."""

from __future__ import annotations

from typing import Any, Mapping

from beanmeta.exceptions import AmbiguousAccessorError

from .method_collector import AccessorCandidate
from .type_hints import is_assignable


def resolve_getter(property_name: str, candidates: list[AccessorCandidate]) -> AccessorCandidate:
    """Return the getter with the narrowest return type.

    Candidates must form a single subtype chain; identical or unrelated
    return types are ambiguous.
    """
    first = candidates[0]
    if len(candidates) == 1:
        return first

    winner = first
    winner_type = first.value_type
    for candidate in candidates[1:]:
        candidate_type = candidate.value_type
        if candidate_type == winner_type:
            raise AmbiguousAccessorError.for_getters(property_name, first.declaring_type, (c.describe() for c in candidates))
        if is_assignable(candidate_type, winner_type):
            continue
        if is_assignable(winner_type, candidate_type):
            winner = candidate
            winner_type = candidate_type
            continue
        raise AmbiguousAccessorError.for_getters(property_name, first.declaring_type, (c.describe() for c in candidates))
    return winner


def resolve_setter(
    property_name: str,
    candidates: list[AccessorCandidate],
    getter_types: Mapping[str, Any],
) -> AccessorCandidate:
    """Return the setter whose parameter type matches the resolved getter type."""
    first = candidates[0]
    if len(candidates) == 1:
        return first

    if property_name not in getter_types:
        raise AmbiguousAccessorError.for_setters(property_name, first.declaring_type, (c.describe() for c in candidates))

    expected_type = getter_types[property_name]
    for candidate in candidates:
        if candidate.value_type == expected_type:
            return candidate
    raise AmbiguousAccessorError.for_setters(property_name, first.declaring_type, (c.describe() for c in candidates))


__all__ = ["resolve_getter", "resolve_setter"]
