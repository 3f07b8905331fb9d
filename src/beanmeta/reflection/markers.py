"""Markers recognised during accessor resolution."""

from __future__ import annotations

from typing import Callable, TypeVar

F = TypeVar("F", bound=Callable)

BRIDGE_ATTRIBUTE = "__bridge__"


def bridge(func: F) -> F:
    """Mark ``func`` as a forwarding stub that must never become an accessor.

    Use it for generated or hand-written methods that only re-expose another
    accessor under a wider signature, e.g. a generic base implementation kept
    for compatibility next to a narrower override.
    """
    setattr(func, BRIDGE_ATTRIBUTE, True)
    return func


def is_bridge(func: object) -> bool:
    return bool(getattr(func, BRIDGE_ATTRIBUTE, False))


__all__ = ["BRIDGE_ATTRIBUTE", "bridge", "is_bridge"]
