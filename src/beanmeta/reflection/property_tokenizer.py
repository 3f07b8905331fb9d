"""Splits property paths such as ``orders[3].item`` into navigation steps.

Grammar::

    path    := segment ('.' segment)*
    segment := identifier ('[' index ']')?

The index is kept as a raw string; whether it is a sequence offset or a
mapping key is for the consumer to decide. There is no escaping, so a name
cannot contain ``.`` or ``[``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class PropertyTokenizer:
    """One step of a property path.

    ``children`` holds the unconsumed remainder; ``next()`` parses it into the
    following step without touching this one.
    """

    name: str
    indexed_name: str
    index: Optional[str]
    children: Optional[str]

    @classmethod
    def parse(cls, full_name: str) -> "PropertyTokenizer":
        head, dot, rest = full_name.partition(".")
        children = rest if dot else None

        indexed_name = head
        index = None
        bracket = head.find("[")
        if bracket > -1:
            # An unterminated index keeps the whole remainder, last character included
            end = len(head) - 1 if head.endswith("]") else len(head)
            index = head[bracket + 1 : end]
            head = head[:bracket]
        return cls(name=head, indexed_name=indexed_name, index=index, children=children)

    def has_next(self) -> bool:
        return self.children is not None

    def next(self) -> "PropertyTokenizer":
        if self.children is None:
            raise ValueError(f"No property path remains after {self.indexed_name!r}")
        return PropertyTokenizer.parse(self.children)

    def __iter__(self) -> Iterator["PropertyTokenizer"]:
        step: Optional[PropertyTokenizer] = self
        while step is not None:
            yield step
            step = step.next() if step.has_next() else None


@dataclass(frozen=True)
class PropertyPath:
    """Restartable, lazily parsed sequence of steps for one path."""

    path: str

    def first(self) -> PropertyTokenizer:
        return PropertyTokenizer.parse(self.path)

    def __iter__(self) -> Iterator[PropertyTokenizer]:
        return iter(self.first())


def parse(path: str) -> PropertyPath:
    return PropertyPath(path)


__all__ = ["PropertyPath", "PropertyTokenizer", "parse"]
