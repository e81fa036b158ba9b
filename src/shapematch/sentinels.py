"""Pattern-only markers: unsorted lists, wildcards and the empty-list check."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Iterator


class _Sentinel:
    """A named singleton marker."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


# Matches any present value, including None, but never an absent key.
WILDCARD = _Sentinel("WILDCARD")

# Matches only a literal zero-length list. A plain [] in a pattern matches any list.
EMPTY_LIST = _Sentinel("EMPTY_LIST")

# Lookup result for a key the actual mapping does not have.
MISSING = _Sentinel("MISSING")


class Unsorted:
    """Wraps a list whose elements may appear in any order in the actual.

    Each pattern element consumes one distinct actual element, so duplicates
    in the pattern must be matched by as many elements in the actual.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Sequence[Any]) -> None:
        if not isinstance(items, Sequence) or isinstance(items, (str, bytes, bytearray, tuple)):
            raise TypeError(f"Unsorted wraps a list, got {type(items).__name__}")
        self._items = tuple(items)

    @property
    def items(self) -> list[Any]:
        return list(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unsorted):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(("Unsorted", self._items))

    def __repr__(self) -> str:
        return f"Unsorted({list(self._items)!r})"


def unsorted(*items: Any) -> Unsorted:
    """Shorthand for ``Unsorted([...])``."""
    return Unsorted(list(items))
