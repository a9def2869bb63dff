"""A sorted set with order statistics: k-th element and rank of a key."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from sortedcontainers import SortedSet


class OrderedSet:
    """A set kept in sorted order that answers rank and select queries."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = SortedSet(values)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: Any) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if it was already present."""
        if value in self._items:
            return False
        self._items.add(value)
        return True

    def erase(self, value: Any) -> bool:
        """Remove ``value``; return False if it was absent."""
        if value not in self._items:
            return False
        self._items.remove(value)
        return True

    def find_by_order(self, index: int) -> Any:
        """The element with ``index`` smaller elements (0-based)."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        return self._items[index]

    def order_of_key(self, value: Any) -> int:
        """The number of elements strictly less than ``value``."""
        return self._items.bisect_left(value)


def process_queries(queries: Iterable[tuple[str, int]]) -> list[str]:
    """Run I/D/K/C queries and return the output lines.

    ``I x`` inserts, ``D x`` deletes, ``K x`` reports the x-th smallest element (1-based) or
    ``invalid``, and ``C x`` reports how many elements are below x. Other operations are ignored.
    """
    values = OrderedSet()
    output = []

    for op, x in queries:
        if op == "I":
            values.insert(x)
        elif op == "D":
            values.erase(x)
        elif op == "K":
            try:
                output.append(str(values.find_by_order(x - 1)))
            except IndexError:
                output.append("invalid")
        elif op == "C":
            output.append(str(values.order_of_key(x)))

    return output