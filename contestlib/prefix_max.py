"""Online insertion of (key, value) pairs with queries of the best value among smaller keys."""

from __future__ import annotations

import math
from typing import Any

from sortedcontainers import SortedDict


class OnlinePrefixMax:
    """Keeps only the entries that can still answer a query: values strictly improve with the key.

    With ``maximum_mode`` false, the structure answers prefix minimums instead.
    """

    def __init__(self, maximum_mode: bool = True, default: Any = None) -> None:
        self.maximum_mode = maximum_mode
        if default is None:
            default = -math.inf if maximum_mode else math.inf
        self.default = default
        self._optimal = SortedDict()

    def _is_better(self, a: Any, b: Any) -> bool:
        return b < a if self.maximum_mode else a < b

    def __len__(self) -> int:
        return len(self._optimal)

    def items(self) -> list[tuple[Any, Any]]:
        """The kept entries in increasing key order."""
        return list(self._optimal.items())

    def query(self, key_limit: Any) -> Any:
        """Best value over all entries with key < ``key_limit``, or the default if there are none."""
        index = self._optimal.bisect_left(key_limit)
        if index == 0:
            return self.default
        return self._optimal.peekitem(index - 1)[1]

    def insert(self, key: Any, value: Any) -> None:
        """Add an entry and drop the entries it makes obsolete."""
        optimal = self._optimal
        index = optimal.bisect_right(key)

        if index > 0:
            previous_key, previous_value = optimal.peekitem(index - 1)
            if not self._is_better(value, previous_value):
                return
            if previous_key == key:
                optimal.popitem(index - 1)
                index -= 1

        while index < len(optimal) and not self._is_better(optimal.peekitem(index)[1], value):
            optimal.popitem(index)

        optimal[key] = value


def merge_into(x: OnlinePrefixMax, y: OnlinePrefixMax) -> None:
    """Merge ``y`` into ``x`` (small into large) and leave ``y`` empty."""
    if x.maximum_mode != y.maximum_mode:
        raise ValueError("cannot merge structures of different modes")

    if len(x) < len(y):
        x._optimal, y._optimal = y._optimal, x._optimal

    for key, value in list(y._optimal.items()):
        x.insert(key, value)

    y._optimal.clear()