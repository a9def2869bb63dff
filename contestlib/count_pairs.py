"""Counting ordered pairs with a merge sort."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any


def count_pairs(
    values: Iterable[Any], compare: Callable[[Any, Any], bool] = operator.lt
) -> int:
    """Count pairs ``i < j`` with ``compare(values[i], values[j])`` in O(n log n).

    ``compare`` must be a strict or non-strict ordering such as ``operator.lt`` or ``operator.ge``.
    The input is not modified.
    """
    items = list(values)

    def solve(start: int, end: int) -> int:
        if end - start <= 1:
            return 0

        mid = (start + end) // 2
        answer = solve(start, mid) + solve(mid, end)
        merged = []
        left, right = start, mid

        while left < mid or right < end:
            if left < mid and (right == end or compare(items[left], items[right])):
                merged.append(items[left])
                left += 1
            else:
                answer += left - start
                merged.append(items[right])
                right += 1

        items[start:end] = merged
        return answer

    return solve(0, len(items))