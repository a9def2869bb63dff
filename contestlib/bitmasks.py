"""Enumeration helpers for bitmasks: fixed popcount, submasks and supermasks."""

from __future__ import annotations

from collections.abc import Iterator


def _lowest_bit_index(x: int) -> int:
    """Index of the lowest set bit of a non-zero integer (works for negatives too)."""
    return (x & -x).bit_length() - 1


def iterate_bitmasks_with_popcount(n: int, k: int) -> Iterator[int]:
    """Yield every mask below ``1 << n`` with exactly ``k`` set bits, in increasing order."""
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")

    if k == 0:
        yield 0
        return

    mask = (1 << k) - 1
    limit = 1 << n

    while mask < limit:
        yield mask
        zeros = _lowest_bit_index(mask)
        ones = _lowest_bit_index(~mask >> zeros)
        mask += (1 << zeros) + (1 << (ones - 1)) - 1


def iterate_submasks(mask: int) -> Iterator[int]:
    """Yield every submask of ``mask`` in decreasing order, ending with 0."""
    if mask < 0:
        raise ValueError("mask must be non-negative")

    sub = mask

    while True:
        yield sub

        if sub == 0:
            return

        sub = (sub - 1) & mask


def iterate_supermasks(mask: int, n: int) -> Iterator[int]:
    """Yield every supermask of ``mask`` below ``1 << n`` in increasing order."""
    if mask < 0 or n < 0:
        raise ValueError("mask and n must be non-negative")

    limit = 1 << n
    sup = mask

    while sup < limit:
        yield sup
        sup = (sup + 1) | mask


def format_mask(mask: int, n: int) -> str:
    """Render the lowest ``n`` bits of ``mask`` as a string, lowest bit first."""
    return "".join("1" if mask >> i & 1 else "0" for i in range(n))