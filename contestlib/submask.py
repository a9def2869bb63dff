"""Zeta/Möbius transforms over bitmasks and subset convolution."""

from __future__ import annotations

from collections.abc import Sequence

from contestlib.bitmasks import iterate_bitmasks_with_popcount


def _dimension(values: Sequence) -> int:
    """Return n such that ``len(values) == 1 << n``; raise if the length is not a power of two."""
    size = len(values)

    if size <= 0 or size & (size - 1):
        raise ValueError(f"length must be a positive power of two, got {size}")

    return size.bit_length() - 1


def submask_sums(values: Sequence) -> list:
    """For every mask, the sum of ``values[sub]`` over all submasks ``sub`` of the mask."""
    n = _dimension(values)
    dp = list(values)

    for i in range(n):
        bit = 1 << i
        for mask in range(len(dp)):
            if mask & bit:
                dp[mask] += dp[mask ^ bit]

    return dp


def supermask_sums(values: Sequence) -> list:
    """For every mask, the sum of ``values[sup]`` over all supermasks ``sup`` of the mask."""
    return submask_sums(list(reversed(values)))[::-1]


def mobius_transform(values: Sequence) -> list:
    """Inverse of :func:`submask_sums` (bitmask inclusion-exclusion)."""
    n = _dimension(values)
    dp = list(values)

    for i in range(n):
        bit = 1 << i
        for mask in range(len(dp)):
            if mask & bit:
                dp[mask] -= dp[mask ^ bit]

    return dp


def super_mobius_transform(values: Sequence) -> list:
    """Inverse of :func:`supermask_sums`."""
    return mobius_transform(list(reversed(values)))[::-1]


def subset_convolution(a: Sequence, b: Sequence) -> list:
    """Compute ``c[x | y] += a[x] * b[y]`` over all disjoint ``x`` and ``y`` in n^2 * 2^n time."""
    n = _dimension(a)

    if len(b) != len(a):
        raise ValueError("both inputs must have the same length")

    size = 1 << n
    ranked_a = [[0] * size for _ in range(n + 1)]
    ranked_b = [[0] * size for _ in range(n + 1)]

    for mask, (x, y) in enumerate(zip(a, b)):
        rank = bin(mask).count("1")
        ranked_a[rank][mask] = x
        ranked_b[rank][mask] = y

    ranked_a = [submask_sums(row) for row in ranked_a]
    ranked_b = [submask_sums(row) for row in ranked_b]
    result = [0] * size

    for c in range(n + 1):
        combined = [
            sum(ranked_a[i][mask] * ranked_b[c - i][mask] for i in range(c + 1))
            for mask in range(size)
        ]

        # Remove combinations that overlap and so have fewer than c bits.
        if c > 1:
            combined = mobius_transform(combined)

        for mask in iterate_bitmasks_with_popcount(n, c):
            result[mask] = combined[mask]

    return result


def reverse_subset_convolution(a: Sequence, b: Sequence) -> list:
    """Compute ``c[x] += a[x | y] * b[y]`` over all disjoint ``x`` and ``y``."""
    return subset_convolution(list(reversed(a)), b)[::-1]