"""Subsequence counting and longest common subsequences."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

DEFAULT_MOD = 998244353


def distinct_subsequences(values: Sequence[Hashable], mod: int = DEFAULT_MOD) -> int:
    """Count the distinct non-empty subsequences of ``values`` modulo ``mod``."""
    dp = [1]
    last: dict[Hashable, int] = {}

    for i, value in enumerate(values):
        count = 2 * dp[i]

        if value in last:
            count -= dp[last[value]]

        dp.append(count % mod)
        last[value] = i

    return (dp[-1] - 1) % mod


def is_subsequence(sub: Sequence, text: Sequence) -> bool:
    """Whether ``sub`` occurs in ``text`` as a (not necessarily contiguous) subsequence."""
    remaining = iter(text)
    return all(any(item == element for element in remaining) for item in sub)


def longest_common_subsequence_quadratic(s: Sequence, t: Sequence) -> int:
    """Length of the longest common subsequence using a full DP table."""
    dp = [[0] * (len(t) + 1) for _ in range(len(s) + 1)]

    for i, a in enumerate(s):
        for j, b in enumerate(t):
            if a == b:
                dp[i + 1][j + 1] = dp[i][j] + 1
            else:
                dp[i + 1][j + 1] = max(dp[i][j + 1], dp[i + 1][j])

    return dp[-1][-1]


def longest_common_subsequence(s: Sequence, t: Sequence) -> int:
    """Length of the longest common subsequence using linear memory."""
    dp = [0] * (len(t) + 1)

    for a in s:
        next_dp = [0] * (len(t) + 1)

        for j, b in enumerate(t):
            if a == b:
                next_dp[j + 1] = dp[j] + 1
            else:
                next_dp[j + 1] = max(dp[j + 1], next_dp[j])

        dp = next_dp

    return dp[-1]


def construct_longest_common_subsequence(s: Sequence, t: Sequence):
    """One longest common subsequence: a string for string input, otherwise a list."""
    dp = [0] * (len(t) + 1)
    move_left = [[False] * (len(t) + 1) for _ in range(len(s) + 1)]

    for i, a in enumerate(s):
        next_dp = [0] * (len(t) + 1)

        for j, b in enumerate(t):
            if a == b:
                next_dp[j + 1] = dp[j] + 1
            else:
                next_dp[j + 1] = max(dp[j + 1], next_dp[j])
                move_left[i + 1][j + 1] = next_dp[j + 1] == next_dp[j]

        dp = next_dp

    a, b = len(s), len(t)
    common = []

    while a > 0 and b > 0:
        if s[a - 1] == t[b - 1]:
            common.append(s[a - 1])
            a -= 1
            b -= 1
        elif move_left[a][b]:
            b -= 1
        else:
            a -= 1

    common.reverse()

    if isinstance(s, str):
        return "".join(common)

    return common