"""Polynomial multiplication with a floating-point FFT, exact and modulo an integer."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence
from itertools import chain, zip_longest

SPLIT_CUTOFF = 2e15
SPLIT_BASE = 1 << 15

# For every power of two n >= 2, _roots[n // 2:n] holds the first half of the n-th roots of unity.
_roots: list[complex] = [0j, 1 + 0j]
_bit_reverse: dict[int, list[int]] = {}


def round_up_power_two(n: int) -> int:
    """The smallest power of two that is at least ``n`` (1 for ``n <= 1``)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def _get_length(n: int) -> int:
    """Return k such that ``n == 1 << k``."""
    if n <= 0 or n & (n - 1):
        raise ValueError(f"{n} is not a power of two")
    return n.bit_length() - 1


def _prepare_roots(n: int) -> None:
    if len(_roots) >= n:
        return

    length = _get_length(len(_roots))
    _roots.extend([0j] * (n - len(_roots)))

    while (1 << length) < n:
        min_angle = 2 * math.pi / (1 << (length + 1))
        half = 1 << (length - 1)

        for i in range(half):
            index = half + i
            _roots[2 * index] = _roots[index]
            _roots[2 * index + 1] = cmath.rect(1.0, min_angle * (2 * i + 1))

        length += 1


def _bit_reorder(values: list[complex]) -> None:
    n = len(values)
    reverse = _bit_reverse.get(n)

    if reverse is None:
        length = _get_length(n)
        reverse = [0] * n
        for i in range(1, n):
            reverse[i] = (reverse[i >> 1] >> 1) | ((i & 1) << (length - 1))
        _bit_reverse[n] = reverse

    for i, r in enumerate(reverse):
        if i < r:
            values[i], values[r] = values[r], values[i]


def _fft(values: list[complex]) -> None:
    """In-place forward transform; the length must be a power of two."""
    n = len(values)
    _get_length(n)
    _prepare_roots(n)
    _bit_reorder(values)

    length = 1
    while length < n:
        for start in range(0, n, 2 * length):
            for i in range(length):
                even = values[start + i]
                odd = values[start + length + i] * _roots[length + i]
                values[start + length + i] = even - odd
                values[start + i] = even + odd
        length *= 2


def _extract(n: int, values: Sequence[complex], index: int, side: int) -> complex:
    """Recover the transform of the real part (side 0), the imaginary part (side 1) or their product (-1)."""
    other = (n - index) & (n - 1)

    if side == -1:
        return ((values[other] * values[other]).conjugate() - values[index] * values[index]) * 0.25j

    a, b = values[index], values[other]

    if side == 0:
        return 0.5 * complex(a.real + b.real, a.imag - b.imag)

    return -0.5j * complex(a.real - b.real, a.imag + b.imag)


def _invert_fft(values: Sequence[complex]) -> list[float]:
    """Inverse transform of a spectrum known to come from a real sequence."""
    n = len(values)
    if n < 2:
        raise ValueError("inverse transform needs at least two values")

    half = n // 2
    scaled = [v.conjugate() / n for v in values]
    head = [
        (scaled[i] + scaled[half + i]) + (scaled[i] - scaled[half + i]) * _roots[half + i] * 1j
        for i in range(half)
    ]
    _fft(head)
    return [head[i // 2].real if i % 2 == 0 else head[i // 2].imag for i in range(n)]


def square(values: Sequence[int]) -> list[int]:
    """Coefficients of the square of the integer polynomial ``values``."""
    if not values:
        return []

    n = len(values)
    output_size = 2 * n - 1
    size = round_up_power_two(n)

    if 0.4 * n * n < 2.0 * size * (_get_length(size) + 3):
        result = [0] * output_size
        for i, a in enumerate(values):
            result[2 * i] += a * a
            for j, b in enumerate(values[i + 1:], start=i + 1):
                result[i + j] += 2 * a * b
        return result

    _prepare_roots(2 * size)
    packed = [0j] * size

    for i in range(0, n, 2):
        packed[i // 2] = complex(values[i], values[i + 1] if i + 1 < n else 0)

    _fft(packed)

    for i in range(size // 2 + 1):
        j = (size - i) & (size - 1)
        even = _extract(size, packed, i, 0)
        odd = _extract(size, packed, i, 1)
        aux = even * even + odd * odd * _roots[size + i] * _roots[size + i]
        tmp = even * odd
        packed[i] = aux - 2j * tmp
        packed[j] = aux.conjugate() - 2j * tmp.conjugate()

    packed = [v.conjugate() / size for v in packed]
    _fft(packed)
    return [
        round(packed[i // 2].real if i % 2 == 0 else packed[i // 2].imag)
        for i in range(output_size)
    ]


def multiply(left: Sequence[int], right: Sequence[int], circular: bool = False) -> list[int]:
    """Product of two integer polynomials.

    With ``circular`` the indices wrap modulo the power-of-two size at least ``max(len(left), len(right))``.
    """
    if not left or not right:
        return []

    if not circular and list(left) == list(right):
        return square(left)

    n, m = len(left), len(right)
    output_size = round_up_power_two(max(n, m)) if circular else n + m - 1
    size = round_up_power_two(output_size)

    if 0.55 * n * m < 1.5 * size * (_get_length(size) + 3):
        result = [0] * output_size
        for i, a in enumerate(left):
            for j, b in enumerate(right):
                k = i + j
                if k >= output_size:
                    k -= output_size
                result[k] += a * b
        return result

    values = [complex(a, b) for a, b in zip_longest(left, right, fillvalue=0)]
    values.extend([0j] * (size - len(values)))
    _fft(values)

    for i in range(size // 2 + 1):
        j = (size - i) & (size - 1)
        product = _extract(size, values, i, -1)
        values[i] = product
        values[j] = product.conjugate()

    real = _invert_fft(values)
    return [round(x) for x in real[:output_size]]


def power(values: Sequence[int], exponent: int) -> list[int]:
    """The polynomial ``values`` raised to a non-negative integer power."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")

    result = [1]

    for k in range(exponent.bit_length() - 1, -1, -1):
        result = multiply(result, result)
        if exponent >> k & 1:
            result = multiply(result, values)

    return result


def _split_transform(values: Sequence[int], size: int) -> list[complex]:
    transformed = [complex(v % SPLIT_BASE, v // SPLIT_BASE) for v in values]
    transformed.extend([0j] * (size - len(transformed)))
    _fft(transformed)
    return transformed


def mod_multiply(
    left: Sequence[int],
    right: Sequence[int],
    mod: int,
    split: bool | None = None,
    circular: bool = False,
) -> list[int]:
    """Product of two polynomials with coefficients in ``[0, mod)``, reduced modulo ``mod``.

    ``split`` breaks coefficients into 15-bit halves to keep precision; by default it is used
    when ``mod`` exceeds ``SPLIT_BASE``.
    """
    if mod <= 0:
        raise ValueError("mod must be positive")

    if not left or not right:
        return []

    for value in chain(left, right):
        if not 0 <= value < mod:
            raise ValueError(f"coefficient {value} is outside [0, {mod})")

    if split is None:
        split = mod > SPLIT_BASE

    n, m = len(left), len(right)
    output_size = round_up_power_two(max(n, m)) if circular else n + m - 1
    size = round_up_power_two(output_size)

    if not split:
        return [x % mod for x in multiply(left, right, circular)]

    if 0.5 * n * m < 3.5 * size * (_get_length(size) + 4):
        result = [0] * output_size
        for i, a in enumerate(left):
            for j, b in enumerate(right):
                k = i + j
                if k >= output_size:
                    k -= output_size
                result[k] += a * b
        return [x % mod for x in result]

    left_fft = _split_transform(left, size)
    right_fft = left_fft if list(left) == list(right) else _split_transform(right, size)
    result = [0] * output_size

    for exponent in range(3):
        multiplier = pow(SPLIT_BASE, exponent, mod)
        product = [0j] * size

        for x in range(2):
            y = exponent - x
            if 0 <= y < 2:
                for i in range(size):
                    product[i] += _extract(size, left_fft, i, x) * _extract(size, right_fft, i, y)

        real = _invert_fft(product)

        for i in range(output_size):
            result[i] = (result[i] + round(real[i]) % mod * multiplier) % mod

    return result


def mod_power(values: Sequence[int], exponent: int, mod: int, split: bool | None = None) -> list[int]:
    """The polynomial ``values`` raised to ``exponent`` modulo ``mod``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")

    result = [1]

    for k in range(exponent.bit_length() - 1, -1, -1):
        result = mod_multiply(result, result, mod, split)
        if exponent >> k & 1:
            result = mod_multiply(result, values, mod, split)

    return result


def mod_multiply_all(
    polynomials: Sequence[Sequence[int]], mod: int, split: bool | None = None
) -> list[int]:
    """Product of many polynomials modulo ``mod``, combined in a balanced tree."""

    def combine(start: int, end: int) -> list[int]:
        if start >= end:
            return [1]
        if end - start == 1:
            return list(polynomials[start])
        mid = (start + end) // 2
        return mod_multiply(combine(start, mid), combine(mid, end), mod, split)

    return combine(0, len(polynomials))