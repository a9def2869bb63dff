"""Number-theoretic transforms for polynomial multiplication modulo primes, with CRT for any modulus."""

from __future__ import annotations

from collections.abc import Sequence

from contestlib.fft import round_up_power_two

MOD = 998244353
MOD2 = 1711276033
MOD3 = 2113929217
TRIPLE_CUTOFF = 100000


class NTT:
    """Polynomial arithmetic modulo a prime of the form ``c * 2**k + 1``."""

    def __init__(self, mod: int = MOD) -> None:
        if mod < 2:
            raise ValueError("mod must be at least 2")
        self.mod = mod
        # For every power of two n >= 2, _roots[n // 2:n] holds the first half of the n-th roots.
        self._roots: list[int] = [0, 1]
        self._bit_reverse: dict[int, list[int]] = {}
        self._max_size: int | None = None
        self._root = 1

    def __repr__(self) -> str:
        return f"NTT(mod={self.mod})"

    @property
    def max_size(self) -> int:
        """The largest transform length the modulus supports."""
        if self._max_size is None:
            self._find_root()
        return self._max_size

    def _find_root(self) -> None:
        mod = self.mod
        max_size = (mod - 1) & -(mod - 1)

        if max_size == 1:
            self._max_size, self._root = 1, 1
            return

        for root in range(2, mod):
            if pow(root, max_size, mod) == 1 and pow(root, max_size // 2, mod) != 1:
                self._max_size, self._root = max_size, root
                return

        raise ValueError(f"no primitive {max_size}-th root of unity modulo {mod}")

    def _prepare_roots(self, n: int) -> None:
        if n > self.max_size:
            raise ValueError(f"transform length {n} exceeds {self.max_size} for modulus {self.mod}")

        roots = self._roots
        if len(roots) >= n:
            return

        mod = self.mod
        length = len(roots).bit_length() - 1
        roots.extend([0] * (n - len(roots)))

        while (1 << length) < n:
            z = pow(self._root, self._max_size >> (length + 1), mod)
            for i in range(1 << (length - 1), 1 << length):
                roots[2 * i] = roots[i]
                roots[2 * i + 1] = roots[i] * z % mod
            length += 1

    def _bit_reorder(self, values: list[int]) -> None:
        n = len(values)
        reverse = self._bit_reverse.get(n)

        if reverse is None:
            length = n.bit_length() - 1
            reverse = [0] * n
            for i in range(1, n):
                reverse[i] = (reverse[i >> 1] >> 1) | ((i & 1) << (length - 1))
            self._bit_reverse[n] = reverse

        for i, r in enumerate(reverse):
            if i < r:
                values[i], values[r] = values[r], values[i]

    def _transform(self, values: list[int]) -> None:
        """In-place forward transform; the length must be a power of two."""
        n = len(values)
        if n <= 0 or n & (n - 1):
            raise ValueError(f"{n} is not a power of two")

        self._prepare_roots(n)
        self._bit_reorder(values)
        roots, mod = self._roots, self.mod

        length = 1
        while length < n:
            for start in range(0, n, 2 * length):
                for i in range(length):
                    even = values[start + i]
                    odd = values[start + length + i] * roots[length + i] % mod
                    values[start + length + i] = (even - odd) % mod
                    values[start + i] = (even + odd) % mod
            length *= 2

    def _invert(self, values: list[int]) -> None:
        n = len(values)
        inv_n = pow(n, -1, self.mod)
        values[:] = [v * inv_n % self.mod for v in values]
        values[1:] = values[:0:-1]
        self._transform(values)

    def mod_multiply(
        self, left: Sequence[int], right: Sequence[int], circular: bool = False
    ) -> list[int]:
        """Product of two polynomials modulo the transform's prime.

        With ``circular`` the indices wrap modulo the power-of-two size at least ``max(len(left), len(right))``.
        """
        if not left or not right:
            return []

        mod = self.mod
        a = [v % mod for v in left]
        b = [v % mod for v in right]
        n, m = len(a), len(b)
        output_size = round_up_power_two(max(n, m)) if circular else n + m - 1
        size = round_up_power_two(output_size)
        length = size.bit_length() - 1

        if 1.25 * n * m < 3.0 * size * (length + 3):
            result = [0] * output_size
            for i, x in enumerate(a):
                if x:
                    for j, y in enumerate(b):
                        k = i + j
                        if k >= output_size:
                            k -= output_size
                        result[k] += x * y
            return [v % mod for v in result]

        a.extend([0] * (size - n))
        b.extend([0] * (size - m))

        if a == b:
            self._transform(a)
            b = a
        else:
            self._transform(a)
            self._transform(b)

        product = [x * y % mod for x, y in zip(a, b)]
        self._invert(product)
        return product[:output_size]

    def mod_power(self, values: Sequence[int], exponent: int) -> list[int]:
        """The polynomial ``values`` raised to a non-negative integer power."""
        if exponent < 0:
            raise ValueError("exponent must be non-negative")

        result = [1]
        for k in range(exponent.bit_length() - 1, -1, -1):
            result = self.mod_multiply(result, result)
            if exponent >> k & 1:
                result = self.mod_multiply(result, values)

        return result

    def mod_multiply_all(self, polynomials: Sequence[Sequence[int]]) -> list[int]:
        """Product of many polynomials, combined in a balanced tree."""

        def combine(start: int, end: int) -> list[int]:
            if start >= end:
                return [1]
            if end - start == 1:
                return list(polynomials[start])
            mid = (start + end) // 2
            return self.mod_multiply(combine(start, mid), combine(mid, end))

        return combine(0, len(polynomials))


def inv_mod(a: int, m: int) -> int:
    """The inverse of ``a`` modulo ``m`` via the extended Euclidean algorithm."""
    if m <= 0:
        raise ValueError("modulus must be positive")

    g, r, x, y = m, a % m, 0, 1

    while r != 0:
        q = g // r
        g, r = r, g % r
        x, y = y, x - q * y

    if g != 1:
        raise ValueError(f"{a} is not invertible modulo {m}")

    return x % m


def chinese_remainder_theorem(a0: int, m0: int, a1: int, m1: int, inv_m0: int) -> int:
    """The number in ``[0, m0 * m1)`` congruent to ``a0`` mod ``m0`` and ``a1`` mod ``m1``.

    ``inv_m0`` is the inverse of ``m0`` modulo ``m1``.
    """
    k = (a1 - a0) * inv_m0 % m1
    return (a0 + k * m0) % (m0 * m1)


def triple_crt(a: Sequence[int], m: Sequence[int], inv: Sequence[int], mod: int) -> int:
    """The number below ``m[0] * m[1] * m[2]`` matching residues ``a``, reduced modulo ``mod``.

    ``inv`` holds the inverse of ``m[0]`` modulo ``m[1]`` and of ``m[0] * m[1]`` modulo ``m[2]``.
    """
    m01 = m[0] * m[1]
    a01 = chinese_remainder_theorem(a[0], m[0], a[1], m[1], inv[0])
    k = (a[2] - a01) * inv[1] % m[2]
    return (a01 + k * m01) % mod


_ntt1 = NTT(MOD)
_ntt2 = NTT(MOD2)
_ntt3 = NTT(MOD3)
_MODULI = (MOD, MOD2, MOD3)
_INV = (inv_mod(MOD, MOD2), inv_mod(MOD * MOD2, MOD3))
_INV23 = inv_mod(MOD2, MOD3)


def multi_mod_multiply(
    left: Sequence[int], right: Sequence[int], mod: int, circular: bool = False
) -> list[int]:
    """Product modulo any ``mod`` using three transforms and the Chinese remainder theorem."""
    if mod <= 0:
        raise ValueError("mod must be positive")

    product1 = _ntt1.mod_multiply(left, right, circular)
    product2 = _ntt2.mod_multiply(left, right, circular)
    product3 = _ntt3.mod_multiply(left, right, circular)
    return [
        triple_crt((x, y, z), _MODULI, _INV, mod)
        for x, y, z in zip(product1, product2, product3)
    ]


def multi_multiply(left: Sequence[int], right: Sequence[int], circular: bool = False) -> list[int]:
    """Exact product using two transforms; coefficients must stay below about 3.6e18."""
    product2 = _ntt2.mod_multiply(left, right, circular)
    product3 = _ntt3.mod_multiply(left, right, circular)
    return [
        chinese_remainder_theorem(x, MOD2, y, MOD3, _INV23) for x, y in zip(product2, product3)
    ]


def mod_multiply_any(
    left: Sequence[int], right: Sequence[int], mod: int, circular: bool = False
) -> list[int]:
    """Product modulo ``mod``, picking the cheapest of one, two or three transforms."""
    if mod <= 0:
        raise ValueError("mod must be positive")

    if mod == MOD:
        return _ntt1.mod_multiply(left, right, circular)

    if mod < TRIPLE_CUTOFF:
        return [x % mod for x in multi_multiply(left, right, circular)]

    return multi_mod_multiply(left, right, mod, circular)