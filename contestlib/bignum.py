"""Arbitrary-size non-negative integers stored as base-10^4 limbs."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from functools import total_ordering
from typing import Union

from contestlib import fft

SECTION = 4
BASE = 10**SECTION
DOUBLE_DIV_SECTIONS = 5
BIGNUM_FFT_CUTOFF = 1500
KARATSUBA_CUTOFF = 150
U64_MAX = (1 << 64) - 1
BASE_OVERFLOW_CUTOFF = U64_MAX // BASE

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29)
_rng = random.Random()

Operand = Union["BigNum", int]


def _trimmed(limbs: list[int]) -> list[int]:
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    return limbs or [0]


def _normalize(raw: Sequence[int]) -> list[int]:
    """Propagate carries through limbs that may exceed the base."""
    limbs = []
    carry = 0
    for value in raw:
        carry, digit = divmod(value + carry, BASE)
        limbs.append(digit)
    while carry:
        carry, digit = divmod(carry, BASE)
        limbs.append(digit)
    return _trimmed(limbs)


@total_ordering
class BigNum:
    """A non-negative integer with schoolbook, Karatsuba and FFT multiplication."""

    __slots__ = ("_values",)

    def __init__(self, value: Union[BigNum, int, str] = 0) -> None:
        if isinstance(value, BigNum):
            self._values = list(value._values)
        elif isinstance(value, int):
            if value < 0:
                raise ValueError("BigNum cannot be negative")
            limbs = []
            while True:
                value, digit = divmod(value, BASE)
                limbs.append(digit)
                if value == 0:
                    break
            self._values = limbs
        elif isinstance(value, str):
            if any(not "0" <= ch <= "9" for ch in value):
                raise ValueError(f"invalid digit string: {value!r}")
            limbs = [
                int(value[max(end - SECTION, 0):end])
                for end in range(len(value), 0, -SECTION)
            ]
            self._values = _trimmed(limbs)
        else:
            raise TypeError(f"cannot build a BigNum from {type(value).__name__}")

    @classmethod
    def _from_limbs(cls, limbs: list[int]) -> BigNum:
        result = cls.__new__(cls)
        result._values = _trimmed(limbs)
        return result

    @property
    def limbs(self) -> tuple[int, ...]:
        """The base-10^4 digits, least significant first."""
        return tuple(self._values)

    @staticmethod
    def _coerce(other: object) -> BigNum:
        if isinstance(other, BigNum):
            return other
        if isinstance(other, int):
            return BigNum(other)
        return NotImplemented

    def __str__(self) -> str:
        head = str(self._values[-1])
        return head + "".join(f"{v:0{SECTION}d}" for v in reversed(self._values[:-1]))

    def __repr__(self) -> str:
        return f"BigNum({str(self)!r})"

    def __int__(self) -> int:
        result = 0
        for value in reversed(self._values):
            result = result * BASE + value
        return result

    def __index__(self) -> int:
        return int(self)

    def __bool__(self) -> bool:
        return self._values != [0]

    def __hash__(self) -> int:
        return hash(int(self))

    def _compare(self, other: BigNum) -> int:
        a, b = self._values, other._values
        if len(a) != len(b):
            return -1 if len(a) < len(b) else 1
        for x, y in zip(reversed(a), reversed(b)):
            if x != y:
                return -1 if x < y else 1
        return 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int) and other < 0:
            return False
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: Operand) -> bool:
        if isinstance(other, int) and other < 0:
            return False
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) < 0

    def shift_left(self, p: int) -> BigNum:
        """Multiply by BASE**p."""
        if p < 0:
            raise ValueError("shift must be non-negative")
        return BigNum._from_limbs([0] * p + self._values)

    def shift_right(self, p: int) -> BigNum:
        """Floor-divide by BASE**p."""
        if p < 0:
            raise ValueError("shift must be non-negative")
        if p >= len(self._values):
            return BigNum(0)
        return BigNum._from_limbs(self._values[p:])

    def _range(self, a: int, b: int | None = None) -> BigNum:
        if b is None:
            b = len(self._values)
        if a > b:
            raise ValueError("invalid limb range")
        return BigNum._from_limbs(self._values[a:b])

    def __add__(self, other: Operand) -> BigNum:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        a, b = self._values, other._values
        size = max(len(a), len(b))
        raw = [
            (a[i] if i < len(a) else 0) + (b[i] if i < len(b) else 0) for i in range(size)
        ]
        return BigNum._from_limbs(_normalize(raw))

    __radd__ = __add__

    def __sub__(self, other: Operand) -> BigNum:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if self < other:
            raise ValueError("BigNum subtraction would be negative")
        limbs = list(self._values)
        b = other._values
        carry = 0
        for i in range(len(limbs)):
            if i >= len(b) and carry == 0:
                break
            subtract = (b[i] if i < len(b) else 0) + carry
            if limbs[i] < subtract:
                limbs[i] += BASE - subtract
                carry = 1
            else:
                limbs[i] -= subtract
                carry = 0
        return BigNum._from_limbs(limbs)

    def __rsub__(self, other: int) -> BigNum:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def _mul_small(self, mult: int) -> BigNum:
        if mult == 0:
            return BigNum(0)
        if mult >= BASE_OVERFLOW_CUTOFF:
            return self._mul_big(BigNum(mult))
        return BigNum._from_limbs(_normalize([v * mult for v in self._values]))

    def _mul_big(self, other: BigNum) -> BigNum:
        a, b = self, other
        if len(a._values) > len(b._values):
            a, b = b, a
        n, m = len(a._values), len(b._values)

        if n > KARATSUBA_CUTOFF and n + m > BIGNUM_FFT_CUTOFF:
            return BigNum._from_limbs(_normalize(fft.multiply(a._values, b._values)))

        if n > KARATSUBA_CUTOFF:
            mid = n // 2
            a1, a2 = a._range(0, mid), a._range(mid, n)
            b1, b2 = b._range(0, mid), b._range(mid, m)
            x = a2 * b2
            z = a1 * b1
            y = (a1 + a2) * (b1 + b2) - x - z
            return x.shift_left(2 * mid) + y.shift_left(mid) + z

        raw = [0] * (n + m - 1)
        for i, x in enumerate(a._values):
            if x:
                for j, y in enumerate(b._values):
                    raw[i + j] += x * y
        return BigNum._from_limbs(_normalize(raw))

    def __mul__(self, other: Operand) -> BigNum:
        if isinstance(other, int):
            if other < 0:
                raise ValueError("BigNum cannot be negative")
            return self._mul_small(other)
        if isinstance(other, BigNum):
            return self._mul_big(other)
        return NotImplemented

    __rmul__ = __mul__

    def _estimate_div(self, other: BigNum) -> float:
        def leading(limbs: list[int]) -> float:
            estimate = 0.0
            scale = 1.0
            for value in list(reversed(limbs))[:DOUBLE_DIV_SECTIONS]:
                estimate += scale * value
                scale /= BASE
            return estimate

        n, m = len(self._values), len(other._values)
        return leading(self._values) / leading(other._values) * float(BASE) ** (n - m)

    def _divmod_big(self, other: BigNum) -> tuple[BigNum, BigNum]:
        if not other:
            raise ZeroDivisionError("BigNum division by zero")
        n, m = len(self._values), len(other._values)
        quotient = [0] * max(n - m + 1, 1)
        remainder = BigNum(self)

        for i in range(n - m, -1, -1):
            if i >= len(remainder._values):
                continue
            chunk = remainder._range(i)
            div = int(chunk._estimate_div(other) + 1e-7)
            mult = other * div

            while div > 0 and mult > chunk:
                mult = mult - other
                div -= 1

            while div < BASE - 1 and mult + other <= chunk:
                mult = mult + other
                div += 1

            remainder = remainder - mult.shift_left(i)
            quotient[i] = div

        return BigNum._from_limbs(quotient), remainder

    def _divmod_small(self, denom: int) -> tuple[BigNum, int]:
        if denom <= 0:
            if denom == 0:
                raise ZeroDivisionError("BigNum division by zero")
            raise ValueError("BigNum cannot be negative")
        if denom >= BASE_OVERFLOW_CUTOFF:
            quotient, remainder = self._divmod_big(BigNum(denom))
            return quotient, int(remainder)
        quotient = [0] * len(self._values)
        remainder = 0
        for i in range(len(self._values) - 1, -1, -1):
            remainder = remainder * BASE + self._values[i]
            if remainder >= denom:
                quotient[i], remainder = divmod(remainder, denom)
        return BigNum._from_limbs(quotient), remainder

    def __divmod__(self, other: Operand) -> tuple[BigNum, Union[BigNum, int]]:
        """Quotient and remainder; the remainder is an int when ``other`` is an int."""
        if isinstance(other, int):
            return self._divmod_small(other)
        if isinstance(other, BigNum):
            return self._divmod_big(other)
        return NotImplemented

    def __floordiv__(self, other: Operand) -> BigNum:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __mod__(self, other: Operand) -> Union[BigNum, int]:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def power(self, exponent: int) -> BigNum:
        """This number raised to a non-negative integer power."""
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        result = BigNum(1)
        for k in range(exponent.bit_length() - 1, -1, -1):
            result = result * result
            if exponent >> k & 1:
                result = result * self
        return result

    @staticmethod
    def mod_pow(base: Operand, exponent: Operand, mod: Operand) -> BigNum:
        """``base ** exponent % mod`` using sliding-window exponentiation."""
        a, b, modulus = BigNum(base), BigNum(exponent), BigNum(mod)
        if not modulus:
            raise ZeroDivisionError("modulus must be positive")

        bits = []
        while b:
            b, bit = divmod(b, 2)
            bits.append(bit)

        n = len(bits)
        k = 1
        while (2 * k) << k < n:
            k += 1

        cached = [BigNum(1), a]
        for _ in range(2, 1 << k):
            cached.append(cached[-1] * a % modulus)

        result = BigNum(1)
        window = 0
        for i in range(n - 1, -1, -1):
            window = 2 * window + bits[i]
            result = result * result % modulus
            if 2 * window >= 1 << k or i == 0:
                result = result * cached[window] % modulus
                window = 0

        return result

    def is_probable_prime(self, iterations: int = 20) -> bool:
        """Miller-Rabin test; a composite passes with probability at most 4**-iterations."""
        n = self
        if n < 2:
            return False

        product = 1
        for p in _SMALL_PRIMES:
            if n == p:
                return True
            product *= p

        remainder = n % product
        if any(remainder % p == 0 for p in _SMALL_PRIMES):
            return False

        r = 0
        d = n - 1
        while d % 2 == 0:
            r += 1
            d = d // 2

        n_minus_one = n - 1
        a_max = int(n - 2) if n < BigNum(U64_MAX) + 2 else U64_MAX

        for _ in range(iterations):
            a = BigNum(_rng.randint(2, a_max))
            x = BigNum.mod_pow(a, d, n)

            if x == 1 or x == n_minus_one:
                continue

            witness = True
            for _ in range(r - 1):
                x = x * x % n
                if x == n_minus_one:
                    witness = False
                    break

            if witness:
                return False

        return True


def _run_bignum(tokens: list[str], out) -> None:
    for s1, s2 in zip(tokens[0::2], tokens[1::2]):
        a, b = BigNum(s1), BigNum(s2)
        comparisons = (
            ("<", a < b),
            ("<=", a <= b),
            (">", a > b),
            (">=", a >= b),
            ("==", a == b),
            ("!=", a != b),
        )
        for symbol, flag in comparisons:
            out.write(f"{symbol} {str(flag).lower()}\n")
        out.write(f"+ {a + b}\n")
        out.write(f"- {b - a if a < b else a - b}\n")

        fits = b <= U64_MAX
        out.write(f"* {a * int(b) if fits and _rng.random() < 0.5 else a * b}\n")

        if b:
            divisor = int(b) if fits and _rng.random() < 0.5 else b
            quotient, remainder = divmod(a, divisor)
            out.write(f"/ {quotient}\n")
            out.write(f"% {remainder}\n")

        out.write(f"{a} {b}\n")


def _run_multiply(tokens: list[str], out) -> None:
    for s1, s2 in zip(tokens[0::2], tokens[1::2]):
        out.write(f"{BigNum(s1) * BigNum(s2)}\n")


def _run_mod_multiply(tokens: list[str], out) -> None:
    n, m, mod = int(tokens[0]), int(tokens[1]), int(tokens[2])
    circular = bool(int(tokens[3]))
    numbers = [int(t) for t in tokens[4:4 + n + m]]
    left, right = numbers[:n], numbers[n:]
    answer = fft.mod_multiply(left, right, mod, mod > fft.SPLIT_BASE, circular)
    out.writelines(f"{x}\n" for x in answer)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a task name and its input from stdin and write the results to stdout.

    Tasks: ``bignum`` (pairs of numbers, all operations), ``multiply`` (pairs of numbers)
    and ``mod_multiply`` (``n m mod circular`` followed by both coefficient lists).
    """
    tokens = sys.stdin.read().split()
    if not tokens:
        raise SystemExit("missing task name")

    task, rest = tokens[0], tokens[1:]
    handlers = {
        "bignum": _run_bignum,
        "multiply": _run_multiply,
        "mod_multiply": _run_mod_multiply,
    }
    handler = handlers.get(task)
    if handler is None:
        raise SystemExit(f"unknown task: {task}")

    handler(rest, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())