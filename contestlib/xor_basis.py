"""Linear basis over GF(2) for integers of a fixed bit width."""

from __future__ import annotations

from collections.abc import Iterator


class XorBasis:
    """A reduced xor basis whose elements have distinct highest bits, kept in decreasing order."""

    def __init__(self, bits: int = 30) -> None:
        if bits <= 0:
            raise ValueError("bits must be positive")
        self.bits = bits
        self._basis: list[int] = []

    def __len__(self) -> int:
        return len(self._basis)

    def __iter__(self) -> Iterator[int]:
        return iter(self._basis)

    def __repr__(self) -> str:
        return f"XorBasis(bits={self.bits}, basis={self._basis})"

    @property
    def full(self) -> bool:
        return len(self._basis) == self.bits

    def min_value(self, start: int) -> int:
        """Smallest value obtainable by xoring ``start`` with elements of the span."""
        if self.full:
            return 0

        for value in self._basis:
            start = min(start, start ^ value)

        return start

    def max_value(self, start: int = 0) -> int:
        """Largest value obtainable by xoring ``start`` with elements of the span."""
        if self.full:
            return (1 << self.bits) - 1

        for value in self._basis:
            start = max(start, start ^ value)

        return start

    def add(self, x: int) -> bool:
        """Add ``x`` to the basis; return False if it was already in the span."""
        x = self.min_value(x)

        if x == 0:
            return False

        k = len(self._basis)
        while k > 0 and self._basis[k - 1] < x:
            k -= 1

        self._basis.insert(k, x)

        # Clear the highest bit of x from the larger elements.
        for i in range(k):
            self._basis[i] = min(self._basis[i], self._basis[i] ^ x)

        return True

    def merge(self, other: XorBasis) -> None:
        """Add every element of ``other`` into this basis."""
        for value in other:
            if self.full:
                break
            self.add(value)

    def copy(self) -> XorBasis:
        result = XorBasis(self.bits)
        result._basis = list(self._basis)
        return result

    @classmethod
    def combined(cls, a: XorBasis, b: XorBasis) -> XorBasis:
        """A new basis spanning both ``a`` and ``b``, built from the larger of the two."""
        larger, smaller = (a, b) if len(a) > len(b) else (b, a)
        result = larger.copy()
        result.bits = max(a.bits, b.bits)
        result.merge(smaller)
        return result