"""Elias-Fano encoding of monotone integer sequences."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from eliasfano.bitvector import BitVector, RankSelect


class EliasFano:
    """A compressed, non-decreasing sequence of non-negative integers.

    Each value is split into low bits, stored verbatim in a packed bit
    vector, and high bits, stored in unary in a bit vector indexed for
    rank and select.
    """

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        self._low = BitVector()
        if not items:
            self._low_bits = 0
            self._high = RankSelect(BitVector())
            return
        if items[0] < 0:
            raise ValueError("values must be non-negative")
        if any(a > b for a, b in zip(items, items[1:])):
            raise ValueError("values must be sorted in non-decreasing order")

        low_bits = ((items[-1] + 1) // self._n).bit_length()
        low_mask = (1 << low_bits) - 1
        self._low_bits = low_bits
        for x in items:
            self._low.append_bits(x & low_mask, low_bits)
        self._high = RankSelect(
            BitVector.from_positions(
                (x >> low_bits) + i for i, x in enumerate(items)
            )
        )

    def _get_low(self, pos: int) -> Optional[int]:
        if not 0 <= pos < self._n:
            return None
        return self._low.get_bits(pos * self._low_bits, self._low_bits)

    def get(self, pos: int) -> Optional[int]:
        """The value at ``pos``, or None when ``pos`` is out of range."""
        low = self._get_low(pos)
        if low is None:
            return None
        high = (self._high.select1(pos) - pos) << self._low_bits
        return high | low

    def get_unchecked(self, pos: int) -> int:
        """The value at ``pos``; raises IndexError when out of range."""
        value = self.get(pos)
        if value is None:
            raise IndexError(f"position {pos} out of range for length {self._n}")
        return value

    def _bucket(self, x_high: int) -> Optional[tuple[int, int]]:
        """Index range of the elements whose high part equals ``x_high``."""
        upper_zero = self._high.select0(x_high)
        upper = self._n if upper_zero is None else upper_zero - x_high
        if x_high == 0:
            return 0, upper
        lower_zero = self._high.select0(x_high - 1)
        if lower_zero is None:
            return None
        return lower_zero + 1 - x_high, upper

    def _search_low(self, lower: int, upper: int, x_low: int) -> int:
        """Last index in ``[lower, upper)`` whose low part is below ``x_low``."""
        while lower + 1 < upper:
            mid = (lower + upper) // 2
            if self._get_low(mid) < x_low:
                lower = mid
            else:
                upper = mid
        return lower

    def lower_bound(self, x: int) -> Optional[int]:
        """The smallest stored value that is at least ``x``, or None."""
        x_high = x >> self._low_bits
        if x_high > self._high.n_zeros():
            return None
        x_low = x ^ (x_high << self._low_bits)
        bucket = self._bucket(x_high)
        if bucket is None:
            return None
        lower, upper = bucket
        if lower >= upper:
            return self.get(lower)
        if self._get_low(lower) >= x_low:
            return self.get(lower)
        return self.get(self._search_low(lower, upper, x_low) + 1)

    def lower_bound_id(self, x: int) -> Optional[int]:
        """Index of the smallest stored value that is at least ``x``, or None."""
        x_high = x >> self._low_bits
        x_low = x ^ (x_high << self._low_bits)
        bucket = self._bucket(x_high)
        if bucket is None:
            return None
        lower, upper = bucket
        if lower == upper:
            return lower
        if self._get_low(lower) >= x_low:
            return lower
        found = self._search_low(lower, upper, x_low) + 1
        return found if found < self._n else None

    def successor(self, x: int) -> Optional[int]:
        """Same as :meth:`lower_bound`."""
        return self.lower_bound(x)

    def __len__(self) -> int:
        return self._n

    def __iter__(self):
        for pos in range(self._n):
            yield self.get(pos)

    def space_usage_bytes(self) -> int:
        """Approximate size in bytes of both bit vectors and the two counters."""
        return self._high.space_usage_bytes() + self._low.space_usage_bytes() + 16