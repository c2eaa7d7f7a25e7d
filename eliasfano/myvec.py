"""A sorted integer sequence packed at a fixed bit width."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from typing import Optional

from eliasfano.bitvector import BitVector


class MyVec:
    """Sorted values stored with the bit width of the largest (last) value."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if any(x < 0 for x in items):
            raise ValueError("values must be non-negative")
        self._n = len(items)
        self._width = items[-1].bit_length() if items else 0
        self._bits = BitVector()
        for x in items:
            if x.bit_length() > self._width:
                raise ValueError(f"value {x} does not fit in {self._width} bits")
            self._bits.append_bits(x, self._width)

    def get(self, i: int) -> Optional[int]:
        """The i-th value, or None when ``i`` is out of range."""
        if not 0 <= i < self._n:
            return None
        return self._bits.get_bits(i * self._width, self._width)

    def __getitem__(self, i: int) -> int:
        value = self.get(i)
        if value is None:
            raise IndexError(f"index {i} out of range for length {self._n}")
        return value

    def successor(self, x: int) -> Optional[int]:
        """The smallest stored value that is at least ``x``, or None."""
        if self._n == 0:
            raise ValueError("successor query on an empty vector")
        if x > self.get(self._n - 1):
            return None
        return self.get(bisect_left(self, x))

    def __len__(self) -> int:
        return self._n

    def __iter__(self):
        for i in range(self._n):
            yield self.get(i)

    def space_usage_bytes(self) -> int:
        """Approximate size in bytes of the packed bits and the two counters."""
        return self._bits.space_usage_bytes() + 16