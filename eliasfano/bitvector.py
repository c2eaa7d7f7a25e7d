"""Plain bit vectors and a rank/select index over them."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from typing import Optional

_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1


def _select_in_word(word: int, k: int) -> int:
    """Return the offset of the k-th (0-based) set bit of ``word``."""
    for _ in range(k):
        word &= word - 1
    return (word & -word).bit_length() - 1


class BitVector:
    """An append-only sequence of bits packed into 64-bit words."""

    def __init__(self) -> None:
        self._words: list[int] = []
        self._len = 0

    def append_bits(self, value: int, width: int) -> None:
        """Append the ``width`` lowest bits of ``value``, least significant first."""
        if not 0 <= width <= _WORD_BITS:
            raise ValueError(f"width must be between 0 and {_WORD_BITS}, got {width}")
        if value < 0:
            raise ValueError("value must be non-negative")
        if width == 0:
            return
        value &= (1 << width) - 1
        offset = self._len % _WORD_BITS
        if offset == 0:
            self._words.append(value)
        else:
            self._words[-1] |= (value << offset) & _WORD_MASK
            if offset + width > _WORD_BITS:
                self._words.append(value >> (_WORD_BITS - offset))
        self._len += width

    def get_bits(self, pos: int, width: int) -> Optional[int]:
        """Read ``width`` bits starting at ``pos``; None if out of range."""
        if width < 0 or width > _WORD_BITS or pos < 0 or pos + width > self._len:
            return None
        if width == 0:
            return 0
        word, offset = divmod(pos, _WORD_BITS)
        result = self._words[word] >> offset
        if offset + width > _WORD_BITS:
            result |= self._words[word + 1] << (_WORD_BITS - offset)
        return result & ((1 << width) - 1)

    def __len__(self) -> int:
        return self._len

    def __iter__(self):
        for pos in range(self._len):
            word, offset = divmod(pos, _WORD_BITS)
            yield (self._words[word] >> offset) & 1

    @classmethod
    def from_positions(cls, positions: Iterable[int]) -> "BitVector":
        """Build a bit vector whose set bits are exactly ``positions``."""
        points = list(positions)
        bv = cls()
        if not points:
            return bv
        if min(points) < 0:
            raise ValueError("positions must be non-negative")
        length = max(points) + 1
        words = [0] * ((length + _WORD_BITS - 1) // _WORD_BITS)
        for p in points:
            words[p // _WORD_BITS] |= 1 << (p % _WORD_BITS)
        bv._words = words
        bv._len = length
        return bv

    def space_usage_bytes(self) -> int:
        """Approximate size in bytes: packed words plus the length field."""
        return 8 * len(self._words) + 16


class RankSelect:
    """Rank and select queries over an immutable :class:`BitVector`."""

    def __init__(self, bits: BitVector) -> None:
        self._bits = bits
        words = bits._words
        ranks = [0]
        for word in words:
            ranks.append(ranks[-1] + word.bit_count())
        self._ranks = ranks
        self._zero_ranks = [k * _WORD_BITS - r for k, r in enumerate(ranks)]
        self._ones = ranks[-1]
        self._zeros = len(bits) - self._ones

    def rank1(self, pos: int) -> Optional[int]:
        """Number of set bits in positions ``[0, pos)``; None if ``pos`` exceeds the length."""
        if pos < 0 or pos > len(self._bits):
            return None
        word, offset = divmod(pos, _WORD_BITS)
        rank = self._ranks[word]
        if offset:
            rank += (self._bits._words[word] & ((1 << offset) - 1)).bit_count()
        return rank

    def select1(self, i: int) -> Optional[int]:
        """Position of the i-th (0-based) set bit, or None."""
        if i < 0 or i >= self._ones:
            return None
        word = bisect_right(self._ranks, i) - 1
        offset = _select_in_word(self._bits._words[word], i - self._ranks[word])
        return word * _WORD_BITS + offset

    def select0(self, i: int) -> Optional[int]:
        """Position of the i-th (0-based) unset bit, or None."""
        if i < 0 or i >= self._zeros:
            return None
        word = bisect_right(self._zero_ranks, i) - 1
        inverted = ~self._bits._words[word] & _WORD_MASK
        offset = _select_in_word(inverted, i - self._zero_ranks[word])
        return word * _WORD_BITS + offset

    def n_ones(self) -> int:
        return self._ones

    def n_zeros(self) -> int:
        return self._zeros

    def __len__(self) -> int:
        return len(self._bits)

    def get(self, i: int) -> Optional[int]:
        """The i-th element of the set encoded by the bit vector."""
        return self.select1(i)

    def successor(self, x: int) -> Optional[int]:
        """Smallest set position that is at least ``x``, or None."""
        rank = self.rank1(x)
        if rank is None:
            rank = self._ones
        return self.select1(rank)

    def space_usage_bytes(self) -> int:
        """Approximate size in bytes of the bits and the rank directory."""
        return (
            self._bits.space_usage_bytes()
            + 8 * (len(self._ranks) + len(self._zero_ranks))
            + 16
        )