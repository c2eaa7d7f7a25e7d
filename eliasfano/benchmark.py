"""Query interfaces and timing helpers for integer sequence structures."""

from __future__ import annotations

import time
from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Access(Protocol):
    """A structure answering positional access queries."""

    def get(self, i: int) -> Optional[int]:
        """The i-th value, or None when ``i`` is out of range."""
        ...


@runtime_checkable
class Successor(Protocol):
    """A structure answering successor (lower bound) queries."""

    def successor(self, x: int) -> Optional[int]:
        """The smallest stored value that is at least ``x``, or None."""
        ...


class PlainVector:
    """A sorted list of integers, uncompressed, as a baseline."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)

    def get(self, i: int) -> Optional[int]:
        if 0 <= i < len(self._values):
            return self._values[i]
        return None

    def successor(self, x: int) -> Optional[int]:
        if not self._values:
            raise ValueError("successor query on an empty vector")
        idx = bisect_left(self._values, x)
        return self._values[idx] if idx < len(self._values) else None

    def __len__(self) -> int:
        return len(self._values)

    def space_usage_bytes(self) -> int:
        """Size as 64-bit integers plus the list header."""
        return 8 * len(self._values) + 24


def _time_per_query(run, queries: Sequence) -> int:
    if not queries:
        raise ValueError("at least one query is required")
    start = time.perf_counter_ns()
    for q in queries:
        run(q)
    elapsed = time.perf_counter_ns() - start
    return elapsed // len(queries)


def access_benchmark(structure: Access, queries: Sequence[int]) -> int:
    """Average nanoseconds per access query."""
    return _time_per_query(structure.get, queries)


def successor_benchmark(structure: Successor, queries: Sequence[int]) -> int:
    """Average nanoseconds per successor query."""
    return _time_per_query(structure.successor, queries)