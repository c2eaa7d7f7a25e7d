"""Random sequence and query generators for experiments."""

from __future__ import annotations

import random


def gen_seq(length: int, val: int) -> list[int]:
    """A sorted list of ``length`` distinct random integers in ``[0, val]``."""
    if length > val:
        raise ValueError(f"length {length} exceeds maximum value {val}")
    bound = val + 1 - length
    values = sorted(random.randrange(bound) for _ in range(length))
    return [x + i for i, x in enumerate(values)]


def gen_seq_skewed(length: int, val: int) -> list[int]:
    """A dense sorted sequence of ``length - 1`` items followed by ``val``."""
    if length < 1:
        raise ValueError("length must be at least 1")
    if length > val:
        raise ValueError(f"length {length} exceeds maximum value {val}")
    dense_limit = min(length * 2, val) - 1
    values = gen_seq(length - 1, dense_limit)
    values.append(val)
    return values


def gen_queries_access(num_queries: int, seq_len: int) -> list[int]:
    """Random positions in ``[0, seq_len)``."""
    return [random.randrange(seq_len) for _ in range(num_queries)]


def gen_queries_succ(num_queries: int, maximum: int) -> list[int]:
    """Random values in ``[0, maximum)``."""
    return [random.randrange(maximum) for _ in range(num_queries)]