"""Command-line benchmarks writing space and query-time tables as CSV."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Optional, TextIO

from eliasfano.benchmark import PlainVector, access_benchmark, successor_benchmark
from eliasfano.bitvector import BitVector, RankSelect
from eliasfano.ef import EliasFano
from eliasfano.myvec import MyVec
from eliasfano.utils import (
    gen_queries_access,
    gen_queries_succ,
    gen_seq,
    gen_seq_skewed,
)

HEADER = "\\log n, \\log u, Space(MiB), Access(ns), Successor(ns)"

_MIB = 1024 * 1024
_DEFAULT_QUERIES = 1 << 20
_DEFAULT_LOG_LENS = (26, 27)
_DEFAULT_SKEWED_LOG_LEN = 26
_DEFAULT_MAX_LOG_VAL = 34
_DEFAULT_SKEWED_MAX_LOG_VAL = 32
_SKEWED = "ef-skewed"

_BUILDERS: dict[str, Callable[[list[int]], object]] = {
    "bv": lambda values: RankSelect(BitVector.from_positions(values)),
    "ef": EliasFano,
    "myvec": MyVec,
    "vector": PlainVector,
}


def _write_row(out: TextIO, structure, log_len: int, log_val: int,
               access_queries: Sequence[int], successor_queries: Sequence[int]) -> None:
    time_access = access_benchmark(structure, access_queries)
    time_succ = successor_benchmark(structure, successor_queries)
    space = structure.space_usage_bytes() / _MIB
    out.write(f"{log_len},{log_val},{space:.2f},{time_access},{time_succ}\n")


def run_benchmark(out: TextIO, structure: str, log_lens: Iterable[int],
                  log_vals: Iterable[int], num_queries: int) -> None:
    """Write one CSV row per (log n, log u) pair with log u >= log n."""
    try:
        build = _BUILDERS[structure]
    except KeyError:
        raise ValueError(
            f"unknown structure {structure!r}; choose from {', '.join(sorted(_BUILDERS))}"
        ) from None
    log_vals = list(log_vals)
    for log_len in log_lens:
        n = 1 << log_len
        for log_val in (v for v in log_vals if v >= log_len):
            max_val = 1 << log_val
            values = gen_seq(n, max_val)
            access_queries = gen_queries_access(num_queries, n)
            successor_queries = gen_queries_succ(num_queries, max_val)
            _write_row(out, build(values), log_len, log_val,
                       access_queries, successor_queries)


def run_skewed_benchmark(out: TextIO, log_len: int, log_vals: Iterable[int],
                         num_queries: int) -> None:
    """Benchmark Elias-Fano on dense sequences ending in one large outlier."""
    n = 1 << log_len
    for log_val in log_vals:
        if log_val <= log_len:
            raise ValueError(
                f"log_val {log_val} must exceed log_len {log_len} for skewed sequences"
            )
        max_val = 1 << log_val
        values = gen_seq_skewed(n, max_val)
        access_queries = gen_queries_access(num_queries, n)
        successor_queries = gen_queries_succ(num_queries, n * 2)
        _write_row(out, EliasFano(values), log_len, log_val,
                   access_queries, successor_queries)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eliasfano-benchmark",
        description="Measure space and query times of integer sequence structures.",
    )
    parser.add_argument("structure", choices=sorted([*_BUILDERS, _SKEWED]))
    parser.add_argument("resultfile", help="CSV file to write the results to")
    parser.add_argument("--log-lens", type=int, nargs="+", default=None,
                        help="base-2 logarithms of the sequence lengths")
    parser.add_argument("--max-log-val", type=int, default=None,
                        help="exclusive upper bound on the log of the universe")
    parser.add_argument("--queries", type=int, default=_DEFAULT_QUERIES,
                        help="number of queries of each kind")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    if args.queries < 1:
        print("error: --queries must be at least 1", file=sys.stderr)
        return 2
    skewed = args.structure == _SKEWED
    log_lens = args.log_lens or (
        [_DEFAULT_SKEWED_LOG_LEN] if skewed else list(_DEFAULT_LOG_LENS)
    )
    max_log_val = args.max_log_val
    if max_log_val is None:
        max_log_val = _DEFAULT_SKEWED_MAX_LOG_VAL if skewed else _DEFAULT_MAX_LOG_VAL

    try:
        with open(args.resultfile, "w", encoding="utf-8") as out:
            out.write(HEADER + "\n")
            if skewed:
                for log_len in log_lens:
                    run_skewed_benchmark(out, log_len,
                                         range(log_len + 1, max_log_val),
                                         args.queries)
            else:
                run_benchmark(out, args.structure, log_lens,
                              range(min(log_lens), max_log_val), args.queries)
    except OSError as exc:
        print(f"error: cannot write {args.resultfile}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())