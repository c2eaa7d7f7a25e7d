# eliasfano

A compact representation of sorted sequences of non-negative integers using
Elias-Fano encoding, together with a few simple alternatives to compare it
against and a small benchmark command.

## Structures

- `eliasfano.ef.EliasFano`: splits each value into low bits, stored packed,
  and high bits, stored in unary in a bit vector with rank/select support.
  Supports `get(pos)`, `get_unchecked(pos)` (raises `IndexError` when out of
  range), `lower_bound(x)` (smallest value `>= x`), `lower_bound_id(x)` (its
  position), `successor(x)` (same as `lower_bound`), `len()` and iteration.
  The input must be sorted in non-decreasing order and non-negative, otherwise
  `ValueError` is raised.
- `eliasfano.myvec.MyVec`: every value packed with a fixed bit width, the width
  of the last (largest) value. Supports `get`, indexing, iteration and
  `successor`.
- `eliasfano.benchmark.PlainVector`: a plain list searched by binary search.
- `eliasfano.bitvector.RankSelect`: rank/select over a
  `eliasfano.bitvector.BitVector`. Built over
  `BitVector.from_positions(values)` it holds a one at every value of the
  sequence and answers `get(i)` through `select1` and `successor(x)` through
  `rank1` and `select1`. It also offers `rank1`, `select0`, `n_ones` and
  `n_zeros`.

Each structure answers `get(i)` and `successor(x)`, returning `None` when there
is no such element, and reports an approximate `space_usage_bytes()`.
`eliasfano.benchmark` also defines the `Access` and `Successor` protocols and
the timing helpers `access_benchmark` and `successor_benchmark`, which return
the average nanoseconds per query.

## Example

```python
from eliasfano.ef import EliasFano

ef = EliasFano([1, 4, 9, 12, 27])
ef.get(2)            # 9
ef.lower_bound(10)   # 12
ef.lower_bound(28)   # None
len(ef)              # 5
```

Random test data can be produced with `eliasfano.utils.gen_seq(length, val)`,
which returns a sorted sequence of distinct values no greater than `val`, and
`gen_seq_skewed(length, val)`, which packs all values but the last into a dense
prefix and ends with `val`. `gen_queries_access` and `gen_queries_succ` produce
random query lists.

## Benchmarks

The `eliasfano-benchmark` command times access and successor queries for a
chosen structure over sequences of growing universe size and writes a header
and one CSV line per configuration (log n, log u, space in MiB, access and
successor time per query in nanoseconds) to a result file:

```
eliasfano-benchmark ef results.csv
eliasfano-benchmark vector results.csv --log-lens 16 18 --max-log-val 24 --queries 10000
```

The structure is one of `bv`, `ef`, `ef-skewed`, `myvec` or `vector`.
`ef-skewed` benchmarks `EliasFano` on sequences from `gen_seq_skewed`.
Options:

- `--log-lens`: base-2 logarithms of the sequence lengths (default 26 and 27,
  or 26 for `ef-skewed`).
- `--max-log-val`: exclusive upper bound on the log of the universe (default
  34, or 32 for `ef-skewed`).
- `--queries`: number of queries of each kind (default 2^20).

The defaults build sequences of tens of millions of values; smaller options
are advisable for a quick run. The same runs are available from Python as
`eliasfano.cli.run_benchmark` and `eliasfano.cli.run_skewed_benchmark`.

## Limitations

The structures live in memory only; there is no way to save them to a file or
load them back. Benchmark times measure this pure-Python implementation.

## Tests

```
pip install -e .[test]
pytest
```