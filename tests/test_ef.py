import random
from bisect import bisect_left

import pytest

from eliasfano.ef import EliasFano
from eliasfano.utils import gen_seq, gen_seq_skewed


def check_vec(v):
    ef = EliasFano(v)
    for i, value in enumerate(v):
        assert ef.get(i) == value
    for x in range(v[0]):
        assert ef.lower_bound(x) == v[0]
    for a, b in zip(v, v[1:]):
        assert ef.lower_bound(a) == a
        for x in range(a + 1, b):
            assert ef.lower_bound(x) == b
    for x in range(v[-1] + 1, v[-1] + 20):
        assert ef.lower_bound(x) is None


def test_ef_small():
    check_vec([1, 4, 9, 12, 27])


def test_ef_mid():
    check_vec([1, 4, 9, 12, 27, 32, 34, 35, 40, 44, 49, 70, 71])


def test_ef_big():
    random.seed(1234)
    check_vec(gen_seq(2000, 100000))


def test_ef_skewed():
    random.seed(99)
    check_vec(gen_seq_skewed(500, 5000))


def test_get_out_of_range_is_none():
    ef = EliasFano([1, 4, 9, 12, 27])
    assert ef.get(5) is None
    assert ef.get(-1) is None


def test_get_unchecked():
    v = [1, 4, 9, 12, 27]
    ef = EliasFano(v)
    assert [ef.get_unchecked(i) for i in range(len(v))] == v
    with pytest.raises(IndexError):
        ef.get_unchecked(5)


def test_len_and_iter():
    v = [1, 4, 9, 12, 27, 32, 34, 35, 40, 44, 49, 70, 71]
    ef = EliasFano(v)
    assert len(ef) == len(v)
    assert list(ef) == v


def test_successor_matches_lower_bound():
    v = [1, 4, 9, 12, 27, 32, 34, 35, 40, 44, 49, 70, 71]
    ef = EliasFano(v)
    for x in range(80):
        assert ef.successor(x) == ef.lower_bound(x)


@pytest.mark.parametrize(
    "v",
    [
        [1, 4, 9, 12, 27],
        [1, 4, 9, 12, 27, 32, 34, 35, 40, 44, 49, 70, 71],
        [0, 1, 2, 3, 4, 5],
        [100],
    ],
)
def test_lower_bound_id(v):
    ef = EliasFano(v)
    for x in range(v[-1] + 1):
        assert ef.lower_bound_id(x) == bisect_left(v, x)
    for x in range(v[-1] + 1, v[-1] + 20):
        assert ef.lower_bound_id(x) is None


def test_duplicates():
    v = [0, 0, 0, 5, 5, 9]
    ef = EliasFano(v)
    assert list(ef) == v
    assert ef.lower_bound(0) == 0
    assert ef.lower_bound(1) == 5
    assert ef.lower_bound(6) == 9
    assert ef.lower_bound(10) is None


def test_all_zeros():
    ef = EliasFano([0, 0, 0])
    assert list(ef) == [0, 0, 0]
    assert ef.lower_bound(0) == 0
    assert ef.lower_bound(1) is None


def test_empty():
    ef = EliasFano([])
    assert len(ef) == 0
    assert ef.get(0) is None
    assert ef.lower_bound(0) is None
    assert ef.lower_bound(5) is None


def test_unsorted_rejected():
    with pytest.raises(ValueError):
        EliasFano([3, 1, 2])


def test_negative_rejected():
    with pytest.raises(ValueError):
        EliasFano([-1, 2])


def test_space_grows_with_size():
    small = EliasFano([1, 4, 9])
    large = EliasFano(range(0, 30000, 3))
    assert large.space_usage_bytes() > small.space_usage_bytes()