import random

import pytest

from eliasfano.bitvector import BitVector, RankSelect


def _random_fields(seed, count):
    rng = random.Random(seed)
    fields = []
    for _ in range(count):
        width = rng.randint(0, 64)
        value = rng.getrandbits(width) if width else 0
        fields.append((value, width))
    return fields


def test_append_and_get_round_trip():
    fields = _random_fields(1, 300)
    bv = BitVector()
    for value, width in fields:
        bv.append_bits(value, width)
    pos = 0
    for value, width in fields:
        assert bv.get_bits(pos, width) == value
        pos += width
    assert len(bv) == pos


def test_append_masks_high_bits():
    bv = BitVector()
    bv.append_bits(0b1111, 2)
    assert len(bv) == 2
    assert bv.get_bits(0, 2) == 0b11


def test_get_bits_out_of_range():
    bv = BitVector()
    bv.append_bits(5, 3)
    assert bv.get_bits(1, 3) is None
    assert bv.get_bits(0, 65) is None
    assert bv.get_bits(3, 0) == 0


def test_append_rejects_wide_field():
    bv = BitVector()
    with pytest.raises(ValueError):
        bv.append_bits(1, 65)
    with pytest.raises(ValueError):
        bv.append_bits(-1, 4)


def test_from_positions_sets_exact_bits():
    positions = [0, 3, 63, 64, 130]
    bv = BitVector.from_positions(positions)
    assert len(bv) == positions[-1] + 1
    assert [i for i, bit in enumerate(bv) if bit] == positions


def test_from_positions_empty_and_negative():
    assert len(BitVector.from_positions([])) == 0
    with pytest.raises(ValueError):
        BitVector.from_positions([-1])


def test_space_usage_grows():
    small = BitVector.from_positions([1])
    large = BitVector.from_positions([1000])
    assert large.space_usage_bytes() > small.space_usage_bytes()


@pytest.fixture
def random_positions():
    rng = random.Random(7)
    return sorted(rng.sample(range(2000), 500))


def test_rank_select_consistent(random_positions):
    rs = RankSelect(BitVector.from_positions(random_positions))
    assert rs.n_ones() == len(random_positions)
    assert rs.n_ones() + rs.n_zeros() == len(rs)
    for i, p in enumerate(random_positions):
        assert rs.select1(i) == p
        assert rs.rank1(p) == i
        assert rs.get(i) == p
    assert rs.select1(len(random_positions)) is None
    assert rs.rank1(len(rs) + 1) is None
    assert rs.rank1(len(rs)) == rs.n_ones()


def test_select0_finds_unset_bits(random_positions):
    rs = RankSelect(BitVector.from_positions(random_positions))
    members = set(random_positions)
    zeros = [p for p in range(len(rs)) if p not in members]
    for i, p in enumerate(zeros):
        assert rs.select0(i) == p
    assert rs.select0(len(zeros)) is None


def test_successor_invariant(random_positions):
    rs = RankSelect(BitVector.from_positions(random_positions))
    members = set(random_positions)
    for x in range(len(rs) + 5):
        succ = rs.successor(x)
        if x > random_positions[-1]:
            assert succ is None
        else:
            assert succ in members and succ >= x
            assert not any(y in members for y in range(x, succ))