"""
Tests for the 64-bit LCG.

Critical: values must match fixed-width wraparound arithmetic exactly.
"""

import pytest

from zikzak.rng import MASK64, SimpleRNG


def test_seed_one_sequence():
    rng = SimpleRNG(1)
    assert rng.draw() == 7806831264735756412
    assert rng.draw() == 9396908728118811419
    assert rng.draw() == 11960119808228829710
    assert rng.state == 11960119808228829710


def test_seed_zero():
    assert SimpleRNG(0).draw() == 1442695040888963407


def test_wraparound_from_max_seed():
    rng = SimpleRNG(MASK64)
    assert rng.draw() == 13525302890751722018


def test_state_stays_in_u64():
    rng = SimpleRNG(MASK64)
    for _ in range(1000):
        assert 0 <= rng.draw() <= MASK64


def test_pick_in_range():
    # 7806831264735756412 % 8 == 4
    assert SimpleRNG(1).pick_in_range(0, 7) == 4
    assert SimpleRNG(1).pick_in_range(10, 17) == 14
    assert SimpleRNG(1).pick_in_range(3, 3) == 3


def test_pick_in_range_empty_range_raises():
    rng = SimpleRNG(1)
    with pytest.raises(ValueError):
        rng.pick_in_range(0, -1)
    # Guard fires before the state advances
    assert rng.state == 1


def test_same_seed_same_sequence():
    a, b = SimpleRNG(12345), SimpleRNG(12345)
    assert [a.draw() for _ in range(50)] == [b.draw() for _ in range(50)]


@pytest.mark.parametrize("seed", [-1, 2**64])
def test_bad_seed(seed):
    with pytest.raises(ValueError):
        SimpleRNG(seed)


def test_from_clock(monkeypatch):
    monkeypatch.setattr("zikzak.rng.time.time", lambda: 1700000000.75)
    rng = SimpleRNG.from_clock()
    assert rng.seed == 1700000000
    assert rng.state == 1700000000
