from collections import Counter

import pytest

from stellargen.lehmer import Lehmer32
from stellargen.weighted import WeightedEntry, pick_weighted


def test_single_entry_always_picked():
    rng = Lehmer32(1)
    entries = [WeightedEntry("only", 3.0)]
    assert {pick_weighted(entries, rng) for _ in range(50)} == {"only"}


def test_zero_weight_last_entry_never_picked():
    rng = Lehmer32(2)
    entries = [WeightedEntry("a", 1.0), WeightedEntry("b", 0.0)]
    assert {pick_weighted(entries, rng) for _ in range(500)} == {"a"}


def test_distribution_follows_weights():
    rng = Lehmer32(3)
    entries = [WeightedEntry("low", 1.0), WeightedEntry("high", 3.0)]
    counts = Counter(pick_weighted(entries, rng) for _ in range(4000))
    ratio = counts["high"] / counts["low"]
    assert 2.5 < ratio < 3.5


def test_deterministic_for_same_seed():
    entries = [WeightedEntry(i, float(i + 1)) for i in range(5)]
    a, b = Lehmer32(9), Lehmer32(9)
    assert [pick_weighted(entries, a) for _ in range(30)] == [
        pick_weighted(entries, b) for _ in range(30)
    ]


def test_consumes_one_draw():
    entries = [WeightedEntry("x", 1.0), WeightedEntry("y", 1.0)]
    rng = Lehmer32(10)
    pick_weighted(entries, rng)
    reference = Lehmer32(10)
    reference.next_uint32()
    assert rng.next_uint32() == reference.next_uint32()


def test_empty_entries_raise():
    with pytest.raises(ValueError):
        pick_weighted([], Lehmer32(4))