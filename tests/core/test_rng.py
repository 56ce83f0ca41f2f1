"""
Tests for the injectable random sources.
"""

import pytest
from core.rng import ScriptedRandom, SeededRandom


def test_scripted_random_replays_values_then_fallback():
    rng = ScriptedRandom([0.1, 0.9], fallback=0.25)
    assert rng.random() == 0.1
    assert rng.random() == 0.9
    assert rng.random() == 0.25
    assert rng.random() == 0.25
    assert rng.consumed == 4


def test_scripted_random_rejects_out_of_range_values():
    with pytest.raises(ValueError):
        ScriptedRandom([0.5, 1.0])
    with pytest.raises(ValueError):
        ScriptedRandom([-0.1])
    with pytest.raises(ValueError):
        ScriptedRandom([], fallback=1.5)


def test_scripted_randint_covers_the_inclusive_range():
    rng = ScriptedRandom([0.0, 0.999, 0.5])
    assert rng.randint(20, 29) == 20
    assert rng.randint(20, 29) == 29
    assert rng.randint(20, 29) == 25


def test_scripted_randint_rejects_empty_range():
    with pytest.raises(ValueError):
        ScriptedRandom([]).randint(5, 4)


def test_scripted_choice_maps_the_float_to_an_index():
    rng = ScriptedRandom([0.0, 0.34, 0.99])
    options = ["a", "b", "c"]
    assert rng.choice(options) == "a"
    assert rng.choice(options) == "b"
    assert rng.choice(options) == "c"


def test_choice_on_empty_sequence_raises():
    with pytest.raises(ValueError):
        ScriptedRandom([]).choice([])
    with pytest.raises(ValueError):
        SeededRandom(1).choice([])


def test_seeded_random_is_reproducible():
    first = SeededRandom(42)
    second = SeededRandom(42)
    assert [first.random() for _ in range(5)] == [second.random() for _ in range(5)]
    assert [first.randint(1, 6) for _ in range(5)] == [second.randint(1, 6) for _ in range(5)]


def test_seeded_random_stays_in_bounds():
    rng = SeededRandom(7)
    for _ in range(200):
        assert 0.0 <= rng.random() < 1.0
        assert 3 <= rng.randint(3, 5) <= 5
