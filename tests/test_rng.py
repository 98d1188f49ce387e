import pytest

from namegen.rng import Random


def test_same_seed_gives_same_sequence():
    first = Random(42)
    second = Random(42)
    assert [first.next_int(0, 1000) for _ in range(20)] == [
        second.next_int(0, 1000) for _ in range(20)
    ]


def test_next_int_stays_in_inclusive_range():
    rng = Random(1)
    values = {rng.next_int(3, 6) for _ in range(500)}
    assert values == {3, 4, 5, 6}


def test_next_int_accepts_swapped_bounds():
    rng = Random(2)
    values = {rng.next_int(6, 3) for _ in range(500)}
    assert values == {3, 4, 5, 6}


def test_next_int_single_value_range():
    rng = Random(3)
    assert rng.next_int(7, 7) == 7


def test_next_below_zero_is_zero():
    assert Random(4).next_below(0) == 0


def test_next_below_negative_raises():
    with pytest.raises(ValueError):
        Random(5).next_below(-1)


def test_next_below_range():
    rng = Random(6)
    values = {rng.next_below(4) for _ in range(500)}
    assert values == {0, 1, 2, 3}


def test_next_double_default_range():
    rng = Random(7)
    for _ in range(500):
        value = rng.next_double()
        assert 0.0 <= value < 1.0


def test_next_double_swapped_range():
    rng = Random(8)
    for _ in range(500):
        value = rng.next_double(5.0, 2.0)
        assert 2.0 <= value < 5.0


def test_choice_returns_member():
    rng = Random(9)
    items = ["a", "b", "c"]
    picks = {rng.choice(items) for _ in range(300)}
    assert picks == set(items)


def test_choice_empty_raises():
    with pytest.raises(IndexError):
        Random(10).choice([])


def test_instance_is_shared_and_usable():
    shared = Random.instance()
    assert Random.instance() is shared
    assert shared.next_int(5, 5) == 5
    values = {Random.instance().next_below(3) for _ in range(300)}
    assert values == {0, 1, 2}