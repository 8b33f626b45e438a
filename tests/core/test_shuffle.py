"""Shufflers — verifies permutation, non-mutation and seeding."""

from moodtunes.core.shuffle import IdentityShuffler, RandomShuffler


def test_random_shuffle_is_a_permutation():
    items = list(range(20))
    shuffled = RandomShuffler().shuffle(items)
    assert sorted(shuffled) == items


def test_random_shuffle_does_not_mutate_input():
    items = (1, 2, 3, 4, 5)
    RandomShuffler(seed=1).shuffle(items)
    assert items == (1, 2, 3, 4, 5)


def test_same_seed_same_order():
    items = list(range(10))
    assert RandomShuffler(seed=42).shuffle(items) == RandomShuffler(seed=42).shuffle(items)


def test_random_shuffle_reaches_more_than_one_order():
    shuffler = RandomShuffler(seed=7)
    orders = {tuple(shuffler.shuffle("abcde")) for _ in range(50)}
    assert len(orders) > 1


def test_identity_keeps_order_and_copies():
    items = [3, 1, 2]
    result = IdentityShuffler().shuffle(items)
    assert result == [3, 1, 2]
    assert result is not items


def test_empty_input():
    assert RandomShuffler().shuffle([]) == []
    assert IdentityShuffler().shuffle([]) == []
