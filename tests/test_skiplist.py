import random

import pytest

from dskit.skiplist import SkipList

SAMPLE = [13, 7, 11, 1, 5, 19, 313, 37, 311, 31, 35, 319]


class _FixedCoin:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def _filled(seed=1):
    skip = SkipList(3, random.Random(seed))
    for value in SAMPLE:
        skip.insert(value)
    return skip


def test_iteration_is_sorted():
    skip = _filled()
    assert list(skip) == sorted(SAMPLE)
    assert len(skip) == len(SAMPLE)


def test_duplicate_insert_rejected():
    skip = _filled()
    assert skip.insert(13) is False
    assert len(skip) == len(SAMPLE)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 42])
def test_levels_are_sorted_subsequences(seed):
    skip = _filled(seed)
    rows = skip.levels()
    assert rows[0] == sorted(SAMPLE)
    assert len(rows) <= skip.max_level + 1
    for lower, upper in zip(rows, rows[1:]):
        assert upper == sorted(upper)
        assert set(upper) <= set(lower)


def test_search_and_contains():
    skip = _filled()
    assert all(skip.search(value) for value in SAMPLE)
    assert skip.search(70) is False
    assert 70 not in skip
    assert 311 in skip


def test_delete_present_and_absent():
    skip = _filled()
    assert skip.delete(37) is True
    assert 37 not in skip
    assert skip.delete(37) is False
    assert len(skip) == len(SAMPLE) - 1
    assert list(skip) == sorted(v for v in SAMPLE if v != 37)


def test_delete_all_resets_levels():
    skip = _filled(7)
    for value in SAMPLE:
        assert skip.delete(value)
    assert skip.levels() == [[]]
    assert skip.highest_level == 0
    assert len(skip) == 0


@pytest.mark.parametrize("seed", range(5))
def test_random_level_within_bounds(seed):
    skip = SkipList(3, random.Random(seed))
    levels = [skip.random_level() for _ in range(200)]
    assert all(0 <= level <= 3 for level in levels)


def test_coin_always_tails_gives_level_zero():
    skip = SkipList(4, _FixedCoin(0.9))
    assert skip.random_level() == 0


def test_coin_always_heads_reaches_max_level():
    skip = SkipList(4, _FixedCoin(0.1))
    assert skip.random_level() == 4
    skip.insert(10)
    skip.insert(20)
    assert skip.levels() == [[10, 20]] * 5


def test_show_format():
    skip = SkipList(2, _FixedCoin(0.9))
    skip.insert(5)
    skip.insert(1)
    assert skip.show() == "Level 0: 1 -> 5 ."


def test_negative_max_level_rejected():
    with pytest.raises(ValueError):
        SkipList(-1)