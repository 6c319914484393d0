import pytest

from dskit.linear_probing import HashTableFullError, LinearProbingHashTable


def _demo_table():
    table = LinearProbingHashTable(5, 0.65)
    for value in (3, 23, 11, 15, 9, 35, 44):
        table.insert(value)
    return table


def test_inserted_values_are_found():
    table = _demo_table()
    assert len(table) == 7
    for value in (3, 23, 11, 15, 9, 35, 44):
        assert table.search(value)
        assert value in table
    assert not table.search(70)


def test_zero_is_rejected():
    table = LinearProbingHashTable(5, 0.65)
    with pytest.raises(ValueError):
        table.insert(0)
    with pytest.raises(ValueError):
        table.delete(0)


def test_duplicate_insert_returns_false():
    table = LinearProbingHashTable(5, 0.65)
    assert table.insert(7) is True
    assert table.insert(7) is False
    assert len(table) == 1


def test_collision_moves_to_next_slot():
    table = LinearProbingHashTable(5, 0.65)
    table.insert(3)
    table.insert(23)
    assert table.slots[3] == 3
    assert table.slots[4] == 23
    assert table.probe(23) == 4


def test_rehash_doubles_when_threshold_exceeded():
    table = LinearProbingHashTable(5, 0.65)
    for value in (3, 23, 11):
        table.insert(value)
    assert len(table.slots) == 5
    table.insert(15)
    assert len(table.slots) == 10
    assert sorted(v for v in table.slots if v is not None) == [3, 11, 15, 23]


def test_load_factor_matches_counts():
    table = _demo_table()
    assert table.load_factor() == len(table) / len(table.slots)
    assert table.load_factor() <= table.load_factor_threshold


def test_full_table_raises():
    table = LinearProbingHashTable(2, 10.0)
    table.insert(1)
    table.insert(2)
    with pytest.raises(HashTableFullError):
        table.insert(3)
    assert table.search(3) is False
    assert table.probe(3) is None


def test_bad_size_rejected():
    with pytest.raises(ValueError):
        LinearProbingHashTable(0, 0.5)


def test_display_of_empty_table():
    table = LinearProbingHashTable(5, 0.65)
    lines = table.display().split("\n")
    assert lines[0] == (
        "Current table size: 5. Number of keys: 0. "
        "Current Load: 0. Load factor threshold: 0.65. "
    )
    assert lines[1:] == [f"[{i}] 0" for i in range(5)]


def test_display_shows_stored_values():
    table = LinearProbingHashTable(5, 0.65)
    table.insert(3)
    lines = table.display().split("\n")
    assert lines[4] == "[3] 3"
    assert len(lines) == 1 + len(table.slots)