import pytest

from dskit.circular_list import CircularLinkedList


def test_iteration_preserves_insertion_order():
    values = [4, 8, 15, 16]
    assert list(CircularLinkedList(values)) == values


def test_len_and_empty():
    empty = CircularLinkedList()
    assert len(empty) == 0
    assert list(empty) == []
    assert len(CircularLinkedList([1, 2, 3])) == 3


def test_contains():
    items = CircularLinkedList([5, 7, 9])
    assert 7 in items
    assert 6 not in items
    assert 1 not in CircularLinkedList()


def test_getitem_and_setitem():
    items = CircularLinkedList([10, 20, 30])
    assert items[0] == 10
    assert items[2] == 30
    items[1] = 25
    assert list(items) == [10, 25, 30]


@pytest.mark.parametrize("position", [3, -1, 100])
def test_out_of_bounds_positions(position):
    items = CircularLinkedList([10, 20, 30])
    with pytest.raises(IndexError):
        _ = items[position]
    with pytest.raises(IndexError):
        items[position] = 0
    assert list(items) == [10, 20, 30]
    assert len(items) == 3


def test_empty_list_indexing():
    items = CircularLinkedList()
    with pytest.raises(IndexError):
        _ = items[0]
    with pytest.raises(IndexError):
        items[0] = 1
    assert list(items) == []
    assert len(items) == 0


@pytest.mark.parametrize("target", [1, 2, 3])
def test_remove_each_position(target):
    items = CircularLinkedList([1, 2, 3])
    assert items.remove(target) is True
    assert list(items) == [v for v in [1, 2, 3] if v != target]
    assert len(items) == 2


def test_remove_missing_and_single():
    items = CircularLinkedList([1])
    assert items.remove(2) is False
    assert items.remove(1) is True
    assert len(items) == 0
    assert items.remove(1) is False
    items.append(6)
    assert list(items) == [6]


def test_remove_last_then_append_keeps_order():
    items = CircularLinkedList([1, 2, 3])
    items.remove(3)
    items.append(4)
    assert list(items) == [1, 2, 4]


def test_remove_only_first_duplicate():
    items = CircularLinkedList([2, 5, 2])
    items.remove(2)
    assert list(items) == [5, 2]


def test_copy_is_independent():
    original = CircularLinkedList([1, 2, 3])
    duplicate = original.copy()
    duplicate[0] = 9
    duplicate.append(4)
    assert list(original) == [1, 2, 3]
    assert list(duplicate) == [9, 2, 3, 4]


def test_display():
    assert CircularLinkedList([1, 2, 3]).display() == "1 2 3 "
    assert CircularLinkedList().display() == ""