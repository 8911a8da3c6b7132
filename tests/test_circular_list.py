import pytest

from dsakit.circular_list import CircularLinkedList


def test_insert_first_and_last_order():
    cl = CircularLinkedList()
    cl.insert_last(2)
    cl.insert_first(1)
    cl.insert_last(3)
    assert list(cl) == [1, 2, 3]
    assert len(cl) == 3


def test_constructor_round_trip():
    values = [4, 8, 15, 16]
    assert list(CircularLinkedList(values)) == values


def test_insert_after_zero_makes_new_head():
    cl = CircularLinkedList([1, 2])
    cl.insert_after(0, 0)
    assert list(cl) == [0, 1, 2]


def test_insert_after_into_empty_at_zero():
    cl = CircularLinkedList()
    cl.insert_after(5, 0)
    assert list(cl) == [5]


def test_insert_after_walks_from_head():
    cl = CircularLinkedList([1, 2, 3])
    cl.insert_after(9, 1)
    assert list(cl) == [1, 2, 9, 3]


def test_insert_after_tail_updates_tail():
    cl = CircularLinkedList([1, 2, 3])
    cl.insert_after(9, 2)
    cl.insert_last(10)
    assert list(cl) == [1, 2, 3, 9, 10]
    assert cl.delete_last() == 10
    assert cl.delete_last() == 9


def test_insert_after_wrapping_raises():
    cl = CircularLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        cl.insert_after(9, 3)
    assert list(cl) == [1, 2, 3]


def test_insert_after_on_empty_list_raises():
    with pytest.raises(IndexError):
        CircularLinkedList().insert_after(1, 1)


def test_delete_first_and_last():
    cl = CircularLinkedList([1, 2, 3, 4])
    assert cl.delete_first() == 1
    assert cl.delete_last() == 4
    assert list(cl) == [2, 3]


def test_delete_single_element_empties_list():
    cl = CircularLinkedList([7])
    assert cl.delete_last() == 7
    assert len(cl) == 0
    cl.insert_first(8)
    assert cl.delete_first() == 8
    assert list(cl) == []


def test_delete_from_empty_raises():
    cl = CircularLinkedList()
    with pytest.raises(IndexError):
        cl.delete_first()
    with pytest.raises(IndexError):
        cl.delete_last()


def test_search_returns_one_based_location():
    cl = CircularLinkedList([10, 20, 30])
    assert cl.search(10) == 1
    assert cl.search(30) == 3
    assert cl.search(99) is None


def test_list_stays_circular_after_head_deletion():
    cl = CircularLinkedList([1, 2, 3])
    cl.delete_first()
    cl.insert_last(4)
    cl.insert_first(0)
    assert list(cl) == [0, 2, 3, 4]