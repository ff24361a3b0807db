import pytest

from dsakit.circular import CircularLinkedList


def test_traversal_keeps_order():
    values = [7, 25, 37, 40]
    assert list(CircularLinkedList(values)) == values


def test_insert_at_index_two():
    lst = CircularLinkedList([7, 25, 37, 40])
    lst.insert_at(2, 255)
    assert list(lst) == [7, 25, 255, 37, 40]
    assert len(lst) == len(list(lst))


def test_append_goes_before_head():
    lst = CircularLinkedList([56, 78, 99])
    lst.append(26)
    assert list(lst) == [56, 78, 99, 26]


def test_insert_first_becomes_head():
    lst = CircularLinkedList([56, 78, 99])
    lst.insert_first(19)
    assert list(lst) == [19, 56, 78, 99]


def test_delete_first_returns_old_head():
    lst = CircularLinkedList([56, 78, 99])
    assert lst.delete_first() == 56
    assert list(lst) == [78, 99]


def test_delete_last_returns_old_tail():
    lst = CircularLinkedList([56, 78, 99])
    assert lst.delete_last() == 99
    assert list(lst) == [56, 78]
    lst.append(26)
    assert list(lst) == [56, 78, 26]


def test_insert_at_bounds_match_first_and_append():
    a = CircularLinkedList([1, 2])
    a.insert_at(0, 9)
    b = CircularLinkedList([1, 2])
    b.insert_first(9)
    assert list(a) == list(b)
    a.insert_at(len(a), 8)
    b.append(8)
    assert list(a) == list(b)


def test_single_node_deletions_empty_the_list():
    lst = CircularLinkedList([5])
    assert lst.delete_last() == 5
    assert list(lst) == []
    lst.insert_first(6)
    assert lst.delete_first() == 6
    assert len(lst) == 0


def test_errors():
    lst = CircularLinkedList()
    with pytest.raises(IndexError):
        lst.delete_first()
    with pytest.raises(IndexError):
        lst.delete_last()
    with pytest.raises(IndexError):
        lst.insert_at(1, 3)
    with pytest.raises(IndexError):
        CircularLinkedList([1]).insert_at(-1, 3)