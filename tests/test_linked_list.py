import pytest

from dsakit.linked_list import LinkedList, Node

BASE = [7, 25, 37, 40]


@pytest.fixture
def sample():
    return LinkedList(BASE)


def test_traversal_and_length(sample):
    assert list(sample) == BASE
    assert len(sample) == 4


def test_empty_list():
    empty = LinkedList()
    assert list(empty) == []
    assert len(empty) == 0
    assert empty.head is None


def test_node_at(sample):
    assert sample.node_at(0).value == 7
    assert sample.node_at(3).value == 40
    with pytest.raises(IndexError):
        sample.node_at(4)
    with pytest.raises(IndexError):
        sample.node_at(-1)


def test_push_front(sample):
    node = sample.push_front(1)
    assert sample.head is node
    assert list(sample) == [1] + BASE
    assert len(sample) == 5


def test_insert_at_index_two(sample):
    sample.insert_at(2, 10)
    assert list(sample) == [7, 25, 10, 37, 40]


def test_insert_at_bounds(sample):
    sample.insert_at(0, 1)
    sample.insert_at(len(sample), 99)
    assert list(sample) == [1] + BASE + [99]
    with pytest.raises(IndexError):
        sample.insert_at(len(sample) + 1, 5)


def test_append(sample):
    sample.append(99)
    assert list(sample) == BASE + [99]
    empty = LinkedList()
    empty.append(3)
    assert list(empty) == [3]


def test_insert_after_node(sample):
    third = sample.node_at(2)
    sample.insert_after(third, 99)
    assert list(sample) == [7, 25, 37, 99, 40]


def test_insert_after_foreign_node(sample):
    with pytest.raises(ValueError):
        sample.insert_after(Node(5), 6)


def test_practice_sequence():
    items = LinkedList([14, 45, 52, 69])
    items.push_front(10)
    items.insert_at(4, 55)
    items.append(99)
    assert list(items) == [10, 14, 45, 52, 55, 69, 99]
    assert len(items) == 7


def test_pop_front(sample):
    assert sample.pop_front() == 7
    assert list(sample) == BASE[1:]
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_delete_at_index_three(sample):
    assert sample.delete_at(3) == 40
    assert list(sample) == [7, 25, 37]


def test_delete_at_middle_and_errors(sample):
    assert sample.delete_at(1) == 25
    assert list(sample) == [7, 37, 40]
    with pytest.raises(IndexError):
        sample.delete_at(3)


def test_pop_back(sample):
    assert sample.pop_back() == 40
    assert list(sample) == [7, 25, 37]
    single = LinkedList([5])
    assert single.pop_back() == 5
    assert list(single) == []
    with pytest.raises(IndexError):
        single.pop_back()


def test_delete_after_node(sample):
    second = sample.node_at(1)
    assert sample.delete_after(second) == 37
    assert list(sample) == [7, 25, 40]


def test_delete_after_last_node(sample):
    last = sample.node_at(3)
    with pytest.raises(IndexError):
        sample.delete_after(last)


def test_remove_value(sample):
    assert sample.remove_value(25) is True
    assert list(sample) == [7, 37, 40]
    assert sample.remove_value(1000) is False
    assert list(sample) == [7, 37, 40]


def test_remove_value_practice():
    items = LinkedList([47, 58, 60, 67])
    assert items.remove_value(58)
    assert list(items) == [47, 60, 67]


def test_remove_value_head_and_tail(sample):
    assert sample.remove_value(7)
    assert sample.remove_value(40)
    assert list(sample) == [25, 37]
    assert len(sample) == 2


def test_reverse(sample):
    sample.reverse()
    assert list(sample) == list(reversed(BASE))


def test_reverse_recursive(sample):
    sample.reverse_recursive()
    assert list(sample) == list(reversed(BASE))


@pytest.mark.parametrize("values", [[], [1], [1, 2], list(range(20))])
def test_reverse_round_trip(values):
    items = LinkedList(values)
    items.reverse()
    items.reverse_recursive()
    assert list(items) == values
    assert len(items) == len(values)