import pytest

from dsakit.linkedlist import DoublyLinkedList, SinglyLinkedList, XorLinkedList


def test_singly_keeps_given_order():
    values = [1, 2, 3]
    linked = SinglyLinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_singly_push_prepends():
    linked = SinglyLinkedList([2, 3])
    linked.push(1)
    assert list(linked) == [1, 2, 3]


def test_singly_empty():
    linked = SinglyLinkedList()
    assert len(linked) == 0
    assert list(linked) == []


def test_doubly_worked_example():
    linked = DoublyLinkedList()
    linked.append(6)
    linked.push(7)
    linked.push(1)
    linked.append(4)
    linked.insert_after(linked.node_at(1), 8)
    assert list(linked) == [1, 7, 8, 6, 4]
    assert list(reversed(linked)) == [4, 6, 8, 7, 1]
    assert len(linked) == 5


def test_doubly_insert_after_tail_extends_reverse_walk():
    linked = DoublyLinkedList()
    tail = linked.append("a")
    linked.insert_after(tail, "b")
    linked.append("c")
    assert list(linked) == ["a", "b", "c"]
    assert list(reversed(linked)) == list(reversed(list(linked)))


def test_doubly_insert_after_none_raises():
    linked = DoublyLinkedList()
    with pytest.raises(ValueError):
        linked.insert_after(None, 1)


def test_doubly_node_at_out_of_range():
    linked = DoublyLinkedList()
    linked.append(1)
    with pytest.raises(IndexError):
        linked.node_at(1)
    with pytest.raises(IndexError):
        linked.node_at(-1)


def test_doubly_node_links_are_consistent():
    linked = DoublyLinkedList()
    for value in range(5):
        linked.append(value)
    middle = linked.node_at(2)
    assert middle.prev is linked.node_at(1)
    assert middle.next is linked.node_at(3)
    assert middle.value == 2


def test_xor_list_worked_example():
    linked = XorLinkedList()
    for value in (50, 40, 30, 20, 10):
        linked.insert(value)
    assert list(linked) == [10, 20, 30, 40, 50]
    assert len(linked) == 5


def test_xor_list_empty_and_single():
    linked = XorLinkedList()
    assert list(linked) == []
    linked.insert("x")
    assert list(linked) == ["x"]