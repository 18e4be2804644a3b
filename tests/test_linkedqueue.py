import pytest

from dsakit.linkedqueue import LinkedQueue


def test_worked_example():
    queue = LinkedQueue()
    for key in (10, 20, 30):
        queue.enqueue(key)
    assert queue.dequeue() == 10
    assert queue.front() == 20
    queue.dequeue()
    assert queue.front() == 30


def test_fifo_order_and_length():
    keys = ["a", "b", "c", "d"]
    queue = LinkedQueue()
    for key in keys:
        queue.enqueue(key)
    assert len(queue) == len(keys)
    assert list(queue) == keys
    assert [queue.dequeue() for _ in keys] == keys
    assert len(queue) == 0


def test_empty_queue_raises():
    queue = LinkedQueue()
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.front()


def test_reusable_after_emptying():
    queue = LinkedQueue()
    queue.enqueue(1)
    queue.dequeue()
    queue.enqueue(2)
    queue.enqueue(3)
    assert list(queue) == [2, 3]
    assert queue.front() == 2