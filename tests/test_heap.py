import pytest

from dsakit.heap import HeapOverflowError, MinHeap


def test_worked_example_sequence():
    heap = MinHeap(11)
    heap.insert(3)
    heap.insert(2)
    heap.delete_key(1)
    for key in (15, 5, 4, 45):
        heap.insert(key)
    assert heap.extract_min() == 2
    assert heap.peek() == 4
    heap.decrease_key(2, 1)
    assert heap.peek() == 1


def test_extracting_everything_yields_sorted_order():
    keys = [9, 3, 7, 1, 8, 2, 6, 3]
    heap = MinHeap(len(keys))
    for key in keys:
        heap.insert(key)
    drained = [heap.extract_min() for _ in range(len(keys))]
    assert drained == sorted(keys)
    assert len(heap) == 0


def test_len_tracks_inserts_and_extracts():
    heap = MinHeap(5)
    heap.insert(4)
    heap.insert(1)
    assert len(heap) == 2
    heap.extract_min()
    assert len(heap) == 1


def test_overflow_raises():
    heap = MinHeap(2)
    heap.insert(1)
    heap.insert(2)
    with pytest.raises(HeapOverflowError):
        heap.insert(3)
    assert len(heap) == 2


def test_empty_heap_raises():
    heap = MinHeap(3)
    with pytest.raises(IndexError):
        heap.extract_min()
    with pytest.raises(IndexError):
        heap.peek()


def test_delete_key_removes_that_key():
    keys = [5, 10, 7, 20, 15]
    heap = MinHeap(10)
    for key in keys:
        heap.insert(key)
    heap.delete_key(3)
    drained = [heap.extract_min() for _ in range(len(heap))]
    assert len(drained) == len(keys) - 1
    assert drained == sorted(drained)
    assert set(drained) < set(keys)


def test_decrease_key_rejects_larger_value():
    heap = MinHeap(4)
    heap.insert(5)
    with pytest.raises(ValueError):
        heap.decrease_key(0, 50)


def test_bad_index_raises():
    heap = MinHeap(4)
    heap.insert(5)
    with pytest.raises(IndexError):
        heap.delete_key(3)
    with pytest.raises(IndexError):
        heap.decrease_key(-1, 0)