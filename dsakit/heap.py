"""A fixed-capacity binary min-heap of keys."""

from __future__ import annotations

from typing import Any


class HeapOverflowError(Exception):
    """Raised when a key is inserted into a heap that is already full."""


class MinHeap:
    """Binary min-heap stored in a list, holding at most ``capacity`` keys."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MinHeap(capacity={self.capacity}, items={self._items!r})"

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"heap index {index} out of range")

    def _swap(self, a: int, b: int) -> None:
        self._items[a], self._items[b] = self._items[b], self._items[a]

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index != 0 and items[self._parent(index)] > items[index]:
            parent = self._parent(index)
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and items[left] < items[smallest]:
                smallest = left
            if right < size and items[right] < items[smallest]:
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def insert(self, key: Any) -> None:
        """Add ``key``; raise HeapOverflowError if the heap is full."""
        if len(self._items) >= self.capacity:
            raise HeapOverflowError("could not insert key: heap is full")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def peek(self) -> Any:
        """Return the smallest key without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def extract_min(self) -> Any:
        """Remove and return the smallest key."""
        if not self._items:
            raise IndexError("extract from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return root

    def decrease_key(self, index: int, new_value: Any) -> None:
        """Lower the key stored at ``index`` to ``new_value``."""
        self._check_index(index)
        if new_value > self._items[index]:
            raise ValueError("new value is larger than the current key")
        self._items[index] = new_value
        self._sift_up(index)

    def delete_key(self, index: int) -> None:
        """Remove the key stored at ``index``."""
        self._check_index(index)
        # Treat the key as smaller than everything: bubble it to the root.
        while index != 0:
            parent = self._parent(index)
            self._swap(index, parent)
            index = parent
        self.extract_min()