"""Array-backed and linked stacks, and the largest histogram rectangle."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_CAPACITY = 10


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading from or removing from an empty stack."""


class BoundedStack:
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top; raise StackOverflowError if full."""
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every item; raise StackUnderflowError if already empty."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self.capacity}, items={self._items!r})"


@dataclass(eq=False)
class _Node:
    item: Any
    next: Optional[_Node] = None


class LinkedStack:
    """An unbounded stack of linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        self._top = _Node(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.item

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        node = self._top
        while node is not None:
            yield node.item
            node = node.next

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Show the stack from top to bottom, e.g. ``"2-> 1-> NULL"``."""
        return "".join(f"{item}-> " for item in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"


def largest_rectangle_area(heights: Iterable[int]) -> int:
    """Return the largest rectangle area under a histogram of bar heights."""
    bars = list(heights)
    if not bars:
        raise ValueError("histogram has no bars")
    best: Optional[int] = None
    pending: list[int] = []

    def close_bar(right: int) -> None:
        nonlocal best
        top = pending.pop()
        width = right if not pending else right - pending[-1] - 1
        area = bars[top] * width
        if best is None or area > best:
            best = area

    index = 0
    while index < len(bars):
        if not pending or bars[pending[-1]] <= bars[index]:
            pending.append(index)
            index += 1
        else:
            close_bar(index)
    while pending:
        close_bar(index)
    assert best is not None
    return best