"""Singly, doubly and XOR-linked lists of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class _SinglyNode:
    value: Any
    next: Optional[_SinglyNode] = None


class SinglyLinkedList:
    """A singly linked list with insertion at the front."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_SinglyNode] = None
        for value in reversed(list(values)):
            self.push(value)

    def push(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        self._head = _SinglyNode(value, self._head)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


@dataclass(eq=False)
class DoublyNode:
    """A node of a DoublyLinkedList."""

    value: Any
    next: Optional[DoublyNode] = field(default=None, repr=False)
    prev: Optional[DoublyNode] = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list traversable in both directions."""

    def __init__(self) -> None:
        self._head: Optional[DoublyNode] = None
        self._tail: Optional[DoublyNode] = None
        self._size = 0

    def push(self, value: Any) -> DoublyNode:
        """Insert ``value`` at the front and return its node."""
        node = DoublyNode(value, next=self._head)
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1
        return node

    def append(self, value: Any) -> DoublyNode:
        """Insert ``value`` at the end and return its node."""
        node = DoublyNode(value, prev=self._tail)
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._size += 1
        return node

    def insert_after(self, node: Optional[DoublyNode], value: Any) -> DoublyNode:
        """Insert ``value`` right after ``node`` and return the new node."""
        if node is None:
            raise ValueError("the given previous node cannot be None")
        new_node = DoublyNode(value, next=node.next, prev=node)
        node.next = new_node
        if new_node.next is not None:
            new_node.next.prev = new_node
        else:
            self._tail = new_node
        self._size += 1
        return new_node

    def node_at(self, index: int) -> DoublyNode:
        """Return the node at position ``index`` counted from the front."""
        if not 0 <= index < self._size:
            raise IndexError(f"list index {index} out of range")
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


@dataclass(eq=False)
class _XorNode:
    value: Any
    link: int = 0


class XorLinkedList:
    """A memory-efficient doubly linked list: each node stores prev XOR next.

    Node addresses are integer handles; 0 stands for "no node".
    """

    def __init__(self) -> None:
        self._nodes: dict[int, _XorNode] = {}
        self._head = 0
        self._next_address = 1

    def insert(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        address = self._next_address
        self._next_address += 1
        self._nodes[address] = _XorNode(value, 0 ^ self._head)
        if self._head:
            head = self._nodes[self._head]
            following = 0 ^ head.link
            head.link = address ^ following
        self._head = address

    def __iter__(self) -> Iterator[Any]:
        previous, current = 0, self._head
        while current:
            node = self._nodes[current]
            yield node.value
            previous, current = current, previous ^ node.link

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"XorLinkedList({list(self)!r})"