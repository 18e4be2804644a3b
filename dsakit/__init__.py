"""Classic data structures and algorithms: sorts, heaps, lists, stacks, queues, backtracking and text patterns."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "heap",
    "linkedlist",
    "linkedqueue",
    "patterns",
    "sorting",
    "stacks",
]