"""Small array utilities: de-duplication and ordered union."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def remove_duplicates(values: Iterable[T]) -> list[T]:
    """Return the values with later repeats dropped, keeping first-seen order."""
    seen: set[T] = set()
    result: list[T] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def union(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return the distinct values of ``first`` followed by new ones from ``second``."""
    result = remove_duplicates(first)
    seen = set(result)
    for value in second:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result