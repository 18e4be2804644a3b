"""Classic comparison and distribution sorts.

Every function takes an iterable and returns a new sorted list (or string),
leaving its input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any

CHAR_RANGE = 255


def _sift_down(items: MutableSequence[Any], root: int, size: int) -> None:
    """Restore the max-heap property below ``root`` within ``items[:size]``."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with an in-place max heap."""
    items = list(values)
    size = len(items)
    for root in reversed(range(size // 2)):
        _sift_down(items, root, size)
    for end in reversed(range(1, size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort that stops as soon as a pass makes no exchange."""
    items = list(values)
    for done in range(len(items) - 1):
        swapped = False
        for j in range(len(items) - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) by spreading them into buckets.

    Raises ValueError for a value outside that range.
    """
    items = list(values)
    size = len(items)
    buckets: list[list[float]] = [[] for _ in range(size)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(size * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def count_sort_chars(text: str) -> str:
    """Sort the characters of ``text`` by code point with a counting sort.

    Only characters with code points up to 255 are accepted.
    """
    counts = [0] * (CHAR_RANGE + 1)
    for char in text:
        code = ord(char)
        if code > CHAR_RANGE:
            raise ValueError(f"character {char!r} is outside the counted range")
        counts[code] += 1
    return "".join(chr(code) * count for code, count in enumerate(counts))


def counting_sort(
    values: Iterable[int], lower: int | None = None, upper: int | None = None
) -> list[int]:
    """Sort integers known to lie in ``[lower, upper]`` by counting them.

    Missing bounds are taken from the data. A value outside the bounds, or an
    upper bound below the lower one, raises ValueError.
    """
    items = list(values)
    if not items and (lower is None or upper is None):
        return []
    low = min(items) if lower is None else lower
    high = max(items) if upper is None else upper
    if high < low:
        raise ValueError(f"upper limit {high} is below lower limit {low}")
    counts = [0] * (high - low + 1)
    for value in items:
        if not low <= value <= high:
            raise ValueError(f"value {value} lies outside [{low}, {high}]")
        counts[value - low] += 1
    return [low + offset for offset, count in enumerate(counts) for _ in range(count)]


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Insertion sort by shifting larger elements right."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and key < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: MutableSequence[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] <= pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort for non-negative integers."""
    items = list(values)
    if not items:
        return items
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        exp *= 10
    return items


def selection_sort(values: Iterable[Any], descending: bool = False) -> list[Any]:
    """Selection sort, ascending by default or descending on request."""
    items = list(values)

    def better(a: Any, b: Any) -> bool:
        return a > b if descending else a < b

    for i in range(len(items)):
        chosen = i
        for j in range(i + 1, len(items)):
            if better(items[j], items[chosen]):
                chosen = j
        if chosen != i:
            items[i], items[chosen] = items[chosen], items[i]
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Shell sort with gaps halving from half the length down to one."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for j in range(gap, len(items)):
            k = j - gap
            while k >= 0 and items[k + gap] < items[k]:
                items[k], items[k + gap] = items[k + gap], items[k]
                k -= gap
        gap //= 2
    return items