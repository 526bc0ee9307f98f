"""Selection sort and merge sort returning new sorted lists."""

from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


def selection_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy, moving the largest remaining item to the end each pass."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        max_index = max(range(end + 1), key=items.__getitem__)
        if max_index != end:
            items[max_index], items[end] = items[end], items[max_index]
    return items


def merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    """Merge two sorted sequences; on ties the item from ``right`` comes first."""
    result: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(values: Iterable[T]) -> list[T]:
    """Return a sorted copy by recursive merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    half = len(items) // 2
    return merge(merge_sort(items[:half]), merge_sort(items[half:]))