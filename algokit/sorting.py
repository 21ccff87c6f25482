"""Insertion sort, merge sort, range partitioning and binary search."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Return a new list with *items* in ascending order.

    Each element is moved left past larger neighbours; equal elements keep
    their relative order.
    """
    result = list(items)
    for i in range(1, len(result)):
        j = i
        while j > 0 and result[j] < result[j - 1]:
            result[j], result[j - 1] = result[j - 1], result[j]
            j -= 1
    return result


def merge_sort(items: Iterable[T]) -> list[T]:
    """Return a new list with *items* in ascending order, sorted stably."""
    result = list(items)
    _merge_sort(result, 0, len(result) - 1)
    return result


def _merge_sort(values: list, low: int, high: int) -> None:
    if low < high:
        middle = (low + high) // 2
        _merge_sort(values, low, middle)
        _merge_sort(values, middle + 1, high)
        _merge(values, low, middle, high)


def _merge(values: list, low: int, middle: int, high: int) -> None:
    left = deque(values[low:middle + 1])
    right = deque(values[middle + 1:high + 1])
    position = low
    while left and right:
        values[position] = left.popleft() if left[0] <= right[0] else right.popleft()
        position += 1
    values[position:high + 1] = [*left, *right]


def partition(values: Sequence[T], low: int, high: int) -> tuple[list[T], list[T]]:
    """Split *values* into the slice ``low..high`` (inclusive) and the rest.

    Returns ``(inside, outside)``; *outside* keeps the elements before *low*
    followed by those after *high*. Raises IndexError for invalid bounds.
    """
    if low < 0 or low > high or high >= len(values):
        raise IndexError("invalid bounds")
    items = list(values)
    return items[low:high + 1], items[:low] + items[high + 1:]


def binary_search(data: Sequence[Any], key: Any, low: int = 0, high: int | None = None) -> int:
    """Return the index of *key* in the sorted range ``data[low..high]``.

    *high* defaults to the last index. Raises IndexError when the range is
    empty or exhausted without finding *key*.
    """
    if high is None:
        high = len(data) - 1
    while low <= high:
        middle = (low + high) // 2
        value = data[middle]
        if value == key:
            return middle
        if value < key:
            low = middle + 1
        else:
            high = middle - 1
    raise IndexError("invalid search bounds")