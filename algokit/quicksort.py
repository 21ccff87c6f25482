"""Quicksort with a random pivot and a caller-supplied ordering."""

from __future__ import annotations

import operator
import random
from collections.abc import Callable, Iterable
from typing import Protocol, TypeVar

T = TypeVar("T")


class _IntPicker(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def quicksort(
    items: Iterable[T],
    less: Callable[[T, T], bool] = operator.lt,
    rng: _IntPicker | None = None,
) -> list[T]:
    """Return a new list of *items* ordered by the predicate *less*.

    The pivot of every partition is picked with ``rng.randint``; a fresh
    ``random.Random`` is used when *rng* is not given. The sort is not stable.
    """
    picker = rng if rng is not None else random.Random()
    result = list(items)
    _sort(result, 0, len(result) - 1, less, picker)
    return result


def _sort(values: list, low: int, high: int, less: Callable, rng: _IntPicker) -> None:
    # Recurse into the smaller side and loop on the larger to bound the depth.
    while low < high:
        pivot = _partition(values, low, high, less, rng)
        if pivot - low < high - pivot:
            _sort(values, low, pivot - 1, less, rng)
            low = pivot + 1
        else:
            _sort(values, pivot + 1, high, less, rng)
            high = pivot - 1


def _partition(values: list, low: int, high: int, less: Callable, rng: _IntPicker) -> int:
    chosen = rng.randint(low, high)
    values[chosen], values[high] = values[high], values[chosen]
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if less(values[j], pivot):
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1