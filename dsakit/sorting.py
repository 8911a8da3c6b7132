"""Classic comparison sorts.

Every function returns a new ascending list and leaves its input untouched.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def bubble_sort(items: Sequence[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - 1 - done):
            if result[j] > result[j + 1]:  # type: ignore[operator]
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def selection_sort(items: Sequence[T]) -> list[T]:
    """Sort by moving the smallest remaining element into place each pass."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result


def insertion_sort(items: Sequence[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and key <= result[j]:  # type: ignore[operator]
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def exchange_sort(items: Sequence[T]) -> list[T]:
    """Sort by comparing each position with every later one and swapping."""
    result = list(items)
    n = len(result)
    for i in range(n):
        for j in range(i + 1, n):
            if result[i] > result[j]:  # type: ignore[operator]
                result[i], result[j] = result[j], result[i]
    return result


def _hoare_partition(arr: list[Any], low: int, high: int) -> int:
    pivot = arr[low]
    count = sum(1 for k in range(low + 1, high + 1) if arr[k] <= pivot)
    pivot_index = low + count
    arr[pivot_index], arr[low] = arr[low], arr[pivot_index]
    i, j = low, high
    while i < pivot_index and j > pivot_index:
        while arr[i] <= pivot and i < pivot_index:
            i += 1
        while arr[j] > pivot and j > pivot_index:
            j -= 1
        if i < pivot_index and j > pivot_index:
            arr[i], arr[j] = arr[j], arr[i]
            i += 1
            j -= 1
    return pivot_index


def _lomuto_partition(arr: list[Any], low: int, high: int, *, inclusive: bool) -> int:
    pivot = arr[high]
    i = low - 1
    for j in range(low, high):
        if arr[j] < pivot or (inclusive and arr[j] == pivot):
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    return i + 1


def _quicksort(arr: list[Any], partition) -> None:
    pending = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        p = partition(arr, low, high)
        pending.append((low, p - 1))
        pending.append((p + 1, high))


def quicksort_hoare(items: Sequence[T]) -> list[T]:
    """Quicksort with the first element as pivot, placed by counting smaller ones."""
    result = list(items)
    _quicksort(result, _hoare_partition)
    return result


def quicksort_lomuto(items: Sequence[T]) -> list[T]:
    """Quicksort with the Lomuto scheme and the last element as pivot."""
    result = list(items)
    _quicksort(result, lambda a, lo, hi: _lomuto_partition(a, lo, hi, inclusive=False))
    return result


def quicksort_randomized(
    items: Sequence[T], rng: random.Random | None = None
) -> list[T]:
    """Quicksort whose pivot is drawn at random from ``low`` to ``high - 1``."""
    generator = rng if rng is not None else random.Random()
    result = list(items)

    def partition(arr: list[Any], low: int, high: int) -> int:
        r = generator.randrange(low, high)
        arr[r], arr[high] = arr[high], arr[r]
        return _lomuto_partition(arr, low, high, inclusive=True)

    _quicksort(result, partition)
    return result


def merge_sort(items: Sequence[T]) -> list[T]:
    """Stable top-down merge sort."""
    if len(items) <= 1:
        return list(items)
    mid = (len(items) - 1) // 2 + 1
    left = merge_sort(items[:mid])
    right = merge_sort(items[mid:])
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:  # type: ignore[operator]
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged