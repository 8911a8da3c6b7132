"""Basic operations on flat integer sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def merge_sorted(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Merge two ascending sequences into one ascending list.

    On ties the element from ``first`` comes before the one from ``second``.
    """
    merged: list[T] = []
    left = iter(first)
    right = iter(second)
    a = next(left, None)
    b = next(right, None)
    sentinel_a = a is None and len(first) == 0
    sentinel_b = b is None and len(second) == 0
    left_done, right_done = sentinel_a, sentinel_b
    while not left_done and not right_done:
        if a <= b:  # type: ignore[operator]
            merged.append(a)  # type: ignore[arg-type]
            try:
                a = next(left)
            except StopIteration:
                left_done = True
        else:
            merged.append(b)  # type: ignore[arg-type]
            try:
                b = next(right)
            except StopIteration:
                right_done = True
    if not left_done:
        merged.append(a)  # type: ignore[arg-type]
        merged.extend(left)
    if not right_done:
        merged.append(b)  # type: ignore[arg-type]
        merged.extend(right)
    return merged


def insert_at(items: Sequence[T], position: int, value: T) -> list[T]:
    """Return a copy of ``items`` with ``value`` placed at ``position``.

    Valid positions run from 0 to ``len(items)`` inclusive.
    """
    if not 0 <= position <= len(items):
        raise IndexError(f"invalid position {position} for {len(items)} elements")
    result = list(items)
    result.insert(position, value)
    return result


def delete_at(items: Sequence[T], position: int) -> list[T]:
    """Return a copy of ``items`` without the element at ``position``."""
    if not 0 <= position < len(items):
        raise IndexError(f"invalid position {position} for {len(items)} elements")
    result = list(items)
    del result[position]
    return result


def linear_search(items: Sequence[T], target: T) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    for index, item in enumerate(items):
        if item == target:
            return index
    return None


def binary_search(items: Sequence[T], target: T) -> bool:
    """Sort a copy of ``items`` and report whether ``target`` is in it."""
    ordered = sorted(items)  # type: ignore[type-var]
    first, last = 0, len(ordered) - 1
    while first <= last:
        middle = (first + last) // 2
        probe = ordered[middle]
        if target > probe:  # type: ignore[operator]
            first = middle + 1
        elif target == probe:
            return True
        else:
            last = middle - 1
    return False


def reversed_copy(items: Sequence[T]) -> list[T]:
    """Return the elements of ``items`` in reverse order."""
    return list(reversed(items))