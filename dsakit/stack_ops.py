"""Operations on a stack held in a list whose last element is the top.

Each function changes the given list in place.
"""

from __future__ import annotations

from typing import TypeVar

from dsakit.stack import StackUnderflow

T = TypeVar("T")


def delete_middle(stack: list[T]) -> T:
    """Remove and return the middle element.

    Counting from the top, the element at position ``len(stack) // 2`` goes.
    """
    if not stack:
        raise StackUnderflow("stack is empty")
    return stack.pop(len(stack) - 1 - len(stack) // 2)


def insert_at_bottom(stack: list[T], value: T) -> None:
    """Place ``value`` beneath every element already on the stack."""
    stack.insert(0, value)


def reverse_stack(stack: list[T]) -> None:
    """Reverse the stack so the old bottom becomes the top."""
    stack.reverse()


def sort_stack(stack: list[T]) -> None:
    """Sort the stack so the largest element is on top."""
    stack.sort()  # type: ignore[call-arg]