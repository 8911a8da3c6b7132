"""Fixed-capacity stacks and a string reversal built on a stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class StackOverflow(Exception):
    """Raised when pushing onto a stack that has no room left."""


class StackUnderflow(Exception):
    """Raised when popping or peeking at an empty stack."""


class BoundedStack(Generic[T]):
    """A stack that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top; raise StackOverflow when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflow(f"stack is full ({self.capacity} elements)")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top element without removing it."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)


class TwoStacks(Generic[T]):
    """Two stacks sharing one array: the first grows from the left end,
    the second from the right, and they overflow when they meet."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[T | None] = [None] * capacity
        self._top1 = -1
        self._top2 = capacity

    def _has_room(self) -> bool:
        return self._top2 - self._top1 > 1

    def push1(self, value: T) -> None:
        """Push ``value`` onto the first stack."""
        if not self._has_room():
            raise StackOverflow("no room left in the shared array")
        self._top1 += 1
        self._slots[self._top1] = value

    def push2(self, value: T) -> None:
        """Push ``value`` onto the second stack."""
        if not self._has_room():
            raise StackOverflow("no room left in the shared array")
        self._top2 -= 1
        self._slots[self._top2] = value

    def pop1(self) -> T:
        """Remove and return the top of the first stack."""
        value = self.peek1()
        self._slots[self._top1] = None
        self._top1 -= 1
        return value

    def pop2(self) -> T:
        """Remove and return the top of the second stack."""
        value = self.peek2()
        self._slots[self._top2] = None
        self._top2 += 1
        return value

    def peek1(self) -> T:
        """Return the top of the first stack."""
        if self._top1 < 0:
            raise StackUnderflow("first stack is empty")
        return self._slots[self._top1]  # type: ignore[return-value]

    def peek2(self) -> T:
        """Return the top of the second stack."""
        if self._top2 >= self.capacity:
            raise StackUnderflow("second stack is empty")
        return self._slots[self._top2]  # type: ignore[return-value]


def reverse_string(text: str) -> str:
    """Reverse ``text`` by pushing its characters and popping them back."""
    stack = list(text)
    chars: list[str] = []
    while stack:
        chars.append(stack.pop())
    return "".join(chars)