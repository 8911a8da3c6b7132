"""Singly linked circular list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    next: _Node[T] | None = None


class CircularLinkedList(Generic[T]):
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._size = 0
        for value in values:
            self.insert_last(value)

    def insert_first(self, value: T) -> None:
        """Make ``value`` the new first element."""
        node = _Node(value)
        if self._head is None or self._tail is None:
            node.next = node
            self._head = self._tail = node
        else:
            node.next = self._head
            self._tail.next = node
            self._head = node
        self._size += 1

    def insert_last(self, value: T) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
        if self._head is None or self._tail is None:
            node.next = node
            self._head = self._tail = node
        else:
            node.next = self._head
            self._tail.next = node
            self._tail = node
        self._size += 1

    def insert_after(self, value: T, location: int) -> None:
        """Insert ``value`` relative to the head.

        Location 0 makes ``value`` the new first element. Otherwise ``value``
        goes after the node reached by moving ``location`` steps from the
        head; a walk that comes back round to the head raises IndexError.
        """
        if location < 0:
            raise IndexError(f"invalid location {location}")
        if location == 0:
            self.insert_first(value)
            return
        if self._head is None:
            raise IndexError(f"cannot insert at location {location} in an empty list")
        node = self._head
        for _ in range(location):
            assert node.next is not None
            node = node.next
            if node is self._head:
                raise IndexError(f"location {location} is past the end of the list")
        new = _Node(value, node.next)
        node.next = new
        if node is self._tail:
            self._tail = new
        self._size += 1

    def delete_first(self) -> T:
        """Remove and return the first element."""
        if self._head is None or self._tail is None:
            raise IndexError("delete from an empty list")
        node = self._head
        if self._size == 1:
            self._head = self._tail = None
        else:
            self._head = node.next
            self._tail.next = self._head
        self._size -= 1
        return node.value

    def delete_last(self) -> T:
        """Remove and return the last element."""
        if self._head is None or self._tail is None:
            raise IndexError("delete from an empty list")
        last = self._tail
        if self._size == 1:
            self._head = self._tail = None
        else:
            previous = self._head
            while previous.next is not last:
                assert previous.next is not None
                previous = previous.next
            previous.next = self._head
            self._tail = previous
        self._size -= 1
        return last.value

    def search(self, value: T) -> int | None:
        """Return the 1-based location of the first node holding ``value``, or None."""
        for location, item in enumerate(self, start=1):
            if item == value:
                return location
        return None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate once round the list, starting at the head."""
        node = self._head
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"