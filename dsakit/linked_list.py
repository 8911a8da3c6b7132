"""Singly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    link: _Node[T] | None = None


class LinkedList(Generic[T]):
    """A singly linked list of values, first to last."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _node_at(self, index: int) -> _Node[T]:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.link
        assert node is not None
        return node

    def _insert_at_index(self, index: int, value: T) -> None:
        if index == 0:
            self.push_front(value)
        elif index == self._size:
            self.append(value)
        else:
            previous = self._node_at(index - 1)
            previous.link = _Node(value, previous.link)
            self._size += 1

    def _remove_at_index(self, index: int) -> T:
        if index == 0:
            return self.delete_first()
        previous = self._node_at(index - 1)
        node = previous.link
        assert node is not None
        previous.link = node.link
        if node is self._tail:
            self._tail = previous
        self._size -= 1
        return node.value

    def push_front(self, value: T) -> None:
        """Make ``value`` the new first element."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def append(self, value: T) -> None:
        """Add ``value`` after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.link = node
            self._tail = node
        self._size += 1

    def insert_after(self, value: T, location: int) -> None:
        """Insert ``value`` after the node at 1-based ``location``.

        Location 0 makes ``value`` the first element. A location past the
        last node raises IndexError.
        """
        if not 0 <= location <= self._size:
            raise IndexError(
                f"cannot insert after location {location} in a list of {self._size}"
            )
        self._insert_at_index(location, value)

    def insert_middle(self, value: T) -> None:
        """Insert ``value`` after the first half of the list.

        With n elements the new one lands at 0-based index ceil(n / 2).
        """
        self._insert_at_index((self._size + 1) // 2, value)

    def delete_first(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        node = self._head
        self._head = node.link
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def delete_last(self) -> T:
        """Remove and return the last element."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        return self._remove_at_index(self._size - 1)

    def delete_at(self, location: int) -> T:
        """Remove and return the element at 1-based ``location``."""
        if not 1 <= location <= self._size:
            raise IndexError(
                f"cannot delete location {location} in a list of {self._size}"
            )
        return self._remove_at_index(location - 1)

    def delete_middle(self) -> T:
        """Remove and return the middle element.

        With n elements the one at 1-based position ceil(n / 2) goes.
        """
        if self._head is None:
            raise IndexError("delete from an empty list")
        return self._remove_at_index((self._size + 1) // 2 - 1)

    def search(self, value: T) -> int | None:
        """Return the 1-based location of the first node holding ``value``, or None."""
        for location, item in enumerate(self, start=1):
            if item == value:
                return location
        return None

    def reverse(self) -> None:
        """Reverse the list in place by turning every link around."""
        previous: _Node[T] | None = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.link
            current.link = previous
            previous = current
            current = following
        self._head = previous

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from the first element to the last."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.link

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"