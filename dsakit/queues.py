"""Bounded, linked and priority queues."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueOverflow(Exception):
    """Raised when adding to a queue that has no room left."""


class QueueUnderflow(Exception):
    """Raised when removing from or peeking at an empty queue."""


class CircularQueue(Generic[T]):
    """A fixed-capacity FIFO queue whose slots are reused in a ring."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[T | None] = [None] * capacity
        self._front = 0
        self._count = 0

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear; raise QueueOverflow when full."""
        if self._count == self.capacity:
            raise QueueOverflow(f"queue is full ({self.capacity} elements)")
        self._slots[(self._front + self._count) % self.capacity] = value
        self._count += 1

    def dequeue(self) -> T:
        """Remove and return the element at the front."""
        if self._count == 0:
            raise QueueUnderflow("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return value  # type: ignore[return-value]

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        for offset in range(self._count):
            yield self._slots[(self._front + offset) % self.capacity]  # type: ignore[misc]


class LinearQueue(Generic[T]):
    """A fixed-capacity FIFO queue over an array whose rear only moves forward.

    Slots freed by dequeuing are not reused until the queue becomes empty,
    at which point both ends return to the start of the array.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[T | None] = [None] * capacity
        self._front_index = 0
        self._rear_index = 0

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear; raise QueueOverflow when the rear is at the end."""
        if self._rear_index == self.capacity:
            raise QueueOverflow(f"queue is full ({self.capacity} slots)")
        self._slots[self._rear_index] = value
        self._rear_index += 1

    def dequeue(self) -> T:
        """Remove and return the element at the front."""
        if self.is_empty():
            raise QueueUnderflow("queue is empty")
        value = self._slots[self._front_index]
        self._slots[self._front_index] = None
        self._front_index += 1
        if self._front_index == self._rear_index:
            self._front_index = self._rear_index = 0
        return value  # type: ignore[return-value]

    def front(self) -> T:
        """Return the element at the front without removing it."""
        if self.is_empty():
            raise QueueUnderflow("queue is empty")
        return self._slots[self._front_index]  # type: ignore[return-value]

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return self._front_index == self._rear_index

    def __len__(self) -> int:
        return self._rear_index - self._front_index

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        return iter(self._slots[self._front_index : self._rear_index])  # type: ignore[arg-type]


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    link: _Node[T] | None = None


class LinkedQueue(Generic[T]):
    """An unbounded FIFO queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: _Node[T] | None = None
        self._rear: _Node[T] | None = None
        self._size = 0

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.link = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the element at the front."""
        if self._front is None:
            raise QueueUnderflow("queue is empty")
        node = self._front
        self._front = node.link
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def front(self) -> T:
        """Return the element at the front without removing it."""
        if self._front is None:
            raise QueueUnderflow("queue is empty")
        return self._front.value

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return self._front is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        node = self._front
        while node is not None:
            yield node.value
            node = node.link


class PriorityQueue(Generic[T]):
    """A queue served highest priority first; equal priorities are served FIFO."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, T]] = []
        self._counter = itertools.count()

    def insert(self, data: T, priority: int) -> None:
        """Add ``data`` with the given priority."""
        heapq.heappush(self._heap, (-priority, next(self._counter), data))

    def dequeue(self) -> T:
        """Remove and return the element with the highest priority."""
        if not self._heap:
            raise QueueUnderflow("queue is empty")
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[tuple[T, int]]:
        """Yield (data, priority) pairs in the order they would be dequeued."""
        for neg_priority, _, data in sorted(self._heap, key=lambda e: (e[0], e[1])):
            yield data, -neg_priority