import pytest

from dsakit.queues import (
    CircularQueue,
    LinearQueue,
    LinkedQueue,
    PriorityQueue,
    QueueOverflow,
    QueueUnderflow,
)


def test_circular_queue_is_fifo():
    q = CircularQueue()
    for value in (1, 2, 3):
        q.enqueue(value)
    assert [q.dequeue() for _ in range(3)] == [1, 2, 3]
    assert q.is_empty()


def test_circular_queue_default_capacity_is_five():
    q = CircularQueue()
    for value in range(5):
        q.enqueue(value)
    with pytest.raises(QueueOverflow):
        q.enqueue(99)
    assert len(q) == 5


def test_circular_queue_reuses_slots():
    q = CircularQueue(3)
    for value in "abc":
        q.enqueue(value)
    assert q.dequeue() == "a"
    q.enqueue("d")
    assert list(q) == ["b", "c", "d"]


def test_circular_queue_underflow():
    q = CircularQueue(2)
    with pytest.raises(QueueUnderflow):
        q.dequeue()


def test_circular_queue_rejects_zero_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_linear_queue_order_and_front():
    q = LinearQueue(4)
    q.enqueue(7)
    q.enqueue(8)
    assert q.front() == 7
    assert q.dequeue() == 7
    assert list(q) == [8]


def test_linear_queue_does_not_reuse_freed_slots():
    q = LinearQueue(2)
    q.enqueue(1)
    q.enqueue(2)
    assert q.dequeue() == 1
    with pytest.raises(QueueOverflow):
        q.enqueue(3)


def test_linear_queue_resets_when_emptied():
    q = LinearQueue(2)
    q.enqueue(1)
    q.enqueue(2)
    q.dequeue()
    q.dequeue()
    assert q.is_empty()
    q.enqueue(3)
    q.enqueue(4)
    assert list(q) == [3, 4]


def test_linear_queue_underflow():
    q = LinearQueue()
    with pytest.raises(QueueUnderflow):
        q.front()
    with pytest.raises(QueueUnderflow):
        q.dequeue()


def test_linked_queue_round_trip():
    q = LinkedQueue()
    values = [5, 9, 2, 9]
    for value in values:
        q.enqueue(value)
    assert len(q) == len(values)
    assert list(q) == values
    assert [q.dequeue() for _ in values] == values
    assert q.is_empty()


def test_linked_queue_front_and_refill():
    q = LinkedQueue()
    q.enqueue("x")
    assert q.front() == "x"
    assert q.dequeue() == "x"
    q.enqueue("y")
    assert list(q) == ["y"]


def test_linked_queue_underflow():
    q = LinkedQueue()
    with pytest.raises(QueueUnderflow):
        q.dequeue()
    with pytest.raises(QueueUnderflow):
        q.front()


def test_priority_queue_serves_highest_first_then_fifo():
    q = PriorityQueue()
    q.insert(10, 1)
    q.insert(20, 3)
    q.insert(30, 2)
    q.insert(40, 3)
    assert list(q) == [(20, 3), (40, 3), (30, 2), (10, 1)]
    assert [q.dequeue() for _ in range(4)] == [20, 40, 30, 10]
    assert q.is_empty()


def test_priority_queue_underflow():
    q = PriorityQueue()
    with pytest.raises(QueueUnderflow):
        q.dequeue()