import pytest

from dslabs.queues.structures import (
    QUEUE_DEPTH,
    ArrayQueue,
    ListQueue,
    QueueEmptyError,
    QueueOverflowError,
)


@pytest.mark.parametrize("factory", [ArrayQueue, ListQueue])
def test_fifo_order(factory):
    queue = factory()
    for value in (1.5, 2.5, 3.5):
        queue.push(value)
    assert len(queue) == 3
    assert [queue.pop() for _ in range(3)] == [1.5, 2.5, 3.5]
    assert len(queue) == 0


@pytest.mark.parametrize("factory", [ArrayQueue, ListQueue])
def test_pop_empty_raises(factory):
    queue = factory()
    with pytest.raises(QueueEmptyError):
        queue.pop()


@pytest.mark.parametrize("factory", [ArrayQueue, ListQueue])
def test_entries_values_match_queue_contents(factory):
    queue = factory()
    for value in (4.0, 5.0, 6.0):
        queue.push(value)
    queue.pop()
    assert [value for _, value in queue.entries()] == [5.0, 6.0]


def test_array_default_capacity_is_queue_depth():
    queue = ArrayQueue()
    for i in range(QUEUE_DEPTH):
        queue.push(float(i))
    with pytest.raises(QueueOverflowError):
        queue.push(0.0)
    assert len(queue) == QUEUE_DEPTH


def test_array_overflow_small_capacity():
    queue = ArrayQueue(2)
    queue.push(1.0)
    queue.push(2.0)
    with pytest.raises(QueueOverflowError):
        queue.push(3.0)
    assert queue.pop() == 1.0


def test_array_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(0)


def test_array_wraps_around():
    queue = ArrayQueue(3)
    for value in (1.0, 2.0, 3.0):
        queue.push(value)
    queue.pop()
    queue.pop()
    queue.push(4.0)
    queue.push(5.0)
    assert queue.entries() == [(2, 3.0), (0, 4.0), (1, 5.0)]
    assert [queue.pop() for _ in range(3)] == [3.0, 4.0, 5.0]


def test_array_resets_slots_when_emptied():
    queue = ArrayQueue(3)
    queue.push(1.0)
    queue.push(2.0)
    queue.pop()
    queue.pop()
    queue.push(9.0)
    assert queue.entries() == [(0, 9.0)]


def test_list_is_unbounded():
    queue = ListQueue()
    for i in range(QUEUE_DEPTH + 10):
        queue.push(float(i))
    assert len(queue) == QUEUE_DEPTH + 10
    assert queue.pop() == 0.0


def test_list_entries_have_distinct_addresses():
    queue = ListQueue()
    for value in (1.0, 2.0, 3.0, 4.0):
        queue.push(value)
    addresses = [address for address, _ in queue.entries()]
    assert len(set(addresses)) == 4


def test_list_records_freed_addresses():
    queue = ListQueue(track_freed=True)
    for value in (1.0, 2.0, 3.0):
        queue.push(value)
    addresses = [address for address, _ in queue.entries()]
    queue.pop()
    queue.pop()
    assert queue.freed_addresses() == addresses[:2]
    assert [value for _, value in queue.entries()] == [3.0]


def test_list_without_tracking_records_nothing():
    queue = ListQueue()
    queue.push(1.0)
    queue.pop()
    assert queue.freed_addresses() == []


def test_list_push_after_emptying():
    queue = ListQueue()
    queue.push(1.0)
    queue.pop()
    queue.push(2.0)
    queue.push(3.0)
    assert [queue.pop(), queue.pop()] == [2.0, 3.0]