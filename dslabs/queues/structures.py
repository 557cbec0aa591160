"""FIFO queues of floating-point values: a ring buffer and a linked list."""

from __future__ import annotations

from typing import Optional

QUEUE_DEPTH = 2000


class QueueOverflowError(Exception):
    """Raised when a value is pushed into a full queue."""


class QueueEmptyError(Exception):
    """Raised when a value is popped from an empty queue."""


class ArrayQueue:
    """Fixed-capacity FIFO queue stored in a circular buffer."""

    def __init__(self, capacity: int = QUEUE_DEPTH) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._values: list[float] = [0.0] * capacity
        self._capacity = capacity
        self._in = 0
        self._out = 0
        self._depth = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: float) -> None:
        """Append a value at the tail of the queue."""
        if self._depth == self._capacity:
            raise QueueOverflowError("queue is full")
        if self._depth == 0:
            self._in = 0
            self._out = 0
        self._values[self._in] = value
        self._in = (self._in + 1) % self._capacity
        self._depth += 1

    def pop(self) -> float:
        """Remove and return the value at the head of the queue."""
        if self._depth == 0:
            raise QueueEmptyError("queue is empty")
        value = self._values[self._out]
        self._depth -= 1
        if self._depth != 0:
            self._out = (self._out + 1) % self._capacity
        return value

    def __len__(self) -> int:
        return self._depth

    def entries(self) -> list[tuple[int, float]]:
        """Return (slot index, value) pairs from head to tail."""
        return [
            ((self._out + offset) % self._capacity,
             self._values[(self._out + offset) % self._capacity])
            for offset in range(self._depth)
        ]


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: float) -> None:
        self.value = value
        self.next: Optional[_Node] = None


class ListQueue:
    """Unbounded FIFO queue built from singly linked nodes.

    With ``track_freed`` set, the address of every node removed by ``pop``
    is remembered and can be listed with ``freed_addresses``.
    """

    def __init__(self, track_freed: bool = False) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._depth = 0
        self._track_freed = track_freed
        self._freed: list[int] = []

    def push(self, value: float) -> None:
        """Append a value at the tail of the queue."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._depth += 1

    def pop(self) -> float:
        """Remove and return the value at the head of the queue."""
        head = self._head
        if head is None:
            raise QueueEmptyError("queue is empty")
        if self._track_freed:
            self._freed.append(id(head))
        self._head = head.next
        if self._head is None:
            self._tail = None
        self._depth -= 1
        return head.value

    def __len__(self) -> int:
        return self._depth

    def _nodes(self):
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def entries(self) -> list[tuple[int, float]]:
        """Return (node address, value) pairs from head to tail."""
        return [(id(node), node.value) for node in self._nodes()]

    def freed_addresses(self) -> list[int]:
        """Return the addresses of popped nodes in the order they were freed."""
        return list(self._freed)