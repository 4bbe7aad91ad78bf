"""Bounded single-producer single-consumer ring buffer queue."""

import queue
from typing import Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 16384


class QueueFull(queue.Full):
    """Raised when pushing onto a full queue."""


class QueueEmpty(queue.Empty):
    """Raised when popping from an empty queue."""


class SPSCQueue(Generic[T]):
    """Ring buffer with ``capacity`` slots, one of which always stays free.

    Exactly one thread may push and exactly one thread may pop. The producer
    only writes the tail index and the consumer only writes the head index,
    and each slot is filled before the index that publishes it is advanced.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self._capacity = capacity
        self._slots: List[Optional[T]] = [None] * capacity
        self._head = 0
        self._tail = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the ring; at most ``capacity - 1`` items fit."""
        return self._capacity

    def try_push(self, item: T) -> None:
        """Append ``item``; raise QueueFull if there is no free slot."""
        tail = self._tail
        next_tail = (tail + 1) % self._capacity
        if next_tail == self._head:
            raise QueueFull("queue is full")
        self._slots[tail] = item
        self._tail = next_tail

    def try_pop(self) -> T:
        """Remove and return the oldest item; raise QueueEmpty if there is none."""
        head = self._head
        if head == self._tail:
            raise QueueEmpty("queue is empty")
        item = self._slots[head]
        self._slots[head] = None
        self._head = (head + 1) % self._capacity
        return item  # type: ignore[return-value]

    def split(self) -> Tuple["Sender[T]", "Receiver[T]"]:
        """Return the producer and consumer handles sharing this queue."""
        return Sender(self), Receiver(self)

    def __len__(self) -> int:
        return (self._tail - self._head) % self._capacity


class Sender(Generic[T]):
    """Producer handle of an SPSCQueue."""

    def __init__(self, queue: SPSCQueue[T]) -> None:
        self._queue = queue

    def send(self, item: T) -> None:
        """Push ``item``; raise QueueFull if the queue is full."""
        self._queue.try_push(item)


class Receiver(Generic[T]):
    """Consumer handle of an SPSCQueue."""

    def __init__(self, queue: SPSCQueue[T]) -> None:
        self._queue = queue

    def recv(self) -> T:
        """Pop the oldest item; raise QueueEmpty if nothing is waiting."""
        return self._queue.try_pop()