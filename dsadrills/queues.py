"""Fixed-capacity queues, deques and sliding-window drills."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any


class QueueEmpty(Exception):
    """Raised when taking an element from an empty queue."""


class QueueFull(Exception):
    """Raised when adding an element to a queue with no free space."""


class _RingBuffer:
    """Fixed-capacity circular storage shared by the queue and the deque."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def _index(self, offset: int) -> int:
        return (self._front + offset) % len(self._slots)

    def _ensure_space(self) -> None:
        if self._count == len(self._slots):
            raise QueueFull("no free space left")

    def _ensure_items(self) -> None:
        if self._count == 0:
            raise QueueEmpty("no elements to take")

    def _push_back(self, value: int) -> None:
        self._ensure_space()
        self._slots[self._index(self._count)] = value
        self._count += 1

    def _push_front(self, value: int) -> None:
        self._ensure_space()
        self._front = self._index(-1)
        self._slots[self._front] = value
        self._count += 1

    def _pop_front(self) -> int:
        self._ensure_items()
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = self._index(1)
        self._count -= 1
        return value

    def _pop_back(self) -> int:
        self._ensure_items()
        index = self._index(self._count - 1)
        value = self._slots[index]
        self._slots[index] = None
        self._count -= 1
        return value


class CircularQueue(_RingBuffer):
    """A FIFO queue that reuses freed slots by wrapping around."""

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear; raise QueueFull when at capacity."""
        self._push_back(value)

    def dequeue(self) -> int:
        """Remove and return the front element; raise QueueEmpty if none."""
        return self._pop_front()


class BoundedDeque(_RingBuffer):
    """A double-ended queue of fixed capacity."""

    def push_front(self, value: int) -> None:
        """Add ``value`` at the front; raise QueueFull when at capacity."""
        self._push_front(value)

    def push_rear(self, value: int) -> None:
        """Add ``value`` at the rear; raise QueueFull when at capacity."""
        self._push_back(value)

    def pop_front(self) -> int:
        """Remove and return the front element."""
        return self._pop_front()

    def pop_rear(self) -> int:
        """Remove and return the rear element."""
        return self._pop_back()

    def peek_front(self) -> int:
        """Return the front element without removing it."""
        self._ensure_items()
        return self._slots[self._front]

    def peek_rear(self) -> int:
        """Return the rear element without removing it."""
        self._ensure_items()
        return self._slots[self._index(self._count - 1)]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == len(self._slots)


class ArrayQueue:
    """A queue over a flat array whose slots are reclaimed only once it drains.

    Dequeued slots are not reused until the queue becomes empty, so it can
    report being full while holding fewer than ``capacity`` elements.
    """

    def __init__(self, capacity: int = 100001) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[int] = []
        self._head = 0

    def __len__(self) -> int:
        return len(self._slots) - self._head

    def is_empty(self) -> bool:
        return self._head == len(self._slots)

    def enqueue(self, value: int) -> None:
        """Append ``value``; raise QueueFull once every slot has been used."""
        if len(self._slots) == self.capacity:
            raise QueueFull("queue is full")
        self._slots.append(value)

    def dequeue(self) -> int:
        """Remove and return the front element; raise QueueEmpty if none."""
        value = self.front()
        self._head += 1
        if self.is_empty():
            self._slots.clear()
            self._head = 0
        return value

    def front(self) -> int:
        """Return the front element without removing it."""
        if self.is_empty():
            raise QueueEmpty("queue is empty")
        return self._slots[self._head]


class KQueues:
    """``k`` FIFO queues sharing one array of ``n`` slots.

    Queues are numbered from 1. Free slots are kept on a linked free list,
    so any queue may use any slot.
    """

    def __init__(self, n: int, k: int) -> None:
        if n < 1:
            raise ValueError("n must be at least 1")
        if k < 1:
            raise ValueError("k must be at least 1")
        self._values: list[Any] = [None] * n
        self._next: list[int | None] = [*range(1, n), None]
        self._front: list[int | None] = [None] * k
        self._rear: list[int | None] = [None] * k
        self._free: int | None = 0

    def _queue_index(self, queue_number: int) -> int:
        if not 1 <= queue_number <= len(self._front):
            raise ValueError(
                f"queue number must be between 1 and {len(self._front)}, got {queue_number}"
            )
        return queue_number - 1

    def enqueue(self, value: int, queue_number: int) -> None:
        """Append ``value`` to queue ``queue_number``; raise QueueFull if no slot is free."""
        q = self._queue_index(queue_number)
        if self._free is None:
            raise QueueFull("no empty space is present")
        index = self._free
        self._free = self._next[index]
        rear = self._rear[q]
        if self._front[q] is None:
            self._front[q] = index
        elif rear is not None:
            self._next[rear] = index
        self._next[index] = None
        self._rear[q] = index
        self._values[index] = value

    def dequeue(self, queue_number: int) -> int:
        """Remove and return the front of queue ``queue_number``."""
        q = self._queue_index(queue_number)
        index = self._front[q]
        if index is None:
            raise QueueEmpty(f"queue {queue_number} is empty")
        self._front[q] = self._next[index]
        if self._front[q] is None:
            self._rear[q] = None
        self._next[index] = self._free
        self._free = index
        value = self._values[index]
        self._values[index] = None
        return value


@dataclass(frozen=True)
class PetrolPump:
    """A pump giving ``petrol`` litres, ``distance`` from the next pump."""

    petrol: int
    distance: int


def circular_tour(pumps: Sequence[PetrolPump]) -> int | None:
    """Return the first pump index from which the full circle can be driven.

    Returns None when no starting pump works.
    """
    deficit = 0
    balance = 0
    start = 0
    for index, pump in enumerate(pumps):
        balance += pump.petrol - pump.distance
        if balance < 0:
            start = index + 1
            deficit += balance
            balance = 0
    return start if balance + deficit >= 0 else None


def _check_window(values: Sequence[int], k: int) -> None:
    if not 1 <= k <= len(values):
        raise ValueError(f"window size must be between 1 and {len(values)}, got {k}")


def first_negatives(values: Sequence[int], k: int) -> list[int]:
    """Return the first negative number of every window of size ``k``, or 0."""
    _check_window(values, k)
    negatives: deque[int] = deque()
    result: list[int] = []
    for index, value in enumerate(values):
        if negatives and index - negatives[0] >= k:
            negatives.popleft()
        if value < 0:
            negatives.append(index)
        if index >= k - 1:
            result.append(values[negatives[0]] if negatives else 0)
    return result


def sum_window_extremes(values: Sequence[int], k: int) -> int:
    """Return the sum of maximum plus minimum over every window of size ``k``."""
    _check_window(values, k)
    maxima: deque[int] = deque()
    minima: deque[int] = deque()
    total = 0
    for index, value in enumerate(values):
        while maxima and index - maxima[0] >= k:
            maxima.popleft()
        while minima and index - minima[0] >= k:
            minima.popleft()
        while maxima and values[maxima[-1]] <= value:
            maxima.pop()
        while minima and values[minima[-1]] >= value:
            minima.pop()
        maxima.append(index)
        minima.append(index)
        if index >= k - 1:
            total += values[maxima[0]] + values[minima[0]]
    return total


def delete_middle(stack: MutableSequence[int]) -> int:
    """Remove and return the middle element of a stack whose top is the last item.

    Counting from the top, the element at position ``len(stack) // 2`` is removed.
    """
    if not stack:
        raise IndexError("cannot delete the middle of an empty stack")
    return stack.pop(len(stack) - 1 - len(stack) // 2)


def _drain(items: Iterable[int]) -> list[int]:
    return list(items)