"""A linear (non-circular) queue over a fixed number of slots."""

from __future__ import annotations

from typing import Any


class QueueFullError(OverflowError):
    """Raised when enqueueing after every slot has been used."""


class QueueEmptyError(IndexError):
    """Raised when dequeueing from an empty queue."""


class ArrayQueue:
    """A queue that uses each of its ``capacity`` slots once.

    Slots freed by dequeueing are not reused, so the queue is full after
    ``capacity`` enqueues in total.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __repr__(self) -> str:
        return f"ArrayQueue({self.capacity}, {self._slots[self._front:]!r})"

    def is_empty(self) -> bool:
        """Return True when nothing is waiting in the queue."""
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        """Return True when every slot has been used."""
        return len(self._slots) >= self.capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("Queue is Full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("Queue is Empty")
        value = self._slots[self._front]
        self._front += 1
        return value