"""A fixed-capacity stack backed by a list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from or popping an empty stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({self.capacity}, {self._items!r})"

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when no more elements can be pushed."""
        return len(self._items) >= self.capacity

    def push(self, value: Any) -> None:
        """Push ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError(
                f"Stack is overflow so {value} can't push to the Stack"
            )
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self.is_empty():
            raise StackUnderflowError("Stack is Underflow")
        return self._items.pop()

    def peek(self, position: int) -> Any:
        """Return the element at ``position``, counting 1 as the top."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"Not a valid Position: {position}")
        return self._items[len(self._items) - position]

    def top(self) -> Any:
        """Return the top element without removing it."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def bottom(self) -> Any:
        """Return the bottom element."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items[0]