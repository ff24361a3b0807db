"""An unbounded stack built from singly linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from dsakit.linked_list import Node
from dsakit.stack import StackUnderflowError


class LinkedStack:
    """A stack whose top is the head of a chain of linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[Node] = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return self._top is None

    def push(self, value: Any) -> None:
        """Push ``value`` on top of the stack."""
        self._top = Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self._top is None:
            raise StackUnderflowError("Stack is Underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self, position: int) -> Any:
        """Return the element at ``position``, counting 1 as the top."""
        if position < 1:
            raise IndexError(f"Not a valid Position: {position}")
        for index, value in enumerate(self, start=1):
            if index == position:
                return value
        raise IndexError(f"Not a valid Position: {position}")