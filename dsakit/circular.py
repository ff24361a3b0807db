"""A circular singly linked list whose last node links back to the first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.linked_list import Node


class CircularLinkedList:
    """A circular singly linked list, tracked through its last node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"

    def insert_first(self, value: Any) -> None:
        """Insert ``value`` as the new head."""
        node = Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` after the last node, just before the head."""
        self.insert_first(value)
        self._tail = self._tail.next

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insertion index {index} out of range")
        if index == 0:
            self.insert_first(value)
            return
        if index == self._size:
            self.append(value)
            return
        previous = self._tail.next
        for _ in range(index - 1):
            previous = previous.next
        previous.next = Node(value, previous.next)
        self._size += 1

    def delete_first(self) -> Any:
        """Remove the head and return its value."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def delete_last(self) -> Any:
        """Remove the last node and return its value."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        last = self._tail
        if last.next is last:
            self._tail = None
        else:
            previous = last.next
            while previous.next is not last:
                previous = previous.next
            previous.next = last.next
            self._tail = previous
        self._size -= 1
        return last.value