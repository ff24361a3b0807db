"""A doubly linked list that can be walked in either direction."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _DNode:
    value: Any
    prev: Optional[_DNode] = None
    next: Optional[_DNode] = None


class DoublyLinkedList:
    """A doubly linked list with head and tail links."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DNode] = None
        self._tail: Optional[_DNode] = None
        self._size = 0
        for value in values:
            self.append(value)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def _node_at(self, position: int) -> _DNode:
        node = self._head
        for _ in range(position):
            node = node.next
        return node

    def insert_first(self, value: Any) -> None:
        """Insert ``value`` before the head."""
        node = _DNode(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` after the tail."""
        node = _DNode(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink(self, node: _DNode) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def delete_first(self) -> Any:
        """Remove the head and return its value."""
        if self._head is None:
            raise IndexError("delete from empty list")
        return self._unlink(self._head)

    def delete_last(self) -> Any:
        """Remove the tail and return its value."""
        if self._tail is None:
            raise IndexError("delete from empty list")
        return self._unlink(self._tail)

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position`` (0 is the head)."""
        if not 0 <= position <= self._size:
            raise IndexError(f"insertion position {position} out of range")
        if position == 0:
            self.insert_first(value)
            return
        if position == self._size:
            self.append(value)
            return
        previous = self._node_at(position - 1)
        node = _DNode(value, previous, previous.next)
        previous.next.prev = node
        previous.next = node
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        if not 0 <= position < self._size:
            raise IndexError(f"deletion position {position} out of range")
        return self._unlink(self._node_at(position))