"""A singly linked list with the classic insertion, deletion and reversal operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    value: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list addressed from its head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._size = 0
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _require_member(self, node: Node) -> None:
        if not any(candidate is node for candidate in self._nodes()):
            raise ValueError("node does not belong to this list")

    def node_at(self, index: int) -> Node:
        """Return the node at ``index`` (0 is the head)."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(f"index {index} out of range")

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` before the head and return its node."""
        node = Node(value, self.head)
        self.head = node
        self._size += 1
        return node

    def insert_at(self, index: int, value: Any) -> Node:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insertion index {index} out of range")
        if index == 0:
            return self.push_front(value)
        return self.insert_after(self.node_at(index - 1), value)

    def append(self, value: Any) -> Node:
        """Insert ``value`` after the last node and return its node."""
        if self.head is None:
            return self.push_front(value)
        *_, last = self._nodes()
        node = Node(value)
        last.next = node
        self._size += 1
        return node

    def insert_after(self, node: Node, value: Any) -> Node:
        """Insert ``value`` directly after ``node`` and return the new node."""
        self._require_member(node)
        new = Node(value, node.next)
        node.next = new
        self._size += 1
        return new

    def pop_front(self) -> Any:
        """Remove the head and return its value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        self._size -= 1
        return node.value

    def delete_at(self, index: int) -> Any:
        """Remove the node at ``index`` and return its value."""
        if not 0 <= index < self._size:
            raise IndexError(f"deletion index {index} out of range")
        if index == 0:
            return self.pop_front()
        return self.delete_after(self.node_at(index - 1))

    def pop_back(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        if self.head.next is None:
            return self.pop_front()
        previous = self.head
        while previous.next is not None and previous.next.next is not None:
            previous = previous.next
        return self.delete_after(previous)

    def delete_after(self, node: Node) -> Any:
        """Remove the node that follows ``node`` and return its value."""
        self._require_member(node)
        victim = node.next
        if victim is None:
            raise IndexError("no node follows the given node")
        node.next = victim.next
        self._size -= 1
        return victim.value

    def remove_value(self, value: Any) -> bool:
        """Remove the first node holding ``value``; return whether one was found."""
        if self.head is None:
            return False
        if self.head.value == value:
            self.pop_front()
            return True
        previous = self.head
        while previous.next is not None:
            if previous.next.value == value:
                self.delete_after(previous)
                return True
            previous = previous.next
        return False

    def reverse(self) -> None:
        """Reverse the list in place, iteratively."""
        previous: Optional[Node] = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def reverse_recursive(self) -> None:
        """Reverse the list in place, recursively."""

        def flip(node: Optional[Node]) -> Optional[Node]:
            if node is None or node.next is None:
                return node
            new_head = flip(node.next)
            node.next.next = node
            node.next = None
            return new_head

        self.head = flip(self.head)