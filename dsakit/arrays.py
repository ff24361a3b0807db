"""Fixed-capacity arrays and simple searches over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


class BoundedArray:
    """An array that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int, values: Iterable[int] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        items = list(values)
        if len(items) > capacity:
            raise ValueError(
                f"{len(items)} values do not fit in capacity {capacity}"
            )
        self.capacity = capacity
        self._items = items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __repr__(self) -> str:
        return f"BoundedArray({self.capacity}, {self._items!r})"

    def is_full(self) -> bool:
        """Return True when no more elements can be inserted."""
        return len(self._items) >= self.capacity

    def insert(self, index: int, element: int) -> None:
        """Insert ``element`` at ``index``, shifting later elements right."""
        if self.is_full():
            raise OverflowError("array is full")
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insertion index {index} out of range")
        self._items.insert(index, element)

    def delete(self, index: int) -> int:
        """Remove and return the element at ``index``, shifting later ones left."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"deletion index {index} out of range")
        return self._items.pop(index)


def linear_search(items: Iterable[int], element: int) -> int:
    """Return the index of the first ``element`` in ``items``, or -1."""
    for index, item in enumerate(items):
        if item == element:
            return index
    return -1


def binary_search(items: Sequence[int], element: int) -> int:
    """Return an index of ``element`` in the sorted ``items``, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == element:
            return mid
        if items[mid] < element:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def count_occurrences(items: Iterable[int], key: int) -> int:
    """Return how many times ``key`` occurs in ``items``."""
    return sum(1 for item in items if item == key)