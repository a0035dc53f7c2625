"""A bounded binary max-heap and heap sort."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_CAPACITY = 100


class HeapFullError(OverflowError):
    """Raised when inserting into a heap that is at capacity."""


class MaxHeap:
    """Binary max-heap stored in a list, holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        """Items in storage (level) order."""
        return iter(list(self._items))

    def insert(self, value: int) -> None:
        """Add ``value`` and move it up to its place."""
        if len(self._items) >= self.capacity:
            raise HeapFullError("heap is full")
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def peek(self) -> int:
        """The largest item, left in place."""
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0]

    def pop(self) -> int:
        """Remove and return the largest item."""
        items = self._items
        if not items:
            raise IndexError("heap is empty")
        largest = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return largest

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left = 2 * index + 1
            right = left + 1
            biggest = index
            if left < size and items[left] > items[biggest]:
                biggest = left
            if right < size and items[right] > items[biggest]:
                biggest = right
            if biggest == index:
                return
            items[index], items[biggest] = items[biggest], items[index]
            index = biggest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted through a max-heap."""
    items = list(values)
    heap = MaxHeap(capacity=len(items))
    for value in items:
        heap.insert(value)
    descending = [heap.pop() for _ in range(len(items))]
    descending.reverse()
    return descending