"""A binary min-heap."""

from collections.abc import Iterable


class MinHeap:
    """Binary min-heap keeping its items in a list."""

    def __init__(self, items: Iterable = ()) -> None:
        self._items: list = []
        for item in items:
            self.push(item)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)

    def push(self, item) -> None:
        """Add an item."""
        self._items.append(item)
        self._bubble_up(len(self._items) - 1)

    def pop(self):
        """Remove and return the smallest item."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        first = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._percolate_down(0)
        return first

    def _bubble_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] <= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _percolate_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            child = 2 * index + 1
            if child >= size:
                return
            if child + 1 < size and items[child + 1] < items[child]:
                child += 1
            if items[index] <= items[child]:
                return
            items[index], items[child] = items[child], items[index]
            index = child