"""Fenwick (binary indexed) tree and inversion counting."""

from collections.abc import Iterable


class FenwickTree:
    """Prefix sums over ``size`` zero-based positions with point updates."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._size = size
        self._bit = [0] * (size + 1)

    def __len__(self) -> int:
        return self._size

    def update(self, index: int, delta) -> None:
        """Add ``delta`` to the value at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        k = index + 1
        while k <= self._size:
            self._bit[k] += delta
            k += k & -k

    def prefix_sum(self, index: int):
        """Return the sum of positions 0..index inclusive; index -1 gives 0."""
        if not -1 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        total = 0
        k = index + 1
        while k > 0:
            total += self._bit[k]
            k -= k & -k
        return total

    def query(self, left: int, right: int):
        """Return the sum of positions left..right inclusive."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


def count_inversions(values: Iterable) -> int:
    """Count pairs i < j with values[i] > values[j]."""
    items = list(values)
    rank = {value: position for position, value in enumerate(sorted(set(items)))}
    tree = FenwickTree(len(rank))
    total = 0
    for value in reversed(items):
        r = rank[value]
        total += tree.prefix_sum(r - 1)
        tree.update(r, 1)
    return total