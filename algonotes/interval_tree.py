"""A centered interval tree for stabbing queries on integer segments."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort


def _half_toward_zero(total: int) -> int:
    half = abs(total) // 2
    return half if total >= 0 else -half


class IntervalTree:
    """Stores closed integer segments and finds those containing a point."""

    def __init__(self) -> None:
        self._center: int | None = None
        self._by_start: list[tuple[int, int]] = []
        self._by_end: list[tuple[int, int]] = []
        self._left: IntervalTree | None = None
        self._right: IntervalTree | None = None

    def insert(self, segment: tuple[int, int]) -> None:
        """Add the closed segment (start, end)."""
        start, end = segment
        if start > end:
            raise ValueError(f"segment start {start} is after its end {end}")
        if self._center is None:
            self._center = _half_toward_zero(start + end)
        if end < self._center:
            if self._left is None:
                self._left = IntervalTree()
            self._left.insert(segment)
        elif self._center < start:
            if self._right is None:
                self._right = IntervalTree()
            self._right.insert(segment)
        else:
            insort(self._by_start, (start, end))
            insort(self._by_end, (end, start))

    def intersect(self, point: int) -> list[tuple[int, int]]:
        """Return every stored segment containing ``point``."""
        if self._center is None:
            return []
        if point <= self._center:
            stop = bisect_right(self._by_start, point, key=lambda s: s[0]) \
                if False else self._count_starting_at_most(point)
            found = self._by_start[:stop]
            if self._left is not None:
                found.extend(self._left.intersect(point))
        else:
            first = self._first_ending_at_least(point)
            found = [(start, end) for end, start in self._by_end[first:]]
            if self._right is not None:
                found.extend(self._right.intersect(point))
        return found

    def _count_starting_at_most(self, point: int) -> int:
        starts = [start for start, _ in self._by_start]
        return bisect_right(starts, point)

    def _first_ending_at_least(self, point: int) -> int:
        ends = [end for end, _ in self._by_end]
        return bisect_left(ends, point)