"""Largest all-ones rectangle in a 0/1 matrix, and the histogram helpers behind it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


class RangeMinimum:
    """Sparse table answering "index of the minimum on [left, right]" in O(1)."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values: tuple[int, ...] = tuple(values)
        size = len(self.values)
        if size == 0:
            raise ValueError("cannot build a range-minimum table over no values")
        self._levels: list[list[int]] = [list(range(size))]
        width = 2
        while width <= size:
            previous = self._levels[-1]
            half = width // 2
            self._levels.append(
                [
                    self._better(previous[i], previous[i + half])
                    for i in range(size - width + 1)
                ]
            )
            width *= 2

    def __len__(self) -> int:
        return len(self.values)

    def _better(self, a: int, b: int) -> int:
        return a if self.values[a] < self.values[b] else b

    def query(self, left: int, right: int) -> int:
        """Return an index of the smallest value among positions left..right."""
        if not 0 <= left <= right < len(self.values):
            raise IndexError(f"range [{left}, {right}] is out of bounds")
        level = (right - left + 1).bit_length() - 1
        row = self._levels[level]
        return self._better(row[left], row[right - (1 << level) + 1])


def histogram_area(heights: Sequence[int]) -> int:
    """Largest rectangle under a histogram, using a monotonic stack."""
    best = 0
    stack: list[int] = []
    count = len(heights)
    for i, height in enumerate(heights):
        while stack and height < heights[stack[-1]]:
            top = stack.pop()
            width = i - stack[-1] - 1 if stack else i
            best = max(best, heights[top] * width)
        stack.append(i)
    while stack:
        top = stack.pop()
        width = count - stack[-1] - 1 if stack else count
        best = max(best, heights[top] * width)
    return best


def histogram_area_rmq(heights: Sequence[int]) -> int:
    """Largest rectangle under a histogram, splitting at range minima."""
    if not heights:
        return 0
    table = RangeMinimum(heights)
    best = 0
    pending = [(0, len(heights) - 1)]
    while pending:
        left, right = pending.pop()
        if right < left:
            continue
        lowest = table.query(left, right)
        best = max(best, (right - left + 1) * table.values[lowest])
        pending.append((left, lowest - 1))
        pending.append((lowest + 1, right))
    return best


def _validated(matrix: Iterable[Iterable[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if rows:
        width = len(rows[0])
        for row in rows:
            if len(row) != width:
                raise ValueError("matrix rows must all have the same length")
            for cell in row:
                if cell not in (0, 1):
                    raise ValueError(f"matrix cells must be 0 or 1, got {cell!r}")
    return rows


def _column_heights(rows: list[list[int]]) -> Iterator[list[int]]:
    """Yield, for each row, the run of ones ending at that row in every column."""
    if not rows:
        return
    heights = [0] * len(rows[0])
    for row in rows:
        heights = [h + 1 if cell else 0 for h, cell in zip(heights, row)]
        yield heights


def largest_ones_rectangle_bruteforce(matrix: Iterable[Iterable[int]]) -> int:
    """Area of the largest all-ones rectangle, checking every rectangle."""
    rows = _validated(matrix)
    height = len(rows)
    width = len(rows[0]) if rows else 0
    prefix = [[0] * (width + 1) for _ in range(height + 1)]
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            prefix[r + 1][c + 1] = (
                prefix[r][c + 1] + prefix[r + 1][c] - prefix[r][c] + (cell == 1)
            )

    def ones(r1: int, c1: int, r2: int, c2: int) -> int:
        return (
            prefix[r2 + 1][c2 + 1]
            - prefix[r2 + 1][c1]
            - prefix[r1][c2 + 1]
            + prefix[r1][c1]
        )

    best = 0
    for r1 in range(height):
        for c1 in range(width):
            for r2 in range(r1, height):
                for c2 in range(c1, width):
                    area = (r2 - r1 + 1) * (c2 - c1 + 1)
                    if area > best and ones(r1, c1, r2, c2) == area:
                        best = area
    return best


def largest_ones_rectangle_rmq(matrix: Iterable[Iterable[int]]) -> int:
    """Area of the largest all-ones rectangle, via range-minimum histograms."""
    rows = _validated(matrix)
    return max((histogram_area_rmq(h) for h in _column_heights(rows)), default=0)


def largest_ones_rectangle(matrix: Iterable[Iterable[int]]) -> int:
    """Area of the largest all-ones rectangle, via stack-based histograms."""
    rows = _validated(matrix)
    return max((histogram_area(h) for h in _column_heights(rows)), default=0)