"""Counting paths with dynamic programming."""

from collections.abc import Collection


def grid_paths(x: int, y: int, forbidden: Collection[tuple[int, int]] = ()) -> int:
    """Count right/down paths from (0, 0) to (x, y) avoiding forbidden cells."""
    if x < 0 or y < 0:
        raise ValueError("coordinates must be non-negative")
    blocked = set(forbidden)
    ways: dict[tuple[int, int], int] = {}
    for i in range(x + 1):
        for j in range(y + 1):
            if (i, j) in blocked:
                ways[i, j] = 0
            elif i == 0 and j == 0:
                ways[i, j] = 1
            else:
                ways[i, j] = ways.get((i - 1, j), 0) + ways.get((i, j - 1), 0)
    return ways[x, y]


def staircase_ways(n: int) -> int:
    """Count ways to climb ``n`` steps taking 1, 2 or 3 at a time."""
    if n < 0:
        return 0
    last_three = (0, 0, 1)
    for _ in range(n):
        a, b, c = last_three
        last_three = (b, c, a + b + c)
    return last_three[2]