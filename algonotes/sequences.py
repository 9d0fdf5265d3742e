"""Linear-time scans over sequences."""

from collections.abc import Iterable, Sequence


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run (Kadane); the empty run counts as 0."""
    best = 0
    current = 0
    for value in values:
        current = current + value if current > 0 else value
        best = max(best, current)
    return best


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, the number of consecutive days up to it with price <= today's."""
    spans: list[int] = []
    stack: list[int] = []
    for day, price in enumerate(prices):
        while stack and prices[stack[-1]] < price:
            stack.pop()
        spans.append(day - stack[-1] if stack else day + 1)
        stack.append(day)
    return spans