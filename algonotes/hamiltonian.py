"""Fewest runs after applying one column permutation to every block of a string.

The string is cut into blocks of ``k`` characters. The same permutation of
the ``k`` positions is applied to every block, and the goal is to minimise
the number of runs of equal characters in the result. This is a shortest
Hamiltonian cycle over the ``k`` positions, solved with a bitmask DP.
"""

from __future__ import annotations

import math
import sys
from collections.abc import Iterator, Sequence
from functools import lru_cache


def _validate(k: int, text: str) -> None:
    if k <= 0:
        raise ValueError("block size k must be positive")
    if not text or len(text) % k:
        raise ValueError("text length must be a positive multiple of k")


def _bits(mask: int) -> Iterator[int]:
    index = 0
    while mask:
        if mask & 1:
            yield index
        mask >>= 1
        index += 1


def block_costs(k: int, text: str) -> tuple[list[list[int]], list[list[int]]]:
    """Return the (inner, across) cost matrices of the blocks of ``text``.

    ``inner[i][j]`` counts blocks whose characters at positions ``i`` and
    ``j`` differ. ``across[i][j]`` counts consecutive block pairs where
    position ``i`` of a block differs from position ``j`` of the next block.
    """
    _validate(k, text)
    blocks = [text[start:start + k] for start in range(0, len(text), k)]
    pairs = list(zip(blocks, blocks[1:]))
    inner = [
        [sum(block[i] != block[j] for block in blocks) for j in range(k)]
        for i in range(k)
    ]
    across = [
        [sum(current[i] != following[j] for current, following in pairs) for j in range(k)]
        for i in range(k)
    ]
    return inner, across


def _cycle_from(start: int, k: int, inner: list[list[int]], across: list[list[int]]) -> int:
    @lru_cache(maxsize=None)
    def cost(mask: int, current: int) -> int:
        if mask == 1 << current:
            return across[current][start]
        rest = mask & ~(1 << current)
        return min(inner[current][j] + cost(rest, j) for j in _bits(rest))

    return cost((1 << k) - 1, start)


def min_segments(k: int, text: str) -> int:
    """Fewest runs reachable, computed with a memoised recursion."""
    inner, across = block_costs(k, text)
    return min(1 + _cycle_from(start, k, inner, across) for start in range(k))


def min_segments_iterative(k: int, text: str) -> int:
    """Fewest runs reachable, computed bottom-up over subsets."""
    inner, across = block_costs(k, text)
    full = (1 << k) - 1
    best = math.inf
    for start in range(k):
        table = [[math.inf] * k for _ in range(1 << k)]
        for i in range(k):
            table[1 << i][i] = across[i][start]
        for mask in range(1, 1 << k):
            if mask & (mask - 1) == 0:
                continue
            for current in _bits(mask):
                rest = mask ^ (1 << current)
                table[mask][current] = min(
                    inner[current][j] + table[rest][j] for j in _bits(rest)
                )
        best = min(best, 1 + table[full][start])
    return int(best)


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``T`` cases of ``k`` and a string from standard input and solve them."""
    tokens = sys.stdin.read().split()
    if not tokens:
        print("invalid input: missing case count", file=sys.stderr)
        return 1
    try:
        count = int(tokens[0])
        cases = [(int(tokens[1 + 2 * i]), tokens[2 + 2 * i]) for i in range(count)]
    except (ValueError, IndexError):
        print("invalid input: malformed cases", file=sys.stderr)
        return 1
    for number, (k, text) in enumerate(cases, start=1):
        try:
            answer = min_segments(k, text)
        except ValueError as error:
            print(f"invalid input: {error}", file=sys.stderr)
            return 1
        print(f"Case #{number}: {answer}")
    return 0