"""Maximum bipartite matching by augmenting paths, with a case reader and generator."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Iterator, Sequence


def _augment(
    adjacency: Sequence[Sequence[int]],
    owner: list[int],
    visited: list[int],
    root: int,
    stamp: int,
) -> bool:
    """Look for an augmenting path from ``root`` and apply it if found."""
    visited[root] = stamp
    stack: list[tuple[int, Iterator[int], int | None]] = [
        (root, iter(adjacency[root]), None)
    ]
    while stack:
        _, neighbours, _ = stack[-1]
        for right in neighbours:
            current = owner[right]
            if current == -1:
                target: int | None = right
                while stack:
                    left, _, via = stack.pop()
                    owner[target] = left
                    target = via
                return True
            if visited[current] != stamp:
                visited[current] = stamp
                stack.append((current, iter(adjacency[current]), right))
                break
        else:
            stack.pop()
    return False


def max_matching(adjacency: Sequence[Sequence[int]]) -> int:
    """Size of a maximum matching.

    ``adjacency[u]`` lists the right-side vertices that left vertex ``u`` may
    be matched with. Both sides are numbered ``0 .. len(adjacency) - 1``.
    """
    count = len(adjacency)
    for u, neighbours in enumerate(adjacency):
        for v in neighbours:
            if not 0 <= v < count:
                raise ValueError(f"edge {u} -> {v} points outside 0..{count - 1}")
    owner = [-1] * count
    visited = [0] * count
    matched = 0
    for stamp, root in enumerate(range(count), start=1):
        if _augment(adjacency, owner, visited, root, stamp):
            matched += 1
    return matched


def parse_cases(text: str) -> list[list[list[int]]]:
    """Read ``T`` cases of ``n m`` followed by ``m`` edges ``u v``."""
    tokens = iter(text.split())

    def number() -> int:
        try:
            return int(next(tokens))
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    cases = []
    for _ in range(number()):
        vertices, edges = number(), number()
        if vertices < 0 or edges < 0:
            raise ValueError("vertex and edge counts must be non-negative")
        adjacency: list[list[int]] = [[] for _ in range(vertices)]
        for _ in range(edges):
            u, v = number(), number()
            if not (0 <= u < vertices and 0 <= v < vertices):
                raise ValueError(f"edge {u} {v} is outside 0..{vertices - 1}")
            adjacency[u].append(v)
        cases.append(adjacency)
    return cases


def generate_cases(count: int, rng: random.Random | None = None) -> str:
    """Produce ``count`` random cases in the format read by :func:`parse_cases`."""
    rng = rng or random.Random()
    lines = [str(count)]
    for _ in range(count):
        vertices = rng.randint(2, 100)
        edges = rng.randint(1, vertices * (vertices - 1))
        pairs = rng.sample(range(vertices * vertices), edges)
        lines.append(f"{vertices} {edges}")
        lines.extend(f"{p // vertices} {p % vertices}" for p in pairs)
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Solve cases from standard input, or print random cases with --generate."""
    parser = argparse.ArgumentParser(description="Maximum bipartite matching.")
    parser.add_argument(
        "--generate",
        type=int,
        metavar="COUNT",
        help="print COUNT random cases instead of solving",
    )
    args = parser.parse_args(argv)

    if args.generate is not None:
        sys.stdout.write(generate_cases(args.generate))
        return 0

    started = time.perf_counter()
    try:
        cases = parse_cases(sys.stdin.read())
    except ValueError as error:
        print(f"invalid input: {error}", file=sys.stderr)
        return 1
    for number, adjacency in enumerate(cases, start=1):
        print(f"Case #{number}: {max_matching(adjacency)}")
    elapsed = (time.perf_counter() - started) * 1000
    print(f"Elapsed time {elapsed:.3f} milliseconds.", file=sys.stderr)
    return 0