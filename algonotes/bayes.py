"""Telling a uniform shuffle from a biased one by likelihood.

The biased shuffle swaps each position with a uniformly chosen position of
the whole array, instead of one at or after it. A permutation is judged
``BAD`` when it is more likely under the biased shuffle than under the
uniform one, using the per-position marginal probabilities.
"""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Sequence

import numpy as np

from algonotes.fenwick import count_inversions


def shuffle_uniform(n: int, rng: random.Random | None = None) -> list[int]:
    """Shuffle 1..n uniformly (swap position i with one of i..n-1)."""
    rng = rng or random.Random()
    values = list(range(1, n + 1))
    for i in range(n):
        j = rng.randint(i, n - 1)
        values[i], values[j] = values[j], values[i]
    return values


def shuffle_biased(n: int, rng: random.Random | None = None) -> list[int]:
    """Shuffle 1..n with the biased rule (swap position i with any position)."""
    rng = rng or random.Random()
    values = list(range(1, n + 1))
    for i in range(n):
        j = rng.randint(0, n - 1)
        values[i], values[j] = values[j], values[i]
    return values


def inversions(values: Sequence[int]) -> int:
    """Number of pairs i < j with values[i] > values[j]."""
    return count_inversions(values)


def transition_matrix(n: int) -> np.ndarray:
    """Return P where P[i, j] is the chance that the element at i ends at j.

    The probabilities are those of the biased shuffle on ``n`` positions.
    """
    if n < 1:
        raise ValueError("n must be positive")
    move = 1.0 / n
    stay = 1.0 - move
    matrix = np.eye(n, dtype=float)
    for k in range(n):
        column = matrix[:, k].copy()
        row_sums = matrix.sum(axis=1)
        matrix = matrix * stay + np.outer(column, np.full(n, move))
        matrix[:, k] = row_sums * move
    return matrix


def classify(permutation: Sequence[int], matrix: np.ndarray) -> str:
    """Return ``"BAD"`` if the biased shuffle explains the permutation better, else ``"GOOD"``.

    ``permutation`` holds the values 0..n-1; ``matrix`` is ``transition_matrix(n)``.
    """
    size = len(permutation)
    if matrix.shape != (size, size):
        raise ValueError("matrix size does not match the permutation length")
    if size == 0:
        raise ValueError("permutation must not be empty")
    log_terms = []
    for position, value in enumerate(permutation):
        if not 0 <= value < size:
            raise ValueError(f"value {value} is outside 0..{size - 1}")
        probability = float(matrix[value, position])
        log_terms.append(math.log(probability) if probability > 0 else -math.inf)
    log_biased = -math.inf if -math.inf in log_terms else math.fsum(log_terms)
    log_uniform = math.fsum([math.log(1.0 / size)] * size)
    return "BAD" if log_biased > log_uniform else "GOOD"


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``T`` permutations from standard input and classify each one."""
    tokens = iter(sys.stdin.read().split())
    matrices: dict[int, np.ndarray] = {}
    try:
        count = int(next(tokens))
        for number in range(1, count + 1):
            size = int(next(tokens))
            permutation = [int(next(tokens)) for _ in range(size)]
            if size not in matrices:
                matrices[size] = transition_matrix(size)
            print(f"Case #{number}: {classify(permutation, matrices[size])}")
    except (StopIteration, ValueError) as error:
        print(f"invalid input: {error or 'unexpected end of input'}", file=sys.stderr)
        return 1
    return 0