# algonotes

A compact library of classic algorithms and data structures, plus a few small
command-line tools built on top of them. The only runtime dependency is numpy,
used by `algonotes.bayes`.

## Installation

```
pip install algonotes
```

To run the test suite:

```
pip install "algonotes[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algonotes.searching` | `last_at_most`, `first_at_least`: binary searches over a sorted, non-empty sequence |
| `algonotes.fenwick` | `FenwickTree` (point `update`, `prefix_sum`, range `query`), `count_inversions` |
| `algonotes.heap` | `MinHeap`, a binary min-heap with `push`, `pop` and `len()` |
| `algonotes.geometry` | `Point`, `Line`, `Circle`, `dot`, `distance`, `perpendicular`, `intersection`, `projection`, `line_distance`, `angle`, `to_degrees`, `closest_point_on_segment`, `segment_distance` |
| `algonotes.interval_tree` | `IntervalTree` for stabbing queries over closed integer segments |
| `algonotes.sequences` | `max_subarray_sum` (Kadane, the empty run counts as 0), `stock_span` |
| `algonotes.counting` | `grid_paths` with forbidden cells, `staircase_ways` with steps of 1, 2 or 3 |
| `algonotes.rectangles` | `RangeMinimum` sparse table, `histogram_area`, `histogram_area_rmq`, and three ways to find the largest all-ones rectangle in a 0/1 matrix |
| `algonotes.matching` | `max_matching` for bipartite graphs, `parse_cases`, `generate_cases` |
| `algonotes.hamiltonian` | `block_costs`, `min_segments`, `min_segments_iterative`: bitmask DP over one permutation applied to every block of a string |
| `algonotes.bayes` | `shuffle_uniform`, `shuffle_biased`, `inversions`, `transition_matrix`, `classify` |
| `algonotes.columns` | `check_columns` and `ColumnError`: every line must hold the expected number of `|` separators |
| `algonotes.log_stats` | `parse_line`, `Stats`, `LogReport`: per-client and per-operation latency totals from JSON log lines |
| `algonotes.class_index` | `index_classes`: offsets of class and struct definitions in C++ source text |
| `algonotes.deck` | `Suit` and a simple `Deck` of integer cards |

## Examples

```python
from algonotes.fenwick import FenwickTree, count_inversions
from algonotes.heap import MinHeap
from algonotes.sequences import max_subarray_sum, stock_span
from algonotes.counting import staircase_ways

tree = FenwickTree(6)
for i, value in enumerate([1, 3, 4, 5, 10, 2]):
    tree.update(i, value)
tree.query(2, 5)            # sum of positions 2..5 -> 21

count_inversions([3, 1, 2]) # -> 2

heap = MinHeap([6, 7, 3, 10, 11, 4, 2, 1, 3])
[heap.pop() for _ in range(len(heap))]  # -> [1, 2, 3, 3, 4, 6, 7, 10, 11]

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # -> 6
stock_span([100, 80, 60, 70, 60, 75, 85])          # -> [1, 1, 1, 2, 1, 4, 6]
staircase_ways(3)                                  # -> 4
```

```python
from algonotes.interval_tree import IntervalTree

tree = IntervalTree()
for segment in [(5, 6), (10, 18), (8, 13), (20, 29)]:
    tree.insert(segment)
tree.intersect(12)  # -> [(10, 18), (8, 13)]
```

```python
from algonotes.matching import max_matching

max_matching([[0, 1], [0], [2]])  # -> 3
```

```python
from algonotes.columns import check_columns, ColumnError

try:
    check_columns(["a|b|c", "d|e"], 2)
except ColumnError as error:
    print(error)  # Error on line 2, it contains 1 separators
```

## Command-line tools

Installing the package provides these commands:

- `check-columns FILE COUNT` checks that every line of `FILE` contains exactly
  `COUNT` pipe separators, prints the first line that does not, and exits
  with status 1 in that case.
- `bipartite-matching` reads test cases from standard input (a count, then for
  each case `n m` and `m` edges `u v`) and prints `Case #i: <size>` with the
  size of a maximum matching. `bipartite-matching --generate COUNT` prints
  `COUNT` random cases in the same format instead.
- `hamiltonian-segments` reads test cases from standard input (a count, then
  for each case a block size `k` and a string) and prints, for each case, the
  least number of runs of equal characters reachable by applying one
  permutation to every block of `k` characters.
- `shuffle-classify` reads test cases from standard input (a count, then for
  each case `n` and a permutation of `0..n-1`) and labels each one `GOOD`
  (uniform shuffle) or `BAD` (biased shuffle).
- `log-stats [PATH]` summarises the JSON log lines of `PATH` (default
  `logs.txt`) by client and by operation: count, total latency, operations
  used and average latency.
- `index-classes FILE...` lists the class and struct definitions found in each
  file together with their character offsets.

## Limits

- `log-stats` only reads the `clientName`, `operationName` and `latency`
  fields of each record; it keeps nothing between runs.
- `index-classes` works with a regular expression, not a C++ parser, so
  definitions produced by macros or spread in unusual ways may be missed.
- `algonotes.deck` only stores and removes integer cards; it does not shuffle
  or deal.