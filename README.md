# algokit

A small collection of classic algorithms in plain Python. It uses only the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.dynamic`

- `knapsack(capacity, weights, values)` – the best total value of items that
  fit within `capacity`, each item taken at most once. `weights` and `values`
  must have the same length, otherwise `ValueError` is raised.
- `edit_distance(source, target)` – the fewest insertions, deletions and
  replacements that turn `source` into `target`. Works on any sequences,
  not only strings.
- `longest_common_subsequence(first, second)` – the length of the longest
  subsequence common to both sequences.
- `max_product_subarray(nums)` – the largest product of a contiguous run of
  at least two numbers. Fewer than two numbers raise `ValueError`.
- `max_sum_increasing_subsequence(nums)` – the largest sum of a strictly
  increasing subsequence. The result is never below zero; an empty input
  gives zero.

```python
from algokit.dynamic import (
    edit_distance,
    knapsack,
    longest_common_subsequence,
    max_product_subarray,
    max_sum_increasing_subsequence,
)

knapsack(50, [10, 20, 30], [60, 100, 120])              # 220
edit_distance("sunday", "saturday")                      # 3
longest_common_subsequence("AGGTAB", "GXTXAYB")          # 4
max_product_subarray([1, 2, -3, 0, -4, -5])              # 20
max_sum_increasing_subsequence([1, 101, 2, 3, 100, 4, 5])  # 106
```

### `algokit.graph`

A graph with `n` vertices is a sequence of `n` neighbour lists; the vertices
are the integers `0` to `n - 1`.

- `add_undirected_edge(adj, u, v)` – append `v` to `adj[u]` and `u` to
  `adj[v]`.
- `is_bipartite(adj)` – whether the vertices can be split into two sides
  with no edge inside either side.
- `has_cycle(adj)` – whether the directed graph contains a cycle.
- `topological_sort(adj)` – the vertices ordered so that every edge points
  from an earlier vertex to a later one. The search starts at vertex 0 and
  the result is the reverse of the depth-first finishing order. Cycles are
  not detected; check with `has_cycle` first if the input may have one.

```python
from algokit.graph import add_undirected_edge, is_bipartite, topological_sort

adj = [[], [], [3], [1], [0, 1], [2, 0]]
topological_sort(adj)   # [5, 4, 2, 3, 1, 0]

ring = [[] for _ in range(4)]
for u, v in [(0, 1), (1, 2), (2, 3), (3, 0)]:
    add_undirected_edge(ring, u, v)
is_bipartite(ring)      # True
```

### `algokit.sorting`

Every function takes any iterable and returns a new list; the input is left
unchanged.

- `bubble_sort(items)` – ascending order by repeated adjacent swaps.
- `merge_sort(items)` – ascending order; equal items keep their relative
  order.
- `quick_sort(items)` – ascending order, partitioning around the last
  element of each range.
- `sort_colors(nums)` – the 0s, 1s and 2s of `nums` grouped in that order
  in a single pass. Any other value raises `ValueError`.

```python
from algokit.sorting import merge_sort, sort_colors

merge_sort([12, 11, 13, 5, 6, 7])   # [5, 6, 7, 11, 12, 13]
sort_colors([2, 0, 2, 1, 1, 0])     # [0, 0, 1, 1, 2, 2]
```

## What it does not do

algokit is a library only: it has no command-line program, and it does not
read graphs or data from files. Callers build the lists and call the
functions themselves.