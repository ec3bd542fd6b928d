# contestlib

A library of algorithms and data structures for competitive programming,
in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `contestlib.segment_tree` | `SegmentTree` for any monoid (sum, min, max, xor, ...) with point updates and `[a, b)` range folds |
| `contestlib.sparse_table` | `SparseTable` for O(1) idempotent range queries (min, max, gcd, ...) |
| `contestlib.search` | `find_min_greater_eq`, `find_min_greater`, `find_max_less_eq`, `find_max_less` on sorted sequences (they return an index or `None`); `RangeFrequency` |
| `contestlib.dp` | `longest_increasing_subsequence` |
| `contestlib.ext_int` | `ExtInt`, a 64-bit integer whose extreme values act as saturating infinities |
| `contestlib.cum_sum` | `CumSum` (prefix sums), `CumSum2D` (rectangle sums and sums along horizontal, vertical and diagonal lines) |
| `contestlib.misc` | `PosCompression` (coordinate compression), `run_length_encoding` |
| `contestlib.modint` | `ModInt`, integers modulo a chosen modulus (998244353 by default) |
| `contestlib.matrix` | `Matrix` with `@` multiplication and fast exponentiation; `geometric_sum` |
| `contestlib.reversible_list` | `ReversibleList`, a randomized balanced tree with range fold, lazy range update and range reversal; `unfold_parentheses` |
| `contestlib.shortest_path` | BFS, Dijkstra, Bellman–Ford with negative-cycle detection, Warshall–Floyd, path reconstruction, topological sort, longest path in a DAG |
| `contestlib.euler_tour` | `EulerTour` for subtree sums, path sums, depth, LCA and path length on a weighted tree |
| `contestlib.scc` | `StronglyConnectedComponents` (Kosaraju), with the condensation graph in topological order |

Graph functions use 1-indexed nodes: an adjacency list has an unused
entry at index 0. Weighted lists hold `(to, weight)` pairs; unweighted
lists hold plain node numbers. Unreachable distances are reported as
`2**63 - 1`.

## Examples

Range sums with point updates:

```python
import operator
from contestlib.segment_tree import SegmentTree

tree = SegmentTree([1, 2, 3, 4, 5], operator.add, 0)
tree.add(2, 10)
assert tree.query(0, 5) == 25
```

Shortest paths:

```python
from contestlib.shortest_path import shortest_path_dijkstra, find_shortest_path

adj = [[], [(2, 1), (3, 4)], [(3, 1)], []]
dist = shortest_path_dijkstra(adj, 1)
assert dist[3] == 2
assert find_shortest_path(1, 3, adj, dist) == [1, 2, 3]
```

Tree queries on an Euler tour:

```python
from contestlib.euler_tour import EulerTour

tour = EulerTour([(1, 2, 3), (1, 3, 5)])
tour.build(1)
assert tour.lca(2, 3) == 1
assert tour.path_query(2, 3) == 8
```

Matrix powers:

```python
from contestlib.matrix import Matrix

fib = Matrix([[1, 1], [1, 0]]).pow(10)
assert fib[0][1] == 55
```

Saturating arithmetic:

```python
from contestlib.ext_int import ExtInt

big = ExtInt(2**62) * 4
assert big.is_inf()
```

Reversing parenthesised groups:

```python
from contestlib.reversible_list import unfold_parentheses

assert unfold_parentheses("a(bc)d") == "aCBd"
```

Invalid arguments raise exceptions: out-of-range indices raise
`IndexError`; empty inputs and undefined operations (such as `0 ** 0` on a
`ModInt`, or `INF + NINF` on an `ExtInt`) raise `ValueError`; division by
zero raises `ZeroDivisionError`; querying an `EulerTour` before `build()`
raises `RuntimeError`.

## What this package does not include

- No union-find structure (plain or with undo), and so no cycle detection
  in graphs, bipartiteness checks or offline dynamic connectivity.
- No binary-lifting tree structure and no Prüfer sequence encoding,
  decoding or labelled-tree enumeration.
- No command-line tool: everything is used as a library from Python.