# algokit

A small collection of classic algorithms, written as plain Python functions,
with a command line front end. It has no third-party dependencies.

## What is included

| Module              | Functions and classes                                        |
|---------------------|--------------------------------------------------------------|
| `algokit.graphs`    | `bfs`, `dfs`, `dijkstra`, `prim`, `kruskal`, `WeightedEdge`  |
| `algokit.sorting`   | `merge_sort`, `quick_sort`                                   |
| `algokit.searching` | `binary_search`, `rabin_karp`, `build_lps`, `kmp_search`     |
| `algokit.greedy`    | `fractional_knapsack`, `schedule_jobs`, `Job`, `Schedule`    |
| `algokit.hanoi`     | `hanoi_moves`, `Move`                                        |
| `algokit.cli`       | `main`                                                       |

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Using the library

```python
from algokit.graphs import bfs, dijkstra
from algokit.greedy import fractional_knapsack
from algokit.hanoi import hanoi_moves
from algokit.searching import binary_search, kmp_search, rabin_karp
from algokit.sorting import merge_sort, quick_sort

merge_sort([5, 2, 9, 1])              # [1, 2, 5, 9]
quick_sort([3, 3, 1, 2])              # [1, 2, 3, 3]

binary_search([1, 3, 5, 7], 5)        # 2; None when the key is absent
kmp_search("abababc", "abab")         # [0, 2]
rabin_karp("abababc", "abab")         # [0, 2]

bfs(4, [(1, 2), (1, 3), (3, 4)], 1)   # [1, 2, 3, 4]
dijkstra([[0, 4, 1], [4, 0, 2], [1, 2, 0]], 0)   # [0, 3, 1]

fractional_knapsack(50, [10, 20, 30], [60, 100, 120])   # 240.0

for move in hanoi_moves(2):
    print(move)
# move disc 1 from s to a
# move disc 2 from s to d
# move disc 1 from a to d
```

Notes on the functions:

- `bfs` and `dfs` take a node count, a list of undirected `(u, v)` edges and a
  start node, with nodes numbered from 1, and return the visiting order.
  Neighbours are considered in ascending order; `dfs` uses a stack and marks a
  node visited when it is pushed, so the highest-numbered neighbour is explored
  first.
- `dijkstra` and `prim` take a square adjacency matrix with vertices numbered
  from 0, where 0 means "no edge". `dijkstra` leaves unreachable vertices at
  `graphs.INF` (9999). `prim` grows the tree from vertex 0 and raises
  `ValueError` if the graph is not connected.
- `kruskal` takes a vertex count and edges given as `WeightedEdge` or
  `(u, v, weight)` tuples, vertices numbered from 0, and returns the spanning
  forest in the order edges were taken.
- `prim` and `kruskal` return lists of `WeightedEdge(u, v, weight)`.
- `merge_sort` and `quick_sort` return a new list; `merge_sort` is stable.
- `build_lps` returns the KMP prefix table of a pattern.
- `fractional_knapsack` raises `ValueError` for mismatched lengths, a negative
  capacity or a weight that is not positive.
- `schedule_jobs` takes `Job(id, deadline, profit)` records (or tuples) and
  returns a `Schedule` with `job_ids` in slot order and `total_profit`.
- `hanoi_moves(discs, source="s", target="d", auxiliary="a")` yields `Move`
  records; disc 1 is the smallest.

Out-of-range vertices raise `ValueError`.

## Command line

The `algokit` command runs one algorithm on whitespace-separated input read
from standard input and prints the result:

```
algokit --help
echo "5 3 1 4 2" | algokit quicksort
echo "abababc abab" | algokit kmp
echo "3" | algokit hanoi
```

Commands and the input they read, in order:

| Command     | Input                                                |
|-------------|------------------------------------------------------|
| `bfs`       | node count, edge count, edges `u v`, start node      |
| `dfs`       | node count, edge count, edges `u v`, start node      |
| `dijkstra`  | vertex count `n`, `n*n` matrix, source vertex        |
| `prim`      | vertex count `n`, `n*n` matrix                       |
| `kruskal`   | vertex count, edge count, edges `u v weight`         |
| `mergesort` | count `n`, `n` integers                              |
| `quicksort` | count `n`, `n` integers                              |
| `binsearch` | count `n`, `n` sorted integers, key                  |
| `rabinkarp` | text, pattern                                        |
| `kmp`       | text, pattern                                        |
| `knapsack`  | count `n`, capacity, `n` weights, `n` values         |
| `jobs`      | count `n`, `n` jobs `id deadline profit`             |
| `hanoi`     | number of discs                                      |

The exit status is 0 on success, 2 when the input is malformed or runs out
(or the command line is wrong), and 1 when the algorithm rejects the input,
for example a disconnected graph given to `prim`.

## What it does not do

The command does not prompt for its input: it reads all of standard input at
once, so pipe or redirect the data into it.

## Running the tests

```
pytest
```