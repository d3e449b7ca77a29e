# algokit

A small collection of classic algorithms, written as plain Python functions and classes. It has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is in it

### `algokit.graphs`

- `Graph(vertex_count)`: adjacency lists over the vertices `0 .. vertex_count - 1`. `add_edge(u, v, undirected=True)`, `neighbours(vertex)`, `format_adjacency()` (one line per vertex, `0-->1,4,`), `bfs(source)` and `dfs(source)` (the reachable vertices in visiting order), and `topological_sort()` (Kahn's algorithm; vertices on or behind a cycle are left out). Out-of-range vertices raise `IndexError`.
- `NamedGraph(names)`: the same idea with vertices identified by any hashable name. `add_edge(x, y, undirected=False)`, `neighbours(name)`, `format_adjacency()`. Unknown names raise `KeyError`.
- `WeightedGraph(vertex_count)`: `add_edge(u, v, weight, undirected=True)`, `shortest_distances(source)` (a list, with `math.inf` for unreachable vertices) and `dijkstra(source, destination)`.
- `graph_from_edges(edges, vertex_count)`: builds an undirected `Graph` from `(source, destination)` pairs.

### `algokit.weighted`

- `WeightedEdge(u, v, weight)`: a named tuple.
- `kruskal(vertex_count, edges)`: a minimum spanning forest from `(u, v, weight)` triples, as a list of `WeightedEdge`.
- `prim(matrix)`: a minimum spanning tree of a square adjacency matrix (zero means no edge), grown from vertex 0. Raises `ValueError` if the matrix is not square or the graph is not connected.
- `shortest_route(edges, start, destination)`: for undirected `(u, v, weight)` edges between any hashable nodes, returns `(distance, route)`. Raises `KeyError` for unknown nodes and `ValueError` if the destination cannot be reached.

### `algokit.searching`

`linear_search`, `binary_search`, `binary_search_recursive`, `exponential_search`, `interpolation_search` and `jump_search`, each called as `f(items, target)`. They return the index of a matching item, or `None` when the target is absent. All but `linear_search` expect the items in ascending order.

### `algokit.sorting`

`bucket_sort`, `heap_sort`, `iterative_heap_sort`, `merge_sort`, `bubble_sort`, `cocktail_sort`, `radix_sort`, `insertion_sort` and `selection_sort`. Each takes any iterable and returns a new ascending list, leaving the input unchanged. `bucket_sort` accepts only numbers in `[0, 1)` and `radix_sort` only non-negative integers; anything else raises `ValueError`.

### `algokit.trees`

`TreeNode(data, left=None, right=None)` with `inorder`, `preorder`, `postorder`, `left_view` and `right_view`, each taking a root (or `None`) and returning a list of values.

### `algokit.backtracking`

- `solve_n_queens(n=4)`: an `n` by `n` board with `1` where a queen stands, or `None`.
- `knights_tour(n=8)`: a board numbered with the move on which each square is reached, starting at the top-left corner, or `None`.
- `solve_maze(maze)`: a path of open cells (`1`) from top-left to bottom-right, moving down or right, as a grid with `1` on the path, or `None`.
- `format_board(board, width=1)`: renders a board one row per line.

### `algokit.dynamic`

- `max_subarray_sum(values)`: Kadane's algorithm; raises `ValueError` on empty input.
- `partition_cost(groups, length, cost)`: the least total cost of splitting positions `0 .. length - 1` into at most `groups` runs, where `cost(i, j)` prices the run `i .. j`; uses divide-and-conquer optimisation.
- `fibonacci_recursive(n)` and `fibonacci(n)`: Fibonacci numbers counted so that `fib(0) == fib(1) == 1`.
- `word_break(words, text)`: every way to split `text` into dictionary words, as space-joined sentences.

### `algokit.misc`

- `arrays_equal(first, second)`: whether two collections hold the same items, ignoring order.
- `nearest_valid_point(x, y, points)`: index of the nearest point sharing `x` or `y` by Manhattan distance, or `None`.
- `find_pair(numbers, target)`: the first `(earlier, later)` pair summing to `target`, or `None`.
- `naive_search(pattern, text)`: every index at which `pattern` occurs, overlaps included.

## Examples

```python
from algokit.graphs import Graph, WeightedGraph
from algokit.searching import binary_search
from algokit.sorting import merge_sort

g = Graph(7)
for u, v in [(0, 1), (1, 2), (2, 3), (3, 5), (5, 6), (4, 5), (0, 4), (3, 4)]:
    g.add_edge(u, v)
print(g.bfs(1))              # [1, 0, 2, 4, 3, 5, 6]

w = WeightedGraph(5)
for u, v, weight in [(0, 1, 1), (1, 2, 1), (0, 2, 4), (0, 3, 7), (3, 2, 2), (3, 4, 3)]:
    w.add_edge(u, v, weight)
print(w.dijkstra(0, 4))      # 7

print(binary_search([2, 3, 4, 10, 40], 10))   # 3
print(binary_search([2, 3, 4, 10, 40], 5))    # None
print(merge_sort([23, 1, 21, -3, 45]))        # [-3, 1, 21, 23, 45]
```

## What it does not do

This is a library only. It has no command-line program and reads no input of its own: build the inputs in Python and call the functions.