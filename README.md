# combopt

Algorithms for a few classic combinatorial optimisation problems:

- **Graph coloring** of undirected graphs by independent-set heuristics:
  `Isx`, `Isx2` and `IsCov`, built on the shared `ColGraph` class.
- **Maximum clique**: a greedy heuristic and a bounded branch-and-bound
  search.
- **Unate covering matrices**: a sparse 0/1 matrix with column costs,
  row and column dominance reduction, essential-column selection, and
  deletions that can be undone with save/restore.

Graphs are passed as a node count plus an iterable of `(id1, id2)` edges
with node ids from `0` to `node_num - 1`. Colors are numbered from `1`;
`0` means "not colored yet".

Requires Python 3.10 or later. There are no runtime dependencies.

## Graph coloring

`combopt.colgraph.ColGraph` holds a graph and a (possibly partial)
coloring. Self loops are dropped, as are edges whose two ends are both
already colored.

```python
from combopt.colgraph import ColGraph

g = ColGraph(4, [(0, 1), (1, 2), (2, 0), (2, 3)], None)
g.set_color(0, g.new_color())
g.is_colored()   # False
g.verify()       # True: no two adjacent nodes share a color
```

The heuristics each color until at most `limit` nodes remain uncolored
and return `(number_of_colors, color_map)`. They take an optional `seed`
for their random choices.

```python
from combopt.isx import Isx
from combopt.isx2 import Isx2
from combopt.iscov import IsCov

edges = [(0, 1), (1, 2), (2, 0), (2, 3)]

num_colors, color_map = Isx(4, edges, seed=0).coloring(0)
num_colors, color_map = Isx2(4, edges, seed=0).coloring(0)
num_colors, color_map = IsCov(4, edges, seed=0).covering(0)
```

- `Isx` repeatedly extracts a maximal independent set, preferring nodes
  with few remaining candidate neighbours, and gives it a new color.
- `Isx2` collects many distinct maximal independent sets, then colors a
  large pairwise disjoint family of them at once.
- `IsCov` builds each independent set from the lowest-degree candidates.

With a `limit` above zero the result is a partial coloring; nodes still
at `0` are left for the caller.

## Maximum clique

```python
from combopt.maxclique import MclqSolver, max_clique

edges = [(0, 1), (1, 2), (2, 0), (2, 3)]
max_clique(4, edges, "greedy")   # [2, 0, 1]
max_clique(4, edges, "exact")    # a clique of 3 nodes

solver = MclqSolver(4, edges)
solver.greedy()
solver.exact()
```

Any algorithm name other than `"exact"` uses the greedy heuristic. The
exact search stops after a fixed number of steps, so on large graphs it
may return a clique smaller than the true maximum.

## Covering matrices

```python
from combopt.matrix import McMatrix

m = McMatrix(3, 3, [(0, 0), (0, 1), (1, 1), (2, 2)], None)
result = m.reduce(None)
result.deleted_cols    # [0]  (column 0 is dominated by column 1)
result.selected_cols   # [1, 2]
result.reduced         # True
```

`reduce(col_comp)` applies column dominance, essential-column selection
and row dominance once; `reduce_loop(col_comp)` repeats until nothing
changes. `col_comp(col1, col2)` may veto replacing `col1` by `col2`.
Column costs are given with `cost_array`; `cost()` and `verify()` check
a candidate cover.

`save()` marks the current state and `restore()` undoes every row and
column deletion back to the last mark. `copy()` gives an independent
matrix, and `dump(stream)` writes a readable listing.

The building blocks live in `combopt.headlist`: `Cell`, `Head`,
`HeadList` and `check_containment(list1, list2)`, which tells whether a
sorted sequence contains every element of another.

## What the package does not do

- It has no single entry point that picks a coloring algorithm by name,
  and no heuristic that finishes a partial coloring: `Isx`, `Isx2` and
  `IsCov` with a non-zero `limit` leave the remaining nodes uncolored.
- It does not read or write graph files; graphs are given as edge lists.
- It has no exact covering solver and does not split a matrix into
  independent blocks; `McMatrix` provides the reductions only.
- There is no command-line program.

## Running the tests

```
pip install combopt[test]
pytest
```