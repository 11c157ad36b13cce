# contestlib

Data structures and tree and graph algorithms for competitive programming,
in plain Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `contestlib.segment_tree` | `SegmentTree`: point update and range fold over any monoid |
| `contestlib.sparse_table` | `SparseTable`: O(1) range queries for idempotent operations (min, max, gcd) |
| `contestlib.union_find` | `UnionFind` and `UnionFindUndo` (with `undo`, `snapshot`, `rollback`) |
| `contestlib.misc` | `PosCompression`, `run_length_encoding`, `BaseConversion` |
| `contestlib.inversion` | `count_inversions` |
| `contestlib.euler_tour` | `EulerTour`: subtree sums, path sums, depth and LCA on a weighted tree |
| `contestlib.link_cut_tree` | `LinkCutTree`: dynamic forest with link, cut, re-rooting and path folds |
| `contestlib.matrix` | `Matrix`: `+`, `-`, multiplication with `@`, fast exponentiation with `pow` |
| `contestlib.scc` | `StronglyConnectedComponents`, `topological_sort`, `NotADagError` |
| `contestlib.doubling` | `DoublingOnTree`: LCA, path length, path weight, max and min edge weight on a path |

Graph and tree nodes are numbered from 1 throughout. Sequence positions
(segment tree, sparse table, matrix rows and columns) are numbered from 0,
and ranges are half-open `[start, stop)`.

## Installation

```
pip install .
```

## Examples

Range sums with a segment tree:

```python
from operator import add
from contestlib.segment_tree import SegmentTree

tree = SegmentTree([5, 3, 7, 9], add, 0)
tree.query(1, 3)      # 10
tree.add(2, 1)
tree.query(0, 4)      # 25
```

Range minimum with a sparse table:

```python
from contestlib.sparse_table import SparseTable

table = SparseTable([4, 2, 8, 1, 6], min)
table.query(0, 3)     # 2
```

Disjoint sets:

```python
from contestlib.union_find import UnionFind, UnionFindUndo

uf = UnionFind(5)
uf.unite(1, 2)
uf.unite(2, 3)
uf.same(1, 3)         # True
uf.size(1)            # 3

undoable = UnionFindUndo(3)
undoable.unite(1, 2)
undoable.undo()
undoable.same(1, 2)   # False
```

Coordinate compression, run-length encoding and base conversion:

```python
from contestlib.misc import BaseConversion, PosCompression, run_length_encoding

ranks = PosCompression([30, 10, 20, 10])
ranks.encode(20)      # 1
ranks.decode(2)       # 30

run_length_encoding("aabccc")   # [('a', 2), ('b', 1), ('c', 3)]

BaseConversion(255).to_string(16)              # 'FF'
BaseConversion.from_string(2, "1010").value    # 10
```

Counting inversions:

```python
from contestlib.inversion import count_inversions

count_inversions([3, 1, 2])   # 2
```

Tree queries on an Euler tour. Node weights are set before `build`; after it
they are changed with `update_node_weight` and `update_edge_weight`:

```python
from contestlib.euler_tour import EulerTour

tour = EulerTour([(1, 2, 0), (1, 3, 0), (2, 4, 0)])
for node, weight in [(1, 1), (2, 2), (3, 3), (4, 4)]:
    tour.set_node_weight(node, weight)
tour.build(1)
tour.subtree_query(2)     # 6
tour.path_query(4, 3)     # 10
tour.lca(4, 3)            # 1
```

A link-cut tree, summing node values along a path by default:

```python
from contestlib.link_cut_tree import LinkCutTree

lct = LinkCutTree()
a = lct.make_node(1)
b = lct.make_node(2)
c = lct.make_node(3)
lct.link(b, a)
lct.link(c, b)
lct.query(a, c)       # 6
lct.cut(c, b)
lct.is_connected(a, c)  # False
```

Matrix powers:

```python
from contestlib.matrix import Matrix

fib = Matrix([[1, 1], [1, 0]])
fib.pow(10)[0][1]     # 55
product = fib @ fib
```

Strongly connected components and topological order (index 0 of the
adjacency list is unused):

```python
from contestlib.scc import StronglyConnectedComponents, topological_sort

scc = StronglyConnectedComponents([[], [2], [1, 3], []])
scc.count()                                   # 2
scc.component_of(1) == scc.component_of(2)    # True

topological_sort([[], [2, 3], [3], []])       # [1, 2, 3]
```

Lowest common ancestor by binary lifting:

```python
from contestlib.doubling import DoublingOnTree

tree = DoublingOnTree(5, 1, [(1, 2), (1, 3), (2, 4), (2, 5)])
tree.lca(4, 5)          # 2
tree.path_length(4, 3)  # 3
```

## Errors

Broken preconditions raise exceptions rather than returning sentinels:

- an out-of-range node or position raises `IndexError`;
- an empty sparse table or range, a value missing from a `PosCompression`,
  a bad base or digit, mismatched matrix shapes, a negative matrix power, or
  linking two nodes of a `LinkCutTree` that are already connected raises
  `ValueError`;
- `topological_sort` raises `NotADagError` (a `ValueError`) on a cycle, with
  the nodes sorted so far in its `order` attribute;
- querying an `EulerTour` before `build` raises `RuntimeError`.

A few lookups that may fairly have no answer return `None`:
`LinkCutTree.kth_to_root`, `LinkCutTree.kth_between` and `LinkCutTree.lca`.

## What it does not do

This is a library only. It has no command-line program and reads no problem
input; parsing input and printing answers is left to the caller.

## Running the tests

```
pip install .[test]
pytest
```