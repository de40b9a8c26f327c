# algodrills

Classic algorithms and data structures written as small, plain Python
functions, with no dependencies outside the standard library.

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

| Module                 | Contents                                                                              |
|------------------------|---------------------------------------------------------------------------------------|
| `algodrills.unionfind` | `UnionFind` (path compression and union by rank), `parity_components`                 |
| `algodrills.trie`      | `Trie` with `insert`, `search` and `starts_with`                                      |
| `algodrills.graphs`    | `bfs_from`, `bfs_order`, `bfs_levels`, `dfs_components`, `dfs_parents`, `path_to_root`, `weighted_bfs_order`, `shortest_path` (Dijkstra) |
| `algodrills.trees`     | `Node`, `level_order`, `preorder`, `invert_tree`                                      |
| `algodrills.dp`        | `can_sum_top_down`, `can_sum_bottom_up`, `fibonacci`, `grid_traveler`, `climb_stairs`, `climb_stairs_table`, `rob`, `rob_circular`, `min_cost_climbing_stairs`, `max_ribbon_pieces`, `max_profit` |
| `algodrills.walls`     | `Wall`, `run_through_walls`                                                           |

Bad input is reported with exceptions: out-of-range elements and nodes raise
`IndexError`, negative sizes, non-positive step or piece lengths and the like
raise `ValueError`.

## Examples

Disjoint sets:

```python
from algodrills.unionfind import UnionFind

sets = UnionFind(5)
sets.union(0, 1)
sets.union(2, 3)
sets.union(4, 3)
sets.set_count()        # 2
sets.same_set(0, 3)     # False
sets.same_set(4, 3)     # True
sets.set_size(4)        # 3
```

A prefix tree:

```python
from algodrills.trie import Trie

trie = Trie()
trie.insert("CAT")
trie.search("CAT")        # True
trie.search("CA")         # False
trie.starts_with("CA")    # True
"CAT" in trie             # True
```

Graphs, given as adjacency lists:

```python
from algodrills.graphs import bfs_levels, shortest_path

bfs_levels([[1, 2], [0, 3], [0], [1]])          # [[0], [1, 2], [3]]

# vertices numbered from 1; edges are (u, v, weight)
shortest_path(3, [(1, 2, 1), (2, 3, 1), (1, 3, 5)])   # [1, 2, 3]
shortest_path(3, [(1, 2, 1)])                         # None
```

Binary trees:

```python
from algodrills.trees import Node, invert_tree, preorder

root = Node(1, Node(2), Node(3))
preorder(root)                # [1, 2, 3]
preorder(invert_tree(root))   # [1, 3, 2]
```

Dynamic programming:

```python
from algodrills.dp import climb_stairs, fibonacci, grid_traveler, max_ribbon_pieces

climb_stairs(7)                   # 21
fibonacci(30)                     # 832040
grid_traveler(3, 2)               # 3
max_ribbon_pieces(7, [5, 5, 2])   # 2
max_ribbon_pieces(3, [2, 2, 2])   # None
```

Walls on a line, crossed with a limited amount of energy:

```python
from algodrills.walls import run_through_walls

run_through_walls([0.5, 2.5], [1, 1], 10)
```

## What it does not do

The package is a library only. It installs no command and reads nothing from
standard input; call its functions from your own code. It has no
binary-search helpers and no ready-made solutions to individual contest
problems.