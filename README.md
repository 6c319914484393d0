# dskit

A collection of classic data structures and small algorithms, each in its own
module:

| Module | What it holds |
| --- | --- |
| `dskit.avl` | `AVLTree` (with `AVLNode`), a self-balancing binary search tree of distinct, ordered elements |
| `dskit.bst` | `BST` (with `TreeNode`), an unbalanced binary search tree with copy, path and ancestor queries |
| `dskit.graph` | `Graph` and `Edge`, an undirected graph built from an adjacency matrix, and `random_friendship_matrix` |
| `dskit.recommender` | `RecommendationEngine`, a user/movie bipartite graph that scores recommendations, and `load_ratings` |
| `dskit.linear_probing` | `LinearProbingHashTable`, an open-addressing hash set of non-zero integers that doubles past a load-factor threshold, and `HashTableFullError` |
| `dskit.pair_sum` | `find_pair`, which finds two numbers adding up to a target |
| `dskit.circular_list` | `CircularLinkedList`, a singly linked circular list |
| `dskit.round_robin` | `RoundRobinScheduler`, which computes turnaround times under round-robin scheduling |
| `dskit.skiplist` | `SkipList` (with `SkipNode`), a randomised sorted set with multi-level links |

The package needs Python 3.10 or later and has no runtime dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

### AVL tree

```python
from dskit.avl import AVLTree

tree = AVLTree([25, 20, 5, 34, 50, 30, 10])
print(list(tree))          # elements in sorted order
print(tree.levels())       # elements grouped by depth, root first
print(30 in tree, len(tree))
tree.remove(34)
print(tree.count_in_range(15, 40))
print(tree.diameter())     # edges on the longest path between two nodes
print(tree.level_order_display())
```

`insert` and `remove` return `False` instead of raising when the element is
already present or missing.

### Binary search tree

```python
from dskit.bst import BST

tree = BST([20, 10, 30, 5, 12, 22, 33])
print(tree.min(), tree.max(), tree.is_bst())
print(tree.closest_common_ancestor(5, 12).element)   # 10
print([node.element for node in tree.path(12)])      # [20, 10, 12]
clone = tree.copy()
tree.remove(10)
```

`min` and `max` raise `ValueError` on an empty tree; `path` raises `KeyError`
for an element that is not in the tree.

### Graph

```python
from dskit.graph import Graph

graph = Graph([
    [False, True, False],
    [True, False, True],
    [False, True, False],
])
print(graph.vertex_count(), graph.edge_count())
print(graph.path(0, 2), graph.has_cycle())   # [0, 1, 2] False
print(graph.degrees())                       # (vertex, degree), highest first
print(graph.format_adjacency_list())
```

Vertex arguments out of range raise `IndexError`; asking for a path from a
vertex to itself raises `ValueError`.

### Recommendations

```python
from dskit.recommender import RecommendationEngine

engine = RecommendationEngine()
engine.add_rating(1, "A", 5)
engine.add_rating(1, "B", 4)
engine.add_rating(2, "A", 3)
engine.add_rating(2, "C", 2)
print(engine.recommend("A"))   # [('B', 20.0), ('C', 6.0)]
```

A movie's score is the sum, over users who rated the watched movie, of the
product of their two ratings.

### Hashing and pair sums

```python
from dskit.linear_probing import LinearProbingHashTable
from dskit.pair_sum import find_pair

table = LinearProbingHashTable(5, 0.65)
for value in (3, 23, 11, 15, 9):
    table.insert(value)
print(23 in table, table.load_factor())
print(table.display())

print(find_pair([8, 7, 2, 5, 3, 1], 10))   # (8, 2)
```

Inserting or deleting `0` raises `ValueError`. `find_pair` returns `None`
when no pair exists.

### Circular list

```python
from dskit.circular_list import CircularLinkedList

items = CircularLinkedList([4, 8, 15])
items[1] = 16
items.remove(4)
print(list(items), len(items))   # [16, 15] 2
```

### Skip list

```python
import random
from dskit.skiplist import SkipList

skip = SkipList(3, random.Random(0))
for value in (13, 7, 11, 1, 5, 19):
    skip.insert(value)
print(list(skip), 11 in skip)
print(skip.show())
```

The display and `format_*` methods return strings; they do not print.

## Command-line tools

### Round-robin scheduling

```
dskit-round-robin process.txt
```

The input file (default `process.txt`) holds the time slice on its first line
and the processes' execution times, separated by commas or spaces, on its
second. The tool prints the loaded times, the time slice, each process's
turnaround time and the average.

### Movie recommendations

```
dskit-recommend MovieRatings.txt
```

Each line of the ratings file (default `MovieRatings.txt`) is
`user movie rating`, with an integer user and rating and a movie name without
spaces. The tool shows the rating graph, asks for a movie you have watched
(or takes it as a second argument), and lists other movies ordered by score.

## What it does not do

Everything is held in memory: nothing is saved to disk. A `Graph` is fixed
once built from its matrix; it has no methods to add or remove vertices or
edges.