# algokit

A small collection of classic algorithms and data structures in plain Python.
It has no runtime dependencies and supports Python 3.10 and later.

## Contents

| Module | What it provides |
| --- | --- |
| `algokit.text_search` | `find_match(pattern, text)`: naive substring search. It returns the first index, or `-1` |
| `algokit.fast_power` | `power(a, n)`: exponentiation by repeated squaring. A negative `n` raises `ValueError` |
| `algokit.sorting` | `insertion_sort`, `merge_sort`, `partition`, `binary_search` |
| `algokit.quicksort` | `quicksort(items, less, rng)`: randomised quicksort with a custom ordering |
| `algokit.hashing` | `hash_sequence(values)` and `hash_string(text)`: polynomial rolling hashes that start from a rotated position |
| `algokit.linked_list` | `ListNode` (iterable over the items that follow it) and `demonstrate_linked_list()` |
| `algokit.bst` | `TreeNode`, `insert_tree`, `search_tree`, `in_order`, `describe_tree` |
| `algokit.graph` | `Graph` stored as adjacency lists for up to `MAXV` (100) vertices, `EdgeNode`, `read_graph(stream, directed)` |
| `algokit.mst` | `prim(graph, start)`: Prim's minimum spanning tree, returned as a `SpanningTree` |
| `algokit.union_find` | `UnionFind`: disjoint sets over `1..n` with path compression and union by size |

## Behaviour worth knowing

- `insertion_sort`, `merge_sort` and `quicksort` return new lists and leave their input unchanged. The first two are stable.
- `partition(values, low, high)` returns `(inside, outside)`. `inside` is `values[low..high]`, with both ends included. `outside` holds the elements before `low` followed by those after `high`. Invalid bounds raise `IndexError`.
- `binary_search(data, key, low=0, high=None)` returns the index of `key` in a sorted range. It raises `IndexError` when `key` is not found.
- `quicksort` chooses each pivot with `rng.randint`. Pass a seeded `random.Random` to get reproducible runs.
- `insert_tree(root, x)` returns the root. Equal values go to the right subtree, and every node keeps a `parent` link.
- `Graph.insert_edge(x, y, directed=None, weight=0)` stores an undirected edge in both adjacency lists, but counts it once in `nedges`.
- `prim` returns a `SpanningTree` with `weight`, `edges` as `(parent, vertex)` pairs, and `lines()` for a readable listing.

## Examples

```python
from algokit.text_search import find_match
from algokit.fast_power import power
from algokit.sorting import merge_sort, binary_search
from algokit.union_find import UnionFind

find_match("lo", "hello")           # 3
power(2, 10)                        # 1024
merge_sort([38, 27, 43, 3])         # [3, 27, 38, 43]
binary_search([1, 2, 5, 6, 9], 6)   # 3

uf = UnionFind(10)
uf.union_sets(1, 2)
uf.union_sets(2, 3)
uf.same_component(1, 3)             # True
uf.component_size(1)                # 3
```

Reading a graph from a stream. The input is a vertex count, an edge count and then one vertex pair per edge:

```python
import io
from algokit.graph import read_graph

g = read_graph(io.StringIO("3 2\n1 2\n2 3\n"), directed=False)
print(g.format(), end="")
# 1:  2
# 2:  3 1
# 3:  2
```

Building a weighted graph and finding its minimum spanning tree:

```python
from algokit.graph import Graph
from algokit.mst import prim

g = Graph(directed=False)
g.nvertices = 3
g.insert_edge(1, 2, False, 4)
g.insert_edge(2, 3, False, 1)
g.insert_edge(1, 3, False, 2)
tree = prim(g, 1)
tree.weight                         # 3
tree.edges                          # [(1, 3), (3, 2)]
```

## What it does not do

This is a library only. It has no command-line programs and no interactive prompts. `read_graph` reads vertex pairs without weights, so every edge it creates has weight 0. To build weighted graphs, call `Graph.insert_edge` directly.

## Running the tests

```
pip install -e ".[test]"
pytest
```