# algocraft

Classic algorithms and data structures in plain Python, with no
third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algocraft.astar` | `AStar`: A* path search on a grid with walls and diagonal moves |
| `algocraft.bellman_ford` | `BellmanFord`: single-source shortest paths with negative-cycle detection |
| `algocraft.edmonds_karp` | `EdmondsKarp`: maximum flow along breadth-first augmenting paths |
| `algocraft.scc` | `strongly_connected_components`: components of a directed graph |
| `algocraft.lca` | `LCA`: lowest common ancestor in a tree by binary lifting |
| `algocraft.btree` | `BTree`, `SearchResult`: a file-backed B-tree of 32-bit integer keys |
| `algocraft.fib_heap` | `FibHeap`, `FibNode`: a Fibonacci heap |
| `algocraft.huffman` | `HuffTree`: Huffman coding built from the byte frequencies of a sample |
| `algocraft.kmeans` | `KMeans`, `InitMode`: k-means clustering in memory or from a binary file |
| `algocraft.hash_multi` | `MultiHash`, `multi_hash_init`: hashing by multiplication |
| `algocraft.md5` | `MD5`: the MD5 message digest, fed incrementally |
| `algocraft.md5_cli` | `digest_string`, `digest_file`, `main`: the `algocraft-md5` command |
| `algocraft.lcg` | `LCG`: a linear congruential generator of 32-bit numbers |
| `algocraft.prime_decompose` | `is_prime`, `next_prime`, `decompose`, `main`: prime factorisation of 64-bit numbers |
| `algocraft.sorting` | `quicksort`, `selection_sort`, `shuffle`: in-place on mutable sequences |
| `algocraft.skiplist` | `SkipList`: an ordered key-value skip list |
| `algocraft.stack` | `Stack`, `StackEmptyError`: a stack with a fixed capacity |

## Installation

```
pip install algocraft
```

To run the test suite:

```
pip install "algocraft[test]"
pytest
```

## Examples

Graphs are plain mappings of a vertex to its neighbours and weights:

```python
from algocraft.bellman_ford import BellmanFord
from algocraft.edmonds_karp import EdmondsKarp
from algocraft.scc import strongly_connected_components

graph = {"a": {"b": 4, "c": 1}, "c": {"b": 2}, "b": {}}
bf = BellmanFord(graph)
previous = bf.run("a")   # {'a': None, 'b': 'c', 'c': 'a'}
bf.distances["b"]        # 3
bf.has_negative_cycle    # False

EdmondsKarp({"s": {"t": 5}}).run("s", "t")   # 5

strongly_connected_components({1: [2], 2: [1], 3: [1]})   # [[3], [1, 2]]
```

Path search on a grid, where cells equal to `AStar.WALL` (255) are blocked.
`run` returns the path from the goal back to the start, `[]` when the goal
cannot be reached, and `None` when the start is a wall:

```python
from algocraft.astar import AStar

grid = [[0, 0, 0], [0, 255, 0], [0, 0, 0]]
AStar(grid).run(0, 0, 2, 2)
```

Lowest common ancestor in a tree rooted at node 0:

```python
from algocraft.lca import LCA

tree = LCA([(0, 1), (1, 2), (2, 3), (1, 4)])
tree.query(3, 4)   # 1
tree.query(3, 2)   # 2
```

MD5 digests, in one go or fed piece by piece:

```python
from algocraft.md5 import MD5

MD5(b"abc").hexdigest()   # '900150983cd24fb0d6963f7d28e17f72'

digest = MD5()
digest.update(b"ab")
digest.update(b"c")
digest.hexdigest()        # same as above
```

Huffman coding; `encode` returns the packed bits and their count:

```python
from algocraft.huffman import HuffTree

tree = HuffTree("abracadabra")
packed, bits = tree.encode("abracadabra")
tree.decode(packed, bits)   # b'abracadabra'
```

Clustering points:

```python
from algocraft.kmeans import InitMode, KMeans

km = KMeans(dim_num=1, cluster_num=2)
km.init_mode = InitMode.UNIFORM
km.cluster([[0.0], [0.1], [9.9], [10.0]])   # [0, 0, 1, 1]
```

A bounded stack; pushing onto a full stack raises `OverflowError`, and
`top` of an empty one raises `StackEmptyError`:

```python
from algocraft.stack import Stack

stack = Stack(2)
stack.push(1)
stack.push(2)
stack.top()       # 2
stack.pop()       # 2
len(stack)        # 1
```

Sorting a range of a list in place (bounds are inclusive):

```python
from algocraft.sorting import quicksort

items = [5, 3, 9, 1, 7]
quicksort(items, 0, len(items) - 1)
items             # [1, 3, 5, 7, 9]
```

A B-tree kept in a file, closed automatically:

```python
from algocraft.btree import BTree

with BTree("numbers.btree") as tree:
    for key in range(100):
        tree.insert(key)
    tree.search(42).found   # True
    tree.delete(42)
```

## Command-line tools

`algocraft-md5` prints MD5 digests:

```
algocraft-md5                 # digest of standard input
algocraft-md5 FILE ...        # digest of each file
algocraft-md5 -sSTRING        # digest of a string
algocraft-md5 -x              # digests of a fixed set of strings, then of the file "foo"
algocraft-md5 -t              # time trial over ten million bytes
```

`algocraft-prime-decompose` takes no arguments; it factors 2^p - 1 for p
from 1 to 63 and prints one line for each:

```
algocraft-prime-decompose
```

## Limits

- `BTree` stores only 32-bit integer keys, no attached values. Blocks of
  merged nodes are marked free but never reused, so the file only grows.
- `FibHeap` has no delete operation other than `extract_min`.
- `SkipList.insert` leaves the value of an existing key unchanged.