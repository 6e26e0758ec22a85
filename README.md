# ptitalgo

A small collection of classic algorithm exercises, written as plain Python
functions and classes that you can import, together with command-line
programs that run each one. It has no dependencies beyond the standard
library.

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
| `ptitalgo.backtrack` | Generators `binary_strings(n)`, `combinations(n, k)`, `permutations(n)`, `n_queens(n)`, `increasing_subsets(n)`, `partitions(n)` |
| `ptitalgo.matrix` | `identity(n)`, `mat_mul(a, b, mod)` and `mat_pow(a, t, mod)`; `mod` defaults to `MOD` (10**9 + 7) |
| `ptitalgo.dsu` | `DisjointSet` over `1..n` (union by size, path compression) and `has_cycle(n, edges)` for undirected graphs |
| `ptitalgo.traversal` | `Node`, `build_from_inorder_preorder`, `build_from_inorder_levelorder` and `post_order` |
| `ptitalgo.sorting` | `selection_sort`, `insertion_sort`, `bubble_sort`, `merge_sort_count`, `lower_bound`, `upper_bound` |
| `ptitalgo.bst` | `TreeNode`, `BinarySearchTree` and `run_commands` |
| `ptitalgo.locphat` | `loc_phat_numbers(n)`, the first *n* even-length palindromes made only of the digits 6 and 8 |

Negative sizes and exponents raise `ValueError`, as do mismatched matrix
shapes, elements outside a disjoint set's range, and traversals that do not
describe a binary tree with distinct values.

## Using the library

```python
from ptitalgo.backtrack import n_queens, partitions
from ptitalgo.dsu import DisjointSet, has_cycle
from ptitalgo.matrix import mat_pow
from ptitalgo.sorting import merge_sort_count, lower_bound, upper_bound

boards = list(n_queens(4))         # each board is a tuple of 0/1 rows
ways = list(partitions(5))         # (1, 1, 1, 1, 1), (1, 1, 1, 2), ... (5,)

fib = mat_pow([[1, 1], [1, 0]], 16)

ds = DisjointSet(5)
ds.union(1, 2)                     # True; False when already joined
ds.find(2)
has_cycle(3, [(1, 2), (2, 3), (3, 1)])   # True

ordered, inversions = merge_sort_count([3, 1, 2])   # [1, 2, 3], 2
lower_bound([1, 2, 3, 3, 4], 3)    # 2
upper_bound([1, 2, 3, 3, 4], 3)    # 4
```

The sorting functions take any iterable and return a new sorted list; the
input is left unchanged.

Trees can be rebuilt from two traversals:

```python
from ptitalgo.traversal import build_from_inorder_preorder, post_order

root = build_from_inorder_preorder([4, 2, 5, 1, 3], [1, 2, 4, 5, 3])
post_order(root)                   # [4, 5, 2, 3, 1]
```

A binary search tree can be built up and inspected:

```python
from ptitalgo.bst import BinarySearchTree, run_commands

tree = BinarySearchTree()
for value in (50, 30, 70, 20, 40):
    tree.insert(value)             # duplicates are ignored
tree.delete(30)                    # KeyError if the value is absent
tree.inorder()                     # [20, 40, 50, 70]
tree.attach_child(70, 90, "R")     # hang 90 to the right of the node 70

list(run_commands(["1 8", "1 3", "4"]))
# ['insert: 8', 'insert: 3', 'in: 3 8']
```

## Command-line programs

```
ptitalgo-backtrack             # prints demonstration enumerations
ptitalgo-matrix [POWER]        # prints the Fibonacci matrix to POWER (default 16)
ptitalgo-dsu                   # stdin: T, then per case "n m" and m edges; YES if a cycle exists
ptitalgo-traversal             # stdin: T, then per case n, in-order, pre-order; prints post-order
ptitalgo-traversal --level-order   # as above, with level-order instead of pre-order
ptitalgo-sorting [--target X]  # stdin: n and n integers; prints each sort, inversion count,
                               # and the lower and upper bound of X (default 3)
ptitalgo-bst                   # stdin lines: "1 x" insert, "2 x" delete, "3" pre, "4" in, "5" post
ptitalgo-locphat               # stdin: N; prints the first N lucky 6/8 palindromes
```

For example:

```
echo 5 | ptitalgo-locphat
printf '1 8\n1 3\n1 10\n4\n' | ptitalgo-bst
```

`ptitalgo-bst` prints `Not Found` when asked to delete a value that is not in
the tree.