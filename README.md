# bintrees

Binary trees built from nodes that know their parent. The package measures,
walks and rotates trees. It also has binary search trees and max binary heaps,
and it can draw a tree as text.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Building trees by hand (`bintrees.node`)

```python
from bintrees.node import Node, lowest_common_ancestor

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
leaf = left.insert_right(54)

leaf.depth()                         # 2
leaf.sibling()                       # None
leaf.uncle() is right                # True
lowest_common_ancestor(leaf, right)  # root
```

A `Node` has the attributes `value`, `parent`, `left` and `right`.
`insert_left` and `insert_right` push an existing child down one level. That
child becomes the child of the new node on the same side.

Other methods on a node:

- `is_leaf()` returns True when the node has no children.
- `is_root()` returns True when the node has no parent.
- `ancestors()` yields the parent, then the grandparent, and so on up to the root.

`lowest_common_ancestor(first, second)` returns the deepest node that is an
ancestor of both nodes, or is one of them. It returns `None` when either
argument is `None` or when the nodes are in different trees.

## Measuring and walking (`bintrees.properties`)

```python
from bintrees import properties

list(properties.preorder(root))    # [98, 12, 54, 402]
list(properties.inorder(root))     # [12, 54, 98, 402]
list(properties.levelorder(root))  # [98, 12, 402, 54]
properties.height(root)            # 2
properties.size(root)              # 4
properties.is_complete(root)       # False
```

The traversals `preorder`, `inorder`, `postorder` and `levelorder` are
generators of values.

- `height` counts the edges on the longest downward path. It returns 0 for
  `None`.
- `size` counts the nodes in the tree.
- `leaves` counts the nodes that have no children.
- `internal_nodes` counts the nodes that have at least one child.
- `balance` returns the height of the left subtree minus the height of the
  right subtree. A missing subtree counts as -1, and `balance(None)` is 0.
- `is_full`, `is_perfect` and `is_complete` return False for `None`.

`rotate_left(tree)` and `rotate_right(tree)` rotate around the given root and
return the new root. They return `None` when the rotation is not possible,
that is when the tree is `None` or the needed child is missing.

## Drawing (`bintrees.printing`)

```python
from bintrees.printing import render, print_tree

text = render(root)   # one line per level, each ending in "\n"
print_tree(root)      # writes the same text to standard output
```

`print_tree(tree, file)` writes to `file` when one is given. Each node is
drawn as its value padded to three digits, for example `(098)`. A line of
dashes above each pair of levels connects a node to its children, with a `.`
over each child. `render(None)` returns an empty string.

## Binary search trees (`bintrees.bst`)

```python
from bintrees.bst import BinarySearchTree, array_to_bst, is_bst, min_node

tree = array_to_bst([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
84 in tree            # True
tree.search(68)       # the node that holds 68, or None
tree.remove(79)       # True; False if the value was not in the tree
is_bst(tree.root)     # True
list(tree)            # values in ascending order
len(tree)             # number of values
```

- `BinarySearchTree.insert(value)` returns the new node. It returns `None`
  when the value is already in the tree, so duplicates are never stored.
- A node with two children is removed by taking the value of its in-order
  successor. The successor's node is removed in its place.
- `min_node(root)` returns the leftmost node of a tree.
- `is_bst(tree)` checks that the values are strictly ordered. It returns False
  for `None`.

## Max binary heaps (`bintrees.heap`)

```python
from bintrees.heap import MaxHeap, array_to_heap, is_heap

heap = array_to_heap([79, 47, 68, 87, 84, 91, 21, 32, 34, 2])
heap.root.value       # 91
is_heap(heap.root)    # True
list(heap)            # values in level order
len(heap)             # number of values
```

`MaxHeap.insert(value)` adds a node at the next free place in level order. It
then sifts the value up by swapping values with the parents, not by moving
nodes. It returns the node that holds the value at the end. A heap keeps
duplicate values. `is_heap(tree)` returns True when the tree is complete and
no child is greater than its parent.

## What the package does not do

- The package is a library only. It has no command-line program.
- Trees live in memory. Nothing is saved to disk or read back.
- There are no self-balancing trees such as AVL trees.
- A heap has no operation to extract its maximum.