# bintrees_kit

A small library of linked binary trees of integers. Every `Node` holds a
`value` and links to its `parent`, `left` and `right` relatives, and the
package's modules work on trees built from such nodes.

| Module | What it offers |
| --- | --- |
| `bintrees_kit.node` | `Node` with `insert_left`, `insert_right`, `is_leaf`, `is_root`; `delete` |
| `bintrees_kit.traversal` | `preorder`, `inorder`, `postorder` generators of values |
| `bintrees_kit.measures` | `height`, `depth`, `size`, `count_leaves`, `count_internal`, `balance` |
| `bintrees_kit.shape` | `is_full`, `is_perfect`, `is_complete` |
| `bintrees_kit.relations` | `sibling`, `uncle`, `lowest_common_ancestor` |
| `bintrees_kit.rotation` | `rotate_left`, `rotate_right` |
| `bintrees_kit.bst` | `BinarySearchTree`, `is_bst`, `array_to_bst` |
| `bintrees_kit.display` | `render`, `print_tree` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building trees

`Node(value, parent)` records its parent but does not attach itself to it;
assign it to `parent.left` or `parent.right` to do that. `insert_left` and
`insert_right` create and attach a child in one step, pushing any child
already in that place one level down beneath the new node.

`delete(tree)` unlinks every node of a subtree and detaches it from its
parent.

```python
from bintrees_kit.node import Node
from bintrees_kit.traversal import inorder, preorder
from bintrees_kit.measures import height, size, balance
from bintrees_kit.display import print_tree

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)

print_tree(root)
print(list(preorder(root)))   # [98, 12, 54, 128, 402]
print(list(inorder(root)))    # [12, 54, 98, 128, 402]
print(height(root), size(root), balance(root))   # 2 5 0
```

## Measures and shapes

- `height` counts edges on the longest downward path; a leaf and `None` have
  height 0.
- `depth` counts edges up to the root.
- `balance` is the left subtree's height minus the right's, counted in levels.
- `is_full`, `is_perfect` and `is_complete` return `False` for `None`.

## Relations and rotations

`sibling` and `uncle` return `None` where there is no such node.
`lowest_common_ancestor` treats a node as its own ancestor and returns `None`
when the nodes are in different trees.

`rotate_left` and `rotate_right` return the new root of the subtree; a tree
without the needed child comes back unchanged. The old parent's child link is
not updated, so reassign the returned node yourself.

## Binary search trees

`BinarySearchTree.insert` returns the new node, or `None` when the value is
already present. The tree supports `in` and iterates its values in ascending
order. `array_to_bst` builds a tree from any iterable, skipping duplicates,
and returns its root node; `is_bst` checks any tree for strict ordering.

```python
from bintrees_kit.bst import BinarySearchTree, array_to_bst, is_bst

tree = BinarySearchTree()
for value in (98, 402, 12, 46, 128):
    tree.insert(value)
print(tree.insert(128))   # None
print(46 in tree, list(tree))

root = array_to_bst([79, 47, 68, 87, 84, 91, 21, 32])
print(is_bst(root))       # True
```

## Drawing

`render(tree)` returns one line per level, each ending in a newline. Every
value appears as a label such as `(098)` (zero-padded to three digits), and
the line above a child carries dashes reaching toward it, with a `.` above
the middle of the child's label. `print_tree(tree, file)` writes the same
text to `file`, or to standard output when no file is given. An empty tree
renders as the empty string.

## What it does not do

This is a library only: it has no command-line program. Binary search trees
offer insertion and lookup but no removal of single values, and no
self-balancing.