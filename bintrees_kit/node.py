"""Binary tree nodes with parent links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer and links to its relatives.

    Creating a node records its parent but does not attach it to that
    parent; assign it to ``parent.left`` or ``parent.right`` to do so.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = None
    right: Optional[Node] = None

    def insert_left(self, value: int) -> Node:
        """Insert a new node as the left child, pushing any old left child down.

        The previous left child becomes the left child of the new node.
        """
        new_node = Node(value, self)
        if self.left is not None:
            new_node.left = self.left
            self.left.parent = new_node
        self.left = new_node
        return new_node

    def insert_right(self, value: int) -> Node:
        """Insert a new node as the right child, pushing any old right child down.

        The previous right child becomes the right child of the new node.
        """
        new_node = Node(value, self)
        if self.right is not None:
            new_node.right = self.right
            self.right.parent = new_node
        self.right = new_node
        return new_node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None


def delete(tree: Optional[Node]) -> None:
    """Dismantle a whole tree, unlinking every node in it.

    The tree is also detached from its parent, if it has one.
    Passing None does nothing.
    """
    if tree is None:
        return
    parent = tree.parent
    if parent is not None:
        if parent.left is tree:
            parent.left = None
        if parent.right is tree:
            parent.right = None
    stack = [tree]
    while stack:
        node = stack.pop()
        stack.extend(child for child in (node.left, node.right) if child is not None)
        node.left = None
        node.right = None
        node.parent = None