"""Binary search trees: validation, insertion and construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .node import Node
from .traversal import inorder


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the tree is a valid binary search tree.

    Every value in a left subtree must be strictly smaller than its node and
    every value in a right subtree strictly larger. An empty tree is not a BST.
    """
    if tree is None:
        return False
    stack: List[Tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value <= low) or (
            high is not None and node.value >= high
        ):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


@dataclass
class BinarySearchTree:
    """A binary search tree of distinct integers."""

    root: Optional[Node] = None

    def insert(self, value: int) -> Optional[Node]:
        """Insert a value and return its new node.

        Returns None, leaving the tree unchanged, if the value is already present.
        """
        if self.root is None:
            self.root = Node(value)
            return self.root
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = Node(value, current)
                    return current.left
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = Node(value, current)
                    return current.right
                current = current.right
            else:
                return None

    def __contains__(self, value: object) -> bool:
        current = self.root
        while current is not None:
            if value == current.value:
                return True
            current = current.left if value < current.value else current.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a binary search tree by inserting the values in order.

    Duplicates are skipped. Returns the root, or None for no values.
    """
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree.root