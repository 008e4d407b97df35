"""Measurements of binary trees: height, depth, size and node counts."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .node import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack: List[Node] = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest path from the node to a leaf.

    An empty tree and a single leaf both have height 0.
    """
    if tree is None:
        return 0
    levels = 0
    frontier = [tree]
    while True:
        frontier = [
            child
            for node in frontier
            for child in (node.left, node.right)
            if child is not None
        ]
        if not frontier:
            return levels
        levels += 1


def depth(node: Optional[Node]) -> int:
    """Return the number of edges between the node and the root of its tree.

    None has depth 0.
    """
    count = 0
    if node is None:
        return count
    while node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def count_leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def count_internal(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def _levels(tree: Optional[Node]) -> int:
    return 0 if tree is None else height(tree) + 1


def balance(tree: Optional[Node]) -> int:
    """Return the balance factor: left subtree height minus right subtree height.

    Subtree heights count nodes, so a missing subtree counts as 0.
    An empty tree has balance 0.
    """
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)