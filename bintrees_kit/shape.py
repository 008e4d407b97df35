"""Shape predicates for binary trees: full, perfect and complete."""

from __future__ import annotations

from collections import deque
from typing import List, Optional, Tuple

from .node import Node


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either no children or two.

    An empty tree is not full.
    """
    if tree is None:
        return False
    stack: List[Node] = [tree]
    while stack:
        node = stack.pop()
        if node.is_leaf():
            continue
        if node.left is None or node.right is None:
            return False
        stack.extend((node.left, node.right))
    return True


def _leftmost_levels(tree: Node) -> int:
    count = 0
    node: Optional[Node] = tree
    while node is not None:
        count += 1
        node = node.left
    return count


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every inner node has two children and all leaves share a level.

    An empty tree is not perfect.
    """
    if tree is None:
        return False
    levels = _leftmost_levels(tree)
    stack: List[Tuple[Node, int]] = [(tree, 0)]
    while stack:
        node, level = stack.pop()
        if node.is_leaf():
            if levels != level + 1:
                return False
            continue
        if node.left is None or node.right is None:
            return False
        stack.append((node.left, level + 1))
        stack.append((node.right, level + 1))
    return True


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled, except possibly the last, filled from the left.

    An empty tree is not complete.
    """
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True