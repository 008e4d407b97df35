"""Depth-first traversals of binary trees, yielding node values."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .node import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values node first, then the left subtree, then the right."""
    stack: List[Node] = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree first, then the node, then the right."""
    stack: List[Node] = []
    current = tree
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        yield node.value
        current = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree first, then the right, then the node."""
    stack: List[tuple[Node, bool]] = [(tree, False)] if tree is not None else []
    while stack:
        node, children_done = stack.pop()
        if children_done:
            yield node.value
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))