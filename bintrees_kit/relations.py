"""Family relations between nodes: siblings, uncles and common ancestors."""

from __future__ import annotations

from typing import Optional

from .node import Node


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of the node's parent.

    Returns None for None, for a root, and when the parent has one child.
    """
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if node is not parent.right:
        return parent.right
    if node is not parent.left:
        return parent.left
    return None


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of the node's parent, or None if there is none."""
    if node is None or node.parent is None:
        return None
    return sibling(node.parent)


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes.

    A node counts as its own ancestor. Returns None if either node is None
    or the two nodes are not in the same tree.
    """
    if first is None or second is None:
        return None
    ancestors = set()
    node: Optional[Node] = first
    while node is not None:
        ancestors.add(node)
        node = node.parent
    node = second
    while node is not None:
        if node in ancestors:
            return node
        node = node.parent
    return None