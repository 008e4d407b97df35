"""Left and right rotations of binary trees."""

from __future__ import annotations

from typing import Optional

from .node import Node


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate the tree left and return its new root.

    The right child becomes the root. A tree without a right child is
    returned unchanged. The old parent's child link is not updated.
    """
    if tree is None or tree.right is None:
        return tree
    new_root = tree.right
    moved = new_root.left
    new_root.left = tree
    tree.right = moved
    if moved is not None:
        moved.parent = tree
    new_root.parent = tree.parent
    tree.parent = new_root
    return new_root


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate the tree right and return its new root.

    The left child becomes the root. A tree without a left child is
    returned unchanged. The old parent's child link is not updated.
    """
    if tree is None or tree.left is None:
        return tree
    new_root = tree.left
    moved = new_root.right
    new_root.right = tree
    tree.left = moved
    if moved is not None:
        moved.parent = tree
    new_root.parent = tree.parent
    tree.parent = new_root
    return new_root