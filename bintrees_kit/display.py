"""Text rendering of binary trees."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .node import Node


def _write(row: List[str], start: int, text: str) -> None:
    end = start + len(text)
    if len(row) < end:
        row.extend(" " * (end - len(row)))
    for index, char in enumerate(text, start):
        if index >= 0:
            row[index] = char


def _place(tree: Optional[Node], offset: int, depth: int, rows: List[List[str]]) -> int:
    """Draw a subtree into the rows and return its width."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _place(tree.left, offset, depth + 1, rows)
    right = _place(tree.right, offset + left + width, depth + 1, rows)
    _write(rows[depth], offset + left, label)
    if depth:
        above = rows[depth - 1]
        if is_left:
            _write(above, offset + left + width // 2, "-" * (width + right))
        else:
            _write(above, offset - width // 2, "-" * (left + width))
        _write(above, offset + left + width // 2, ".")
    return left + width + right


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _finish(row: List[str]) -> str:
    line = "".join(row).ljust(2)
    # The first two columns are always kept, even when blank.
    return line[:2] + line[2:].rstrip(" ")


def render(tree: Optional[Node]) -> str:
    """Return a drawing of the tree, one line per level, each ending in a newline.

    An empty tree renders as the empty string.
    """
    if tree is None:
        return ""
    rows: List[List[str]] = [[] for _ in range(_height(tree) + 1)]
    _place(tree, 0, 0, rows)
    return "".join(_finish(row) + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to a file, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))