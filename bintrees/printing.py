"""Text drawing of binary trees."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintrees.node import Node
from bintrees.properties import height


def _put(row: list[str], position: int, char: str) -> None:
    if position >= len(row):
        row.extend(" " * (position - len(row) + 1))
    row[position] = char


def _place(node: Optional[Node], offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw a subtree into rows and return the width it takes."""
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _place(node.left, offset, depth + 1, rows)
    right = _place(node.right, offset + left + width, depth + 1, rows)

    for i, char in enumerate(label):
        _put(rows[depth], offset + left + i, char)

    if depth:
        above = rows[depth - 1]
        if is_left:
            start, length = offset + left + width // 2, width + right
        else:
            start, length = offset - width // 2, left + width
        for position in range(start, start + length):
            _put(above, position, "-")
        _put(above, offset + left + width // 2, ".")

    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of a tree, one line per level; empty for no tree."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]
    _place(tree, 0, 0, rows)
    return "".join("".join(row).rstrip(" ") + "\n" for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of a tree to a file, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))