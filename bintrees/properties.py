"""Traversals, measurements, shape checks and rotations of binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from bintrees.node import Node


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    """Yield the nodes of a tree in pre-order."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values node, left subtree, right subtree."""
    for node in _walk(tree):
        yield node.value


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree, node, right subtree."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree, right subtree, node."""
    stack: list[tuple[Node, bool]] = [(tree, False)] if tree is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node.value
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values level by level, left to right."""
    queue = deque([tree] if tree is not None else [])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for no tree."""
    if tree is None:
        return 0
    levels = 0
    level = [tree]
    while level:
        levels += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels - 1


def _edge_height(tree: Optional[Node]) -> int:
    return -1 if tree is None else height(tree)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _walk(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return left subtree height minus right subtree height; 0 for no tree."""
    if tree is None:
        return 0
    return _edge_height(tree.left) - _edge_height(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all(
        (node.left is None) == (node.right is None) for node in _walk(tree)
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if all inner nodes have two children and all leaves share a level."""
    if tree is None:
        return False
    if height(tree.left) != height(tree.right):
        return False
    if tree.is_leaf():
        return True
    return is_perfect(tree.left) and is_perfect(tree.right)


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except possibly the last, packed left."""
    if tree is None:
        return False
    total = size(tree)
    stack = [(tree, 0)]
    while stack:
        node, index = stack.pop()
        if index >= total:
            return False
        if node.left is not None:
            stack.append((node.left, 2 * index + 1))
        if node.right is not None:
            stack.append((node.right, 2 * index + 2))
    return True


def rotate_left(tree: Optional[Node]) -> Optional[Node]:
    """Rotate left around the root; return the new root, or None if impossible."""
    if tree is None or tree.right is None:
        return None
    new_root = tree.right
    new_root.parent = None
    if new_root.left is not None:
        new_root.left.parent = tree
    tree.right = new_root.left
    tree.parent = new_root
    new_root.left = tree
    return new_root


def rotate_right(tree: Optional[Node]) -> Optional[Node]:
    """Rotate right around the root; return the new root, or None if impossible."""
    if tree is None or tree.left is None:
        return None
    new_root = tree.left
    new_root.parent = None
    if new_root.right is not None:
        new_root.right.parent = tree
    tree.left = new_root.right
    tree.parent = new_root
    new_root.right = tree
    return new_root