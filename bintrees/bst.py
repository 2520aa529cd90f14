"""Binary search trees of distinct integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

from bintrees.node import Node
from bintrees.properties import inorder, size


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if the tree is a valid binary search tree with distinct values."""
    if tree is None:
        return False
    stack: list[tuple[Node, Optional[int], Optional[int]]] = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if (low is not None and node.value < low) or (
            high is not None and node.value > high
        ):
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value - 1))
        if node.right is not None:
            stack.append((node.right, node.value + 1, high))
    return True


def min_node(root: Optional[Node]) -> Optional[Node]:
    """Return the leftmost node of a tree, or None for no tree."""
    node = root
    while node is not None and node.left is not None:
        node = node.left
    return node


class BinarySearchTree:
    """A binary search tree; duplicate values are refused."""

    def __init__(self, root: Optional[Node] = None) -> None:
        self.root = root

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __len__(self) -> int:
        return size(self.root)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def insert(self, value: int) -> Optional[Node]:
        """Insert a value and return its new node, or None if already present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value, node)
                    return node.left
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value, node)
                    return node.right
                node = node.right
            else:
                return None

    def search(self, value: int) -> Optional[Node]:
        """Return the node holding the value, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def remove(self, value: int) -> bool:
        """Remove the value from the tree; return True if it was present.

        A node with two children takes the value of its in-order successor,
        and the successor node is removed instead.
        """
        node = self.search(value)
        if node is None:
            return False
        target = node
        if node.left is not None and node.right is not None:
            successor = min_node(node.right)
            assert successor is not None
            node.value = successor.value
            target = successor
        child = target.left if target.left is not None else target.right
        parent = target.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is target:
            parent.left = child
        else:
            parent.right = child
        target.parent = None
        target.left = target.right = None
        return True


def array_to_bst(values: Iterable[int]) -> BinarySearchTree:
    """Build a binary search tree by inserting values in order, skipping duplicates."""
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree