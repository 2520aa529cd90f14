"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

from bintrees.node import Node
from bintrees.properties import is_complete, levelorder, size


def _ordered(tree: Node) -> bool:
    stack = [tree]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                if node.value < child.value:
                    return False
                stack.append(child)
    return True


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if the tree is complete and no child exceeds its parent."""
    if tree is None or not is_complete(tree):
        return False
    return _ordered(tree)


class MaxHeap:
    """A max binary heap kept as a complete binary tree."""

    def __init__(self, root: Optional[Node] = None) -> None:
        self.root = root

    def __iter__(self) -> Iterator[int]:
        return levelorder(self.root)

    def __len__(self) -> int:
        return size(self.root)

    def insert(self, value: int) -> Node:
        """Insert a value and return the node that holds it after sifting up."""
        if self.root is None:
            self.root = Node(value)
            return self.root

        # The new node goes at the next level-order position; the binary
        # digits of its 1-based index spell the path from the root.
        position = size(self.root) + 1
        steps = bin(position)[3:]
        parent = self.root
        for step in steps[:-1]:
            child = parent.right if step == "1" else parent.left
            assert child is not None
            parent = child
        node = Node(value, parent)
        if steps[-1] == "1":
            parent.right = node
        else:
            parent.left = node

        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node


def array_to_heap(values: Iterable[int]) -> MaxHeap:
    """Build a max heap by inserting values in order."""
    heap = MaxHeap()
    for value in values:
        heap.insert(value)
    return heap