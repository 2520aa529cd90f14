"""Binary tree nodes and the relations between them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves below it."""
        child = Node(value, self)
        if self.left is not None:
            child.left = self.left
            self.left.parent = child
        self.left = child
        return child

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves below it."""
        child = Node(value, self)
        if self.right is not None:
            child.right = self.right
            self.right.parent = child
        self.right = child
        return child

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def ancestors(self) -> Iterator[Node]:
        """Yield the parent, grandparent and so on up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def depth(self) -> int:
        """Return the number of edges between the node and its root."""
        return sum(1 for _ in self.ancestors())

    def sibling(self) -> Optional[Node]:
        """Return the other child of the node's parent, if any."""
        if self.parent is None:
            return None
        if self.parent.right is self:
            return self.parent.left
        return self.parent.right

    def uncle(self) -> Optional[Node]:
        """Return the sibling of the node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Return the deepest node that is an ancestor of (or equal to) both nodes."""
    if first is None or second is None:
        return None

    shallow, deep = first, second
    shallow_depth, deep_depth = first.depth(), second.depth()
    if shallow_depth > deep_depth:
        shallow, deep = deep, shallow
        shallow_depth, deep_depth = deep_depth, shallow_depth

    for _ in range(deep_depth - shallow_depth):
        deep = deep.parent

    while shallow is not None and deep is not None and shallow is not deep:
        shallow = shallow.parent
        deep = deep.parent

    return deep if deep is shallow else None