"""An unbalanced binary search tree of distinct values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from linkedstructs import binary_tree


@dataclass(eq=False)
class BSTNode:
    """A node of a :class:`BinarySearchTree`."""

    data: Any
    left: Optional["BSTNode"] = None
    right: Optional["BSTNode"] = None


def _min_node(node: BSTNode) -> BSTNode:
    while node.left is not None:
        node = node.left
    return node


def _max_node(node: BSTNode) -> BSTNode:
    while node.right is not None:
        node = node.right
    return node


def _delete(node: Optional[BSTNode], target: Any) -> Optional[BSTNode]:
    if node is None:
        return None
    if target < node.data:
        node.left = _delete(node.left, target)
    elif target > node.data:
        node.right = _delete(node.right, target)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = _min_node(node.right)
        node.data = successor.data
        node.right = _delete(node.right, successor.data)
    return node


class BinarySearchTree:
    """A binary search tree; duplicate values are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[BSTNode] = None
        for value in values:
            self.insert(value)

    def insert(self, data: Any) -> None:
        """Insert ``data`` unless it is already present."""
        if self.root is None:
            self.root = BSTNode(data)
            return
        node = self.root
        while True:
            if data < node.data:
                if node.left is None:
                    node.left = BSTNode(data)
                    return
                node = node.left
            elif data > node.data:
                if node.right is None:
                    node.right = BSTNode(data)
                    return
                node = node.right
            else:
                return

    def search(self, target: Any) -> Optional[BSTNode]:
        """Return the node holding ``target``, or None."""
        node = self.root
        while node is not None:
            if target < node.data:
                node = node.left
            elif target > node.data:
                node = node.right
            else:
                return node
        return None

    def delete(self, target: Any) -> None:
        """Remove ``target`` if present; a node with two children takes its successor's value."""
        self.root = _delete(self.root, target)

    def find_min(self) -> Optional[BSTNode]:
        """Return the node with the smallest value, or None when empty."""
        return None if self.root is None else _min_node(self.root)

    def find_max(self) -> Optional[BSTNode]:
        """Return the node with the largest value, or None when empty."""
        return None if self.root is None else _max_node(self.root)

    def inorder(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        return binary_tree.inorder(self.root)

    def preorder(self) -> Iterator[Any]:
        """Yield values root, left, right."""
        return binary_tree.preorder(self.root)

    def postorder(self) -> Iterator[Any]:
        """Yield values left, right, root."""
        return binary_tree.postorder(self.root)

    def __contains__(self, target: Any) -> bool:
        return self.search(target) is not None

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self.inorder())!r})"