"""A plain binary tree with traversals and shape queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree holding ``data`` and up to two children."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def insert_left(self, data: Any) -> Optional["TreeNode"]:
        """Attach a new left child; return it, or None if the slot is taken."""
        if self.left is not None:
            return None
        self.left = TreeNode(data)
        return self.left

    def insert_right(self, data: Any) -> Optional["TreeNode"]:
        """Attach a new right child; return it, or None if the slot is taken."""
        if self.right is not None:
            return None
        self.right = TreeNode(data)
        return self.right


def preorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values root, left, right."""
    if root is None:
        return
    yield root.data
    yield from preorder(root.left)
    yield from preorder(root.right)


def inorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values left, root, right."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.data
    yield from inorder(root.right)


def postorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values left, right, root."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.data


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def tree_height(root: Optional[TreeNode]) -> int:
    """Return the height in edges; an empty tree has height -1."""
    if root is None:
        return -1
    return max(tree_height(root.left), tree_height(root.right)) + 1


def count_leaves(root: Optional[TreeNode]) -> int:
    """Return the number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def is_full_tree(root: Optional[TreeNode]) -> bool:
    """Return whether every node has either zero or two children."""
    if root is None:
        return True
    if root.left is None and root.right is None:
        return True
    if root.left is not None and root.right is not None:
        return is_full_tree(root.left) and is_full_tree(root.right)
    return False