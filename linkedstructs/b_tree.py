"""A B-tree of order 5 holding distinct keys."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

ORDER = 5
MAX_KEYS = ORDER - 1
MIN_KEYS = (ORDER + 1) // 2 - 1


@dataclass(eq=False)
class BTreeNode:
    """A B-tree node: sorted keys and, unless a leaf, one more child than keys."""

    leaf: bool = True
    keys: List[Any] = field(default_factory=list)
    children: List["BTreeNode"] = field(default_factory=list)

    @property
    def is_full(self) -> bool:
        return len(self.keys) >= MAX_KEYS

    def _iter_keys(self) -> Iterator[Any]:
        for index, key in enumerate(self.keys):
            if not self.leaf:
                yield from self.children[index]._iter_keys()
            yield key
        if not self.leaf:
            yield from self.children[len(self.keys)]._iter_keys()


def _split_child(parent: BTreeNode, index: int) -> None:
    child = parent.children[index]
    mid = MAX_KEYS // 2
    sibling = BTreeNode(
        leaf=child.leaf,
        keys=child.keys[mid + 1:],
        children=[] if child.leaf else child.children[mid + 1:],
    )
    median = child.keys[mid]
    child.keys = child.keys[:mid]
    if not child.leaf:
        child.children = child.children[:mid + 1]
    parent.keys.insert(index, median)
    parent.children.insert(index + 1, sibling)


def _insert_nonfull(node: BTreeNode, key: Any) -> None:
    while not node.leaf:
        index = bisect_right(node.keys, key)
        if node.children[index].is_full:
            _split_child(node, index)
            if key > node.keys[index]:
                index += 1
        node = node.children[index]
    insort(node.keys, key)


def _borrow_from_left(node: BTreeNode, index: int) -> None:
    child = node.children[index]
    left = node.children[index - 1]
    child.keys.insert(0, node.keys[index - 1])
    node.keys[index - 1] = left.keys.pop()
    if not child.leaf:
        child.children.insert(0, left.children.pop())


def _borrow_from_right(node: BTreeNode, index: int) -> None:
    child = node.children[index]
    right = node.children[index + 1]
    child.keys.append(node.keys[index])
    node.keys[index] = right.keys.pop(0)
    if not child.leaf:
        child.children.append(right.children.pop(0))


def _merge_children(node: BTreeNode, index: int) -> None:
    left = node.children[index]
    right = node.children.pop(index + 1)
    left.keys.append(node.keys.pop(index))
    left.keys.extend(right.keys)
    left.children.extend(right.children)


def _balance(node: BTreeNode, index: int) -> int:
    """Give the child at ``index`` spare keys; return where the descent continues."""
    if index > 0 and len(node.children[index - 1].keys) > MIN_KEYS:
        _borrow_from_left(node, index)
        return index
    if index < len(node.keys) and len(node.children[index + 1].keys) > MIN_KEYS:
        _borrow_from_right(node, index)
        return index
    if index < len(node.keys):
        _merge_children(node, index)
        return index
    _merge_children(node, index - 1)
    return index - 1


def _predecessor(node: BTreeNode) -> Any:
    while not node.leaf:
        node = node.children[-1]
    return node.keys[-1]


def _successor(node: BTreeNode) -> Any:
    while not node.leaf:
        node = node.children[0]
    return node.keys[0]


def _delete_inner(node: BTreeNode, index: int, key: Any) -> None:
    left = node.children[index]
    right = node.children[index + 1]
    if len(left.keys) > MIN_KEYS:
        replacement = _predecessor(left)
        node.keys[index] = replacement
        _delete(left, replacement)
    elif len(right.keys) > MIN_KEYS:
        replacement = _successor(right)
        node.keys[index] = replacement
        _delete(right, replacement)
    else:
        _merge_children(node, index)
        _delete(node.children[index], key)


def _delete(node: BTreeNode, key: Any) -> bool:
    index = bisect_left(node.keys, key)
    if index < len(node.keys) and node.keys[index] == key:
        if node.leaf:
            del node.keys[index]
        else:
            _delete_inner(node, index, key)
        return True
    if node.leaf:
        return False
    if len(node.children[index].keys) <= MIN_KEYS:
        index = _balance(node, index)
    return _delete(node.children[index], key)


class BTree:
    """A B-tree of order :data:`ORDER`; iteration yields keys in ascending order."""

    def __init__(self) -> None:
        self.root: Optional[BTreeNode] = None

    def insert(self, key: Any) -> None:
        """Insert ``key``; a key already present is left as it is."""
        if self.root is None:
            self.root = BTreeNode(leaf=True, keys=[key])
            return
        if self.search(key) is not None:
            return
        if self.root.is_full:
            new_root = BTreeNode(leaf=False, children=[self.root])
            _split_child(new_root, 0)
            self.root = new_root
        _insert_nonfull(self.root, key)

    def search(self, key: Any) -> Optional[BTreeNode]:
        """Return the node holding ``key``, or None."""
        node = self.root
        while node is not None:
            index = bisect_left(node.keys, key)
            if index < len(node.keys) and node.keys[index] == key:
                return node
            if node.leaf:
                return None
            node = node.children[index]
        return None

    def delete(self, key: Any) -> bool:
        """Remove ``key``; return whether it was present."""
        if self.root is None:
            return False
        found = _delete(self.root, key)
        if not self.root.keys:
            self.root = None if self.root.leaf else self.root.children[0]
        return found

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        if self.root is None:
            return iter(())
        return self.root._iter_keys()

    def __repr__(self) -> str:
        return f"BTree({list(self)!r})"