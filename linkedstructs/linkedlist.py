"""A singly linked list of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A single link in a :class:`LinkedList`."""

    data: Any
    next: Optional["Node"] = None


def _merge(left: Optional[Node], right: Optional[Node]) -> Optional[Node]:
    dummy = Node(None)
    tail = dummy
    while left is not None and right is not None:
        if left.data < right.data:
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def _merge_sort(head: Optional[Node]) -> Optional[Node]:
    if head is None or head.next is None:
        return head
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    right = slow.next
    slow.next = None
    return _merge(_merge_sort(head), _merge_sort(right))


class LinkedList:
    """A singly linked list with insertion, search, reversal and merge sort."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for value in values:
            self.insert_end(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def insert_end(self, data: Any) -> None:
        """Append a value at the tail."""
        new_node = Node(data)
        if self.head is None:
            self.head = new_node
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = new_node

    def insert_front(self, data: Any) -> None:
        """Prepend a value at the head."""
        self.head = Node(data, self.head)

    def delete(self, data: Any) -> bool:
        """Remove the first node holding ``data``; return whether one was found."""
        prev: Optional[Node] = None
        for node in self._nodes():
            if node.data == data:
                if prev is None:
                    self.head = node.next
                else:
                    prev.next = node.next
                return True
            prev = node
        return False

    def find(self, data: Any) -> Optional[Node]:
        """Return the first node holding ``data``, or None."""
        return next((node for node in self._nodes() if node.data == data), None)

    def insert_at(self, index: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at position ``index``.

        Raises IndexError when ``index`` is negative or past the end.
        """
        if index < 0:
            raise IndexError("insert position out of range")
        if index == 0:
            self.insert_front(data)
            return
        for position, node in enumerate(self._nodes(), start=1):
            if position == index:
                node.next = Node(data, node.next)
                return
        raise IndexError("insert position out of range")

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[Node] = None
        node = self.head
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self.head = prev

    def sort(self) -> None:
        """Sort the list in ascending order with merge sort."""
        self.head = _merge_sort(self.head)

    def clear(self) -> None:
        """Remove every node."""
        self.head = None

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"