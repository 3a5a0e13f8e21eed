"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator


class Queue:
    """A FIFO queue; iteration runs from front to rear."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, data: Any) -> None:
        """Add a value at the rear."""
        self._items.append(data)

    def dequeue(self) -> Any:
        """Remove and return the front value; IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front value without removing it; IndexError when empty."""
        if not self._items:
            raise IndexError("peek at empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"