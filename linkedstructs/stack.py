"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any, Iterator


class Stack:
    """A LIFO stack; iteration runs from the top down."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, data: Any) -> None:
        """Put a value on top."""
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top value; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it; IndexError when empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def reverse(self) -> None:
        """Reverse the stack in place, so the bottom becomes the top."""
        self._items.reverse()

    def copy(self) -> "Stack":
        """Return a new stack holding the same values in the same order."""
        duplicate = Stack()
        duplicate._items = list(self._items)
        return duplicate

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack(top->bottom={list(self)!r})"