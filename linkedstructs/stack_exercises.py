"""Stack exercises: building a stack from a sequence, filtering and inspecting it."""

from __future__ import annotations

from typing import Any, Iterable

from linkedstructs.stack import Stack


def create_stack_from_list(values: Iterable[Any], stack: Stack) -> None:
    """Push every value, in order, onto ``stack``; the last value ends on top."""
    for value in values:
        stack.push(value)


def remove_even_values(stack: Stack) -> None:
    """Drop the even integers from ``stack``, keeping the odd ones in order."""
    kept = Stack()
    while not stack.is_empty():
        value = stack.pop()
        if value % 2 != 0:
            kept.push(value)
    while not kept.is_empty():
        stack.push(kept.pop())


def is_pairwise_consecutive(stack: Stack) -> bool:
    """Return whether successive pairs from the top differ by exactly one.

    An empty stack counts as pairwise consecutive; a stack of odd size does
    not. The stack is left unchanged.
    """
    values = list(stack)
    if len(values) % 2 != 0:
        return False
    pairs = zip(values[::2], values[1::2])
    return all(abs(first - second) == 1 for first, second in pairs)


def remove_until(stack: Stack, value: Any) -> None:
    """Pop values until ``value`` is on top; empties the stack if it is absent."""
    while not stack.is_empty() and stack.peek() != value:
        stack.pop()