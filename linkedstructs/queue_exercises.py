"""Queue exercises: building a queue from a sequence, filtering and reversing it."""

from __future__ import annotations

from typing import Any, Iterable

from linkedstructs.linked_queue import Queue
from linkedstructs.stack import Stack


def create_queue_from_list(values: Iterable[Any], queue: Queue) -> None:
    """Enqueue every value, in order, at the rear of ``queue``."""
    for value in values:
        queue.enqueue(value)


def remove_odd_values(queue: Queue) -> None:
    """Drop the odd integers from ``queue``, keeping the even ones in order."""
    for _ in range(len(queue)):
        value = queue.dequeue()
        if value % 2 == 0:
            queue.enqueue(value)


def reverse_queue(queue: Queue) -> None:
    """Reverse ``queue`` in place by passing its values through a stack."""
    stack = Stack()
    while not queue.is_empty():
        stack.push(queue.dequeue())
    while not stack.is_empty():
        queue.enqueue(stack.pop())


def recursive_reverse(queue: Queue) -> None:
    """Reverse ``queue`` in place recursively, holding one value per call."""
    if queue.is_empty():
        return
    front = queue.dequeue()
    recursive_reverse(queue)
    queue.enqueue(front)