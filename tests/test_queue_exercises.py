from collections import Counter

import pytest

from linkedstructs.linked_queue import Queue
from linkedstructs.queue_exercises import (
    create_queue_from_list,
    recursive_reverse,
    remove_odd_values,
    reverse_queue,
)


def _queue_of(values):
    queue = Queue()
    create_queue_from_list(values, queue)
    return queue


def test_create_queue_keeps_order():
    values = [5, 1, 9, 3]
    queue = _queue_of(values)
    assert list(queue) == values
    assert queue.dequeue() == 5
    assert queue.peek() == 1


def test_create_queue_appends_after_existing_items():
    queue = Queue()
    queue.enqueue(7)
    create_queue_from_list([8, 9], queue)
    assert list(queue) == [7, 8, 9]


def test_create_queue_from_empty_sequence():
    queue = Queue()
    create_queue_from_list([], queue)
    assert queue.is_empty()
    assert len(queue) == 0


def test_create_queue_accepts_generator():
    queue = Queue()
    create_queue_from_list((n for n in [4, 2, 6]), queue)
    assert list(queue) == [4, 2, 6]


def test_remove_odd_values_worked_example():
    queue = _queue_of([1, 2, 3, 4, 5, 6])
    remove_odd_values(queue)
    assert list(queue) == [2, 4, 6]


def test_remove_odd_values_handles_negatives():
    queue = _queue_of([-3, -2, 0, 7])
    remove_odd_values(queue)
    assert list(queue) == [-2, 0]


def test_remove_odd_values_invariants():
    values = [10, 13, 8, 21, 8, 5, 44]
    queue = _queue_of(values)
    remove_odd_values(queue)
    kept = list(queue)
    assert all(v % 2 == 0 for v in kept)
    removed = Counter(values) - Counter(kept)
    assert all(v % 2 != 0 for v in removed.elements())
    # kept values appear in their original relative order
    positions = iter(values)
    assert all(any(v == p for p in positions) for v in kept)


def test_remove_odd_values_all_odd_empties_queue():
    queue = _queue_of([1, 3, 5])
    remove_odd_values(queue)
    assert queue.is_empty()
    with pytest.raises(IndexError):
        queue.dequeue()


def test_remove_odd_values_on_empty_queue():
    queue = Queue()
    remove_odd_values(queue)
    assert len(queue) == 0


def test_reverse_queue():
    values = [1, 2, 3, 4]
    queue = _queue_of(values)
    reverse_queue(queue)
    assert list(queue) == list(reversed(values))
    assert queue.dequeue() == 4


def test_reverse_queue_twice_restores_order():
    values = [9, 0, 4, 4, 2]
    queue = _queue_of(values)
    reverse_queue(queue)
    reverse_queue(queue)
    assert list(queue) == values


def test_reverse_queue_empty_and_single():
    empty = Queue()
    reverse_queue(empty)
    assert empty.is_empty()
    single = _queue_of([42])
    reverse_queue(single)
    assert list(single) == [42]


def test_recursive_reverse():
    values = [3, 1, 4, 1, 5]
    queue = _queue_of(values)
    recursive_reverse(queue)
    assert list(queue) == list(reversed(values))
    assert len(queue) == len(values)


def test_recursive_reverse_matches_stack_reverse():
    values = [11, 22, 33, 44, 55, 66]
    first = _queue_of(values)
    second = _queue_of(values)
    recursive_reverse(first)
    reverse_queue(second)
    assert list(first) == list(second)


def test_recursive_reverse_empty_and_twice():
    empty = Queue()
    recursive_reverse(empty)
    assert empty.is_empty()
    values = [8, 6, 7]
    queue = _queue_of(values)
    recursive_reverse(queue)
    recursive_reverse(queue)
    assert list(queue) == values