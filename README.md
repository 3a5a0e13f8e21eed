# linkedstructs

Classic data structures for Python: a singly linked list of nodes, a stack, a
FIFO queue, a binary tree, a binary search tree and an order-5 B-tree. The
package also has a few small routines that work on stacks and queues. It has
no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `linkedstructs.linkedlist`

`Node` (fields `data` and `next`) and `LinkedList`. Pass an iterable to build
a list from values: `LinkedList([1, 2, 3])`. The list stores its first node in
`head`.

- `insert_end(data)` and `insert_front(data)` add a value at the tail or the head.
- `insert_at(index, data)` inserts so that the value ends up at `index`. It raises
  `IndexError` when the index is negative or past the end.
- `delete(data)` removes the first node holding `data` and returns whether it found one.
- `find(data)` returns the first matching `Node`, or `None`.
- `reverse()` reverses the list in place. `sort()` sorts it in ascending order
  with a merge sort. `clear()` empties it.
- The list supports iteration over its values and `len`. `str` gives
  `"1 -> 2 -> NULL"`.

### `linkedstructs.stack`

`Stack` is last-in, first-out. It has `push`, `pop`, `peek`, `is_empty`, `clear`,
`reverse` (the bottom becomes the top) and `copy` (a new stack with the same
values). `pop` and `peek` raise `IndexError` on an empty stack. Iteration runs
from the top down, and `len` gives the size.

### `linkedstructs.linked_queue`

`Queue` is first-in, first-out. It has `enqueue`, `dequeue`, `peek`, `is_empty`
and `clear`. `dequeue` and `peek` raise `IndexError` on an empty queue.
Iteration runs from front to rear, and `len` gives the size.

### `linkedstructs.binary_tree`

`TreeNode` has the fields `data`, `left` and `right`. `insert_left(data)` and
`insert_right(data)` attach a new child and return it. They return `None` and
leave the tree unchanged when that slot is already taken.

The module functions take a root node, or `None` for an empty tree:

- `preorder`, `inorder` and `postorder` are generators of values.
- `count_nodes` counts the nodes.
- `tree_height` gives the height in edges. An empty tree has height -1 and a
  single node has height 0.
- `count_leaves` counts the nodes without children.
- `is_full_tree` tells whether every node has zero or two children. An empty
  tree counts as full.

### `linkedstructs.binary_search_tree`

`BSTNode` and `BinarySearchTree`. The tree is unbalanced and holds distinct
values. Inserting a value that is already present does nothing. The tree has
these methods and attributes:

- `insert` adds a value.
- `search` returns the node holding a value, or `None`.
- `delete` removes a value. A node with two children takes its in-order
  successor's value.
- `find_min` and `find_max` return a node, or `None` when the tree is empty.
- `inorder`, `preorder` and `postorder` are generators of values.
- `in` tests whether a value is in the tree.
- `root` holds the root node.

### `linkedstructs.b_tree`

`BTreeNode` (fields `leaf`, `keys`, `children`) and `BTree`, a B-tree of order 5:
at most 4 keys and 5 children per node. `ORDER`, `MAX_KEYS` and `MIN_KEYS` are
module constants.

- `insert(key)` adds a key. A key already present is left as it is.
- `search(key)` returns the node holding the key, or `None`.
- `delete(key)` removes the key and returns whether it was present.
- `in` tests for a key, and iterating over a `BTree` yields its keys in
  ascending order.

### `linkedstructs.queue_exercises`

- `create_queue_from_list(values, queue)` enqueues the values in order.
- `remove_odd_values(queue)` keeps only the even integers, in their order.
- `reverse_queue(queue)` reverses the queue by passing it through a stack.
- `recursive_reverse(queue)` reverses the queue recursively.

### `linkedstructs.stack_exercises`

- `create_stack_from_list(values, stack)` pushes the values in order, so the
  last one ends up on top.
- `remove_even_values(stack)` keeps only the odd integers, in their order.
- `is_pairwise_consecutive(stack)` tells whether successive pairs from the top
  differ by exactly 1. An empty stack counts as pairwise consecutive. A stack
  of odd size does not. The stack is left unchanged.
- `remove_until(stack, value)` pops until `value` is on top. It empties the
  stack when `value` is absent.

## Example

```python
from linkedstructs.linkedlist import LinkedList
from linkedstructs.stack import Stack
from linkedstructs.b_tree import BTree

items = LinkedList([30, 10, 20])
items.sort()
print(items)            # 10 -> 20 -> 30 -> NULL

s = Stack()
for value in (1, 2, 3):
    s.push(value)
s.reverse()
print(s.peek())         # 1

tree = BTree()
for key in (50, 40, 60, 30, 70):
    tree.insert(key)
tree.delete(30)
print(30 in tree)       # False
print(list(tree))       # [40, 50, 60, 70]
```

## What it does not do

This is a library only. It provides no command-line program and no interactive
menu for entering values. Use the classes and functions from your own code.