"""Linked lists, stacks, queues, binary trees, binary search trees and B-trees."""

__version__ = "0.1.0"