"""
Red-black tree based ordered container.

This package provides a self-balancing sorted container with:
- insert(value) - O(log N)
- remove(value) - O(log N), returns False when absent
- contains(value) / find(value) - O(log N)
- min(), max(), successor(value), predecessor(value) - O(log N)
- in_order() - lazy ascending traversal, plus range and async iteration
"""

from redblack.models.node import NIL, Color, Node
from redblack.models.sortedcontainers import RedBlackTree

__all__ = ["RedBlackTree", "Color", "Node", "NIL"]
