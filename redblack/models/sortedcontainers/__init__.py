"""
Sorted container implementations.
"""

from redblack.models.sortedcontainers.invariants import check_invariants
from redblack.models.sortedcontainers.red_black_tree import RedBlackTree

__all__ = ["RedBlackTree", "check_invariants"]
