"""
Data models for the red-black tree.
"""

from redblack.models.exceptions import InvariantViolationError
from redblack.models.node import NIL, Color, Node, Sentinel

__all__ = [
    "Color",
    "Node",
    "Sentinel",
    "NIL",
    "InvariantViolationError",
]
