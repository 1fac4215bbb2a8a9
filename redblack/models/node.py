"""
Node and sentinel model for the Red-Black Tree.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


class Sentinel:
    """
    The shared "no subtree" marker.

    There is exactly one instance, NIL. It is black, holds no value, and
    accepts no attribute writes. It has no parent relation: code that needs
    the logical parent of a NIL position must carry it explicitly.
    """

    __slots__ = ()

    _instance: "Sentinel | None" = None

    color = Color.BLACK
    value = None

    def __new__(cls) -> "Sentinel":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def left(self) -> "Sentinel":
        return self

    @property
    def right(self) -> "Sentinel":
        return self

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NIL"

    def __copy__(self) -> "Sentinel":
        return self

    def __deepcopy__(self, memo: dict) -> "Sentinel":
        return self

    def __reduce__(self) -> str:
        return "NIL"


NIL = Sentinel()


@dataclass(eq=False, repr=False, slots=True)
class Node:
    """Node in the Red-Black Tree. Nodes compare by identity."""

    value: Any
    color: Color = Color.RED
    left: "Node | Sentinel" = NIL
    right: "Node | Sentinel" = NIL
    parent: "Node | Sentinel" = NIL

    def detach(self) -> None:
        """Drop all relations so the node no longer references the tree."""
        self.left = NIL
        self.right = NIL
        self.parent = NIL

    def __repr__(self) -> str:
        return f"Node(value={self.value!r}, color={self.color.name})"
