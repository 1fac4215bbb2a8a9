"""
Invariant checker for red-black trees.

Used by tests and by RedBlackTree.validate(). A failure here is an
implementation defect, so nothing in the normal operation path calls it.
"""

import logging
from typing import Any

from redblack.models.exceptions import InvariantViolationError
from redblack.models.node import NIL, Color, Node, Sentinel

logger = logging.getLogger(__name__)


def _fail(invariant: str, detail: str) -> None:
    logger.error(f"Invariant '{invariant}' violated: {detail}")
    raise InvariantViolationError(invariant, detail)


def black_height(node: Node | Sentinel) -> int:
    """
    Return the black-height of `node`, checking red-red and black-height
    invariants for the whole subtree on the way.
    """
    if node is NIL:
        return 0

    for child in (node.left, node.right):
        if child is not NIL and child.parent is not node:
            _fail("parent-link", f"child {child!r} does not point back to {node!r}")
        if node.color == Color.RED and child.color == Color.RED:
            _fail("red-red", f"red node {node!r} has red child {child!r}")

    left_height = black_height(node.left)
    right_height = black_height(node.right)
    if left_height != right_height:
        _fail(
            "black-height",
            f"{node!r} has black-height {left_height} on the left "
            f"and {right_height} on the right",
        )

    return left_height + (1 if node.color == Color.BLACK else 0)


def check_invariants(tree: Any) -> int:
    """
    Verify every red-black invariant of `tree`.

    Args:
        tree: A RedBlackTree (anything exposing root, compare and size()).

    Returns:
        The black-height of the root.

    Raises:
        InvariantViolationError: If any invariant does not hold.
    """
    if NIL.color != Color.BLACK:
        _fail("black-sentinel", "the sentinel is not black")

    root = tree.root
    if root is not NIL:
        if root.color != Color.BLACK:
            _fail("black-root", f"root {root!r} is red")
        if root.parent is not NIL:
            _fail("root-parent", f"root {root!r} has parent {root.parent!r}")

    height = black_height(root)

    # Rotations may move equal values across a node, so ordering is checked on
    # the in-order sequence rather than per subtree.
    count = 0
    previous = NIL
    for value in tree:
        if previous is not NIL and tree.compare(previous, value) > 0:
            _fail("bst-order", f"{previous!r} precedes {value!r} in order")
        previous = value
        count += 1

    if count != tree.size():
        _fail("size", f"size() is {tree.size()} but {count} nodes are reachable")

    return height
