"""
Red-Black Tree implementation of an ordered multiset.

Every missing child and the root's parent point to the shared NIL sentinel.
NIL never carries a parent, so deletion passes the logical parent of the
position it is repairing explicitly.
"""

import logging
from collections.abc import AsyncIterator, Callable, Iterable, Iterator
from typing import Any

from redblack.interfaces.sorted_container import SortedContainer
from redblack.models.node import NIL, Color, Node, Sentinel
from redblack.models.sortedcontainers.invariants import check_invariants

logger = logging.getLogger(__name__)

Compare = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """Three-way comparison using the values' own < and > operators."""
    return (a > b) - (a < b)


class RedBlackTree(SortedContainer):
    """
    Red-Black Tree implementation of SortedContainer.

    Properties maintained:
    1. Every node is either red or black, NIL is black
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from a node to NIL has the same number of black nodes

    Equal values are inserted to the left, so in-order traversal yields equal
    values most recently inserted first.

    The comparison function must be a total order; this is not checked.
    """

    def __init__(
        self, values: Iterable[Any] | None = None, compare: Compare | None = None
    ) -> None:
        self._root: Node | Sentinel = NIL
        self._size: int = 0
        self._compare: Compare = compare or natural_order
        if values is not None:
            for value in values:
                self.insert(value)

    @property
    def root(self) -> Node | Sentinel:
        return self._root

    @property
    def compare(self) -> Compare:
        return self._compare

    def insert(self, value: Any) -> Node:
        """Insert a value and return its node. O(log N)"""
        if self._root is NIL:
            self._root = Node(value=value, color=Color.BLACK)
            self._size = 1
            return self._root

        # Find insertion point
        parent = self._root
        current = self._root
        go_right = False

        while current is not NIL:
            parent = current
            go_right = self._compare(value, current.value) > 0
            current = current.right if go_right else current.left

        new_node = Node(value=value, parent=parent)
        if go_right:
            parent.right = new_node
        else:
            parent.left = new_node

        self._size += 1
        self._fix_insert(new_node)
        return new_node

    def remove(self, value: Any) -> bool:
        """Remove one occurrence of a value. O(log N)"""
        node = self._find_node(value)
        if node is NIL:
            logger.debug(f"remove: value {value!r} not found")
            return False

        self._delete_node(node)
        self._size -= 1
        return True

    def contains(self, value: Any) -> bool:
        return self._find_node(value) is not NIL

    def find(self, value: Any) -> Node | None:
        """Return the first node holding `value` on the search path."""
        node = self._find_node(value)
        return None if node is NIL else node

    def size(self) -> int:
        return self._size

    def min(self) -> Any | None:
        if self._root is NIL:
            return None
        return self._minimum(self._root).value

    def max(self) -> Any | None:
        if self._root is NIL:
            return None
        return self._maximum(self._root).value

    def successor(self, value: Any) -> Any | None:
        """Smallest stored value strictly greater than `value`. O(log N)"""
        best = NIL
        current = self._root
        while current is not NIL:
            if self._compare(value, current.value) < 0:
                best = current
                current = current.left
            else:
                current = current.right
        return best.value

    def predecessor(self, value: Any) -> Any | None:
        """Largest stored value strictly smaller than `value`. O(log N)"""
        best = NIL
        current = self._root
        while current is not NIL:
            if self._compare(value, current.value) > 0:
                best = current
                current = current.right
            else:
                current = current.left
        return best.value

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""

        def _height(node: Node | Sentinel) -> int:
            if node is NIL:
                return 0
            return 1 + max(_height(node.left), _height(node.right))

        return _height(self._root)

    def clear(self) -> None:
        """Remove every value, detaching all nodes."""
        stack = [self._root] if self._root is not NIL else []
        while stack:
            node = stack.pop()
            if node.left is not NIL:
                stack.append(node.left)
            if node.right is not NIL:
                stack.append(node.right)
            node.detach()

        logger.debug(f"clear: dropped {self._size} values")
        self._root = NIL
        self._size = 0

    def validate(self) -> None:
        """Raise InvariantViolationError if any red-black invariant is broken."""
        check_invariants(self)

    def in_order(self) -> Iterator[Any]:
        return self.iterator()

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()

    def __reversed__(self) -> Iterator[Any]:
        stack: list[Node] = []
        current = self._root
        while stack or current is not NIL:
            while current is not NIL:
                stack.append(current)
                current = current.right
            node = stack.pop()
            yield node.value
            current = node.left

    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Any]:
        return _RangeIterator(self._root, self._compare, start, end)

    def __aiter__(self) -> AsyncIterator[Any]:
        return self.async_iterator()

    def async_iterator(self, start: Any = None, end: Any = None) -> AsyncIterator[Any]:
        return _AsyncRangeIterator(self._root, self._compare, start, end)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        return f"RedBlackTree({list(self)!r})"

    def _find_node(self, value: Any) -> Node | Sentinel:
        """Find node by value."""
        current = self._root
        while current is not NIL:
            order = self._compare(value, current.value)
            if order < 0:
                current = current.left
            elif order > 0:
                current = current.right
            else:
                return current
        return NIL

    @staticmethod
    def _minimum(node: Node) -> Node:
        while node.left is not NIL:
            node = node.left
        return node

    @staticmethod
    def _maximum(node: Node) -> Node:
        while node.right is not NIL:
            node = node.right
        return node

    def _rotate_left(self, subject: Node) -> None:
        """Left rotation. The right child takes the subject's place."""
        fulcrum = subject.right
        assert fulcrum is not NIL, "left rotation needs a right child"

        subject.right = fulcrum.left
        if fulcrum.left is not NIL:
            fulcrum.left.parent = subject

        fulcrum.parent = subject.parent

        if subject.parent is NIL:
            self._root = fulcrum
        elif subject is subject.parent.left:
            subject.parent.left = fulcrum
        else:
            subject.parent.right = fulcrum

        fulcrum.left = subject
        subject.parent = fulcrum

    def _rotate_right(self, subject: Node) -> None:
        """Right rotation. The left child takes the subject's place."""
        fulcrum = subject.left
        assert fulcrum is not NIL, "right rotation needs a left child"

        subject.left = fulcrum.right
        if fulcrum.right is not NIL:
            fulcrum.right.parent = subject

        fulcrum.parent = subject.parent

        if subject.parent is NIL:
            self._root = fulcrum
        elif subject is subject.parent.right:
            subject.parent.right = fulcrum
        else:
            subject.parent.left = fulcrum

        fulcrum.right = subject
        subject.parent = fulcrum

    def _fix_insert(self, node: Node) -> None:
        """Fix Red-Black Tree properties after insert."""
        # The root's parent is NIL, which is black, so the loop stops there.
        while node.parent.color == Color.RED:
            parent = node.parent
            grandparent = parent.parent

            if parent is grandparent.left:
                uncle = grandparent.right

                if uncle.color == Color.RED:
                    # Case 1: Uncle is red
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                if node is parent.right:
                    # Case 2: Triangle, turn it into a line
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent

                # Case 3: Line
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left

                if uncle.color == Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent

                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_left(grandparent)

        self._root.color = Color.BLACK

    def _delete_node(self, node: Node) -> None:
        """Delete a node from the tree."""
        if node.left is not NIL and node.right is not NIL:
            # Node has two children - move the successor's value up and
            # splice the successor out instead
            successor = self._minimum(node.right)
            node.value = successor.value
            node = successor

        # Node has at most one child
        child = node.left if node.left is not NIL else node.right
        parent = node.parent
        self._replace_node(node, child)

        if node.color == Color.BLACK:
            self._fix_delete(child, parent)

        node.detach()

    def _replace_node(self, node: Node, child: Node | Sentinel) -> None:
        """Replace node with child in tree."""
        if node.parent is NIL:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child

        if child is not NIL:
            child.parent = node.parent

    def _fix_delete(self, node: Node | Sentinel, parent: Node | Sentinel) -> None:
        """
        Fix Red-Black Tree properties after delete.

        `node` is the double-black position and may be NIL, so its parent is
        tracked in `parent` rather than read from the node.
        """
        while node is not self._root and node.color == Color.BLACK:
            if node is parent.left:
                sibling = parent.right

                if sibling.color == Color.RED:
                    # Case 1: Sibling is red
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    sibling = parent.right

                if sibling.left.color == Color.BLACK and sibling.right.color == Color.BLACK:
                    # Case 2: Both of the sibling's children are black
                    sibling.color = Color.RED
                    node = parent
                    parent = node.parent
                    continue

                if sibling.right.color == Color.BLACK:
                    # Case 3: Far child black, near child red
                    sibling.left.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_right(sibling)
                    sibling = parent.right

                # Case 4: Far child red
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.right.color = Color.BLACK
                self._rotate_left(parent)
                node = self._root
            else:
                sibling = parent.left

                if sibling.color == Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    sibling = parent.left

                if sibling.left.color == Color.BLACK and sibling.right.color == Color.BLACK:
                    sibling.color = Color.RED
                    node = parent
                    parent = node.parent
                    continue

                if sibling.left.color == Color.BLACK:
                    sibling.right.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_left(sibling)
                    sibling = parent.left

                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.left.color = Color.BLACK
                self._rotate_right(parent)
                node = self._root

        if node is not NIL:
            node.color = Color.BLACK


class _RangeIterator(Iterator[Any]):
    """Iterator for range queries on Red-Black Tree."""

    def __init__(
        self, root: Node | Sentinel, compare: Compare, start: Any, end: Any
    ) -> None:
        self._stack: list[Node] = []
        self._compare = compare
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Check end bound
        if self._end is not None and self._compare(node.value, self._end) >= 0:
            self._stack.clear()
            raise StopIteration

        # Push right subtree's left path
        self._push_left_path(node.right, None)

        return node.value

    def _push_left_path(self, node: Node | Sentinel, start: Any) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node is not NIL:
            if start is not None and self._compare(node.value, start) < 0:
                # Skip nodes less than start
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class _AsyncRangeIterator(AsyncIterator[Any]):
    """Async iterator for range queries on Red-Black Tree (in-memory, no I/O)."""

    def __init__(
        self, root: Node | Sentinel, compare: Compare, start: Any, end: Any
    ) -> None:
        self._iterator = _RangeIterator(root, compare, start, end)

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> Any:
        try:
            return next(self._iterator)
        except StopIteration:
            raise StopAsyncIteration from None
