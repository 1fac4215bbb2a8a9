"""
SortedContainer abstract base class for ordered value containers.
"""

from abc import abstractmethod
from collections.abc import Iterator
from typing import Any

from redblack.interfaces.range_iterable import RangeIterable


class SortedContainer(RangeIterable):
    """
    Abstract base class for sorted containers holding a multiset of values.

    Provides O(log N) operations for insert, remove and lookup.
    Inherits range iteration capabilities from RangeIterable.

    Implementations:
    - RedBlackTree
    """

    @abstractmethod
    def insert(self, value: Any) -> Any:
        """
        Insert a value. Equal values are kept side by side.

        Args:
            value: The value to insert.

        Returns:
            A handle to the stored value.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, value: Any) -> bool:
        """
        Remove one occurrence of a value.

        Args:
            value: The value to remove.

        Returns:
            True if the value was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def contains(self, value: Any) -> bool:
        """
        Check if a value is stored.

        Args:
            value: The value to check.

        Returns:
            True if the value exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def find(self, value: Any) -> Any | None:
        """
        Return the handle storing a value, or None if absent.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored values.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def min(self) -> Any | None:
        """Return the smallest value, or None when empty."""
        pass

    @abstractmethod
    def max(self) -> Any | None:
        """Return the largest value, or None when empty."""
        pass

    @abstractmethod
    def successor(self, value: Any) -> Any | None:
        """Return the smallest value strictly greater than `value`, or None."""
        pass

    @abstractmethod
    def predecessor(self, value: Any) -> Any | None:
        """Return the largest value strictly smaller than `value`, or None."""
        pass

    @abstractmethod
    def in_order(self) -> Iterator[Any]:
        """Return a lazy iterator over all values in ascending order."""
        pass
