"""
RangeIterable protocol for data structures that support range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class RangeIterable(ABC):
    """
    Protocol for data structures that support iteration over a range of values.

    Implementations must support:
    - Full ascending iteration via __iter__
    - Descending iteration via __reversed__
    - Range-bounded iteration via iterator(start, end)
    - Async iteration via __aiter__ and async_iterator(start, end)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all values in ascending order."""
        pass

    @abstractmethod
    def __reversed__(self) -> Iterator[Any]:
        """Return an iterator over all values in descending order."""
        pass

    @abstractmethod
    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Any]:
        """
        Return an iterator over values in the specified range.

        Args:
            start: Start value (inclusive). If None, starts from the smallest value.
            end: End value (exclusive). If None, iterates to the largest value.

        Returns:
            Iterator yielding values in ascending order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all values in ascending order."""
        pass

    @abstractmethod
    def async_iterator(self, start: Any = None, end: Any = None) -> AsyncIterator[Any]:
        """
        Return an async iterator over values in the specified range.

        Args:
            start: Start value (inclusive). If None, starts from the smallest value.
            end: End value (exclusive). If None, iterates to the largest value.

        Returns:
            AsyncIterator yielding values in ascending order.
        """
        pass
