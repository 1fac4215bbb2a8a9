"""
Abstract base classes for sorted containers.
"""

from redblack.interfaces.range_iterable import RangeIterable
from redblack.interfaces.sorted_container import SortedContainer

__all__ = ["RangeIterable", "SortedContainer"]
