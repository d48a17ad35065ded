"""
Abstract base classes and protocols for sorted containers.
"""

from rbsorted.interfaces.range_iterable import RangeIterable
from rbsorted.interfaces.sorted_container import SortedContainer

__all__ = ["RangeIterable", "SortedContainer"]
