"""
RangeIterable protocol for data structures that support ordered iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class RangeIterable(ABC):
    """
    Protocol for data structures that support iteration over a range of keys.

    Implementations must support:
    - Full ascending iteration via __iter__
    - Descending iteration via __reversed__
    - Range-bounded iteration via iterator(start, end)

    Every call returns a fresh iterator, so iteration is restartable.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all keys in ascending order."""
        pass

    @abstractmethod
    def __reversed__(self) -> Iterator[Any]:
        """Return an iterator over all keys in descending order."""
        pass

    @abstractmethod
    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Any]:
        """
        Return an iterator over keys in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            Iterator yielding keys in ascending order.
        """
        pass
