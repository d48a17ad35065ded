"""
SortedContainer abstract base class for sorted, set-like data structures.
"""

from abc import abstractmethod
from typing import Any

from rbsorted.interfaces.range_iterable import RangeIterable


class SortedContainer(RangeIterable):
    """
    Abstract base class for sorted key containers.

    Provides O(log N) operations for insert, delete and contains.
    Inherits range iteration capabilities from RangeIterable.

    Implementations:
    - RedBlackTree: worst-case O(log N) bounds regardless of insertion order
    """

    @abstractmethod
    def insert(self, key: Any) -> bool:
        """
        Insert a key.

        Args:
            key: The key to insert.

        Returns:
            True if the key was inserted, False if it was already present.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove a key.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def contains(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def traverse(self) -> list[Any]:
        """
        Return all keys in ascending order.

        Time complexity: O(N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored keys.

        Returns:
            The count of entries in the container.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def validate(self) -> bool:
        """
        Check the container's structural invariants.

        Returns:
            True if every invariant holds, False otherwise.

        Intended for test suites; O(N).
        """
        pass
