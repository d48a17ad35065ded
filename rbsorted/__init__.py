"""
Ordered, set-like container backed by a Red-Black Tree.

This package provides a sorted container with worst-case bounds:
- insert(key) - O(log N), duplicates rejected
- delete(key) - O(log N)
- contains(key) - O(log N)
- traverse() / iteration / iterator(start, end) - keys in ascending order
- validate() - whole-tree check of the red-black invariants
"""

from rbsorted.interfaces import RangeIterable, SortedContainer
from rbsorted.models.color import Color
from rbsorted.models.exceptions import (
    ContractViolationError,
    EmptyTreeError,
    InvariantViolationError,
    RedBlackTreeError,
)
from rbsorted.models.sortedcontainers import RedBlackTree

__all__ = [
    "Color",
    "ContractViolationError",
    "EmptyTreeError",
    "InvariantViolationError",
    "RangeIterable",
    "RedBlackTree",
    "RedBlackTreeError",
    "SortedContainer",
]
