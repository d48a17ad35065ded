"""
Custom exceptions for the Red-Black Tree.

Key-not-found and duplicate-key are not errors: they are reported through
boolean results and never raised.
"""

from typing import Any


class RedBlackTreeError(Exception):
    """Base class for all errors raised by this package."""


class ContractViolationError(RedBlackTreeError):
    """
    Raised when an internal precondition is broken.

    For example a left rotation on a node without a right child. This
    indicates a bug in the balancing code and is never handled by the tree.
    """


class InvariantViolationError(RedBlackTreeError):
    """
    Raised when the invariant checker finds a broken red-black property.
    """

    def __init__(self, invariant: str, message: str, key: Any = None):
        """
        Initialize violation error.

        Args:
            invariant: Short name of the broken invariant.
            message: Human readable description.
            key: Key of the node where the violation was detected, if any.
        """
        self.invariant = invariant
        self.key = key
        super().__init__(f"{invariant}: {message}")


class EmptyTreeError(RedBlackTreeError, ValueError):
    """Raised when asking an empty tree for its minimum or maximum key."""
