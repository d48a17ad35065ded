"""
Sorted container implementations.
"""

from rbsorted.models.sortedcontainers.red_black_tree import RedBlackTree

__all__ = ["RedBlackTree"]
