"""
Node color for the Red-Black Tree.
"""

from enum import IntEnum


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1
