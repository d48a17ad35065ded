"""
Data models for the Red-Black Tree.
"""

from rbsorted.models.color import Color
from rbsorted.models.node import Node, color_of

__all__ = [
    "Color",
    "Node",
    "color_of",
]
