"""
Node - storage unit of the Red-Black Tree.
"""

from dataclasses import dataclass, field
from typing import Any

from rbsorted.models.color import Color


@dataclass(eq=False)
class Node:
    """
    Node in the Red-Black Tree.

    Children are owned through ``left``/``right``. ``parent`` is a plain
    back link used for upward walks during fixups and is left out of
    ``repr`` so printing never climbs back up the tree. Nodes compare by
    identity.

    An absent child (``None``) is the nil position and counts as BLACK.
    """

    key: Any
    color: Color = Color.RED
    left: "Node | None" = None
    right: "Node | None" = None
    parent: "Node | None" = field(default=None, repr=False)


def color_of(node: Node | None) -> Color:
    """Color of a node, with nil positions reported as BLACK."""
    return node.color if node is not None else Color.BLACK
