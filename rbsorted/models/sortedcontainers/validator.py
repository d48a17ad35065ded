"""
InvariantValidator - Whole-tree check of the red-black properties.

Diagnostic only: it is O(N) and meant for test suites and debug mode, not
for the hot path.
"""

from collections.abc import Callable
from typing import Any

from rbsorted.models.color import Color
from rbsorted.models.exceptions import InvariantViolationError
from rbsorted.models.node import Node, color_of


class InvariantValidator:
    """
    Verifies a Red-Black Tree rooted at a given node.

    Checked, in walk order:
    1. Every node is RED or BLACK
    2. Root is BLACK and has no parent
    3. No RED node has a RED child
    4. Every path from a node to nil has the same number of BLACK nodes
    5. Keys are in strict ascending in-order sequence
    6. Each child's parent link points back at its parent
    7. The node count matches the tree's size counter
    """

    def __init__(
        self,
        root: Node | None,
        size: int,
        sort_key: Callable[[Any], Any] | None = None,
    ) -> None:
        """
        Initialize validator.

        Args:
            root: Root node of the tree (None for an empty tree).
            size: The tree's incrementally maintained size.
            sort_key: Ordering key function the tree compares with.
        """
        self._root = root
        self._size = size
        self._sort_key = sort_key

    def check(self) -> int:
        """
        Walk the whole tree and raise on the first broken invariant.

        Returns:
            Number of BLACK nodes on every root-to-nil path, counting both
            the root and the nil position.

        Raises:
            InvariantViolationError: If any invariant does not hold.
        """
        root = self._root
        if root is None:
            if self._size != 0:
                raise InvariantViolationError(
                    "size", f"empty tree reports size {self._size}"
                )
            return 1

        if root.parent is not None:
            raise InvariantViolationError("root-parent", "root has a parent link", root.key)
        if root.color != Color.BLACK:
            raise InvariantViolationError("root-black", "root is not BLACK", root.key)

        # Black-heights of finished subtrees, keyed by node identity
        heights: dict[int, int] = {}
        count = 0

        # (node, lower bound, upper bound, children done)
        stack: list[tuple[Node, Any, Any, bool]] = [(root, None, None, False)]
        while stack:
            node, low, high, done = stack.pop()

            if done:
                left_bh = heights.pop(id(node.left), 1) if node.left else 1
                right_bh = heights.pop(id(node.right), 1) if node.right else 1
                if left_bh != right_bh:
                    raise InvariantViolationError(
                        "black-height",
                        f"left path has {left_bh} BLACK nodes, right path has {right_bh}",
                        node.key,
                    )
                heights[id(node)] = left_bh + (1 if node.color == Color.BLACK else 0)
                continue

            count += 1
            self._check_node(node, low, high)

            stack.append((node, low, high, True))
            key = self._project(node.key)
            if node.right is not None:
                stack.append((node.right, key, high, False))
            if node.left is not None:
                stack.append((node.left, low, key, False))

        if count != self._size:
            raise InvariantViolationError(
                "size", f"tree holds {count} nodes but reports size {self._size}"
            )

        return heights[id(root)]

    def _check_node(self, node: Node, low: Any, high: Any) -> None:
        """Check the properties local to a single node."""
        if not isinstance(node.color, Color):
            raise InvariantViolationError(
                "color", f"node color {node.color!r} is neither RED nor BLACK", node.key
            )

        if node.color == Color.RED and (
            color_of(node.left) == Color.RED or color_of(node.right) == Color.RED
        ):
            raise InvariantViolationError("red-red", "RED node has a RED child", node.key)

        key = self._project(node.key)
        if low is not None and not low < key:
            raise InvariantViolationError(
                "order", "key is not greater than its left bound", node.key
            )
        if high is not None and not key < high:
            raise InvariantViolationError(
                "order", "key is not smaller than its right bound", node.key
            )

        for child in (node.left, node.right):
            if child is not None and child.parent is not node:
                raise InvariantViolationError(
                    "parent-link", "child does not link back to its parent", child.key
                )

    def _project(self, key: Any) -> Any:
        return self._sort_key(key) if self._sort_key is not None else key
