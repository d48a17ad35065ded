"""
Red-Black Tree implementation for sorted key storage.

Worst-case O(log N) search, insert and delete regardless of insertion order.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from rbsorted.interfaces.sorted_container import SortedContainer
from rbsorted.models.color import Color
from rbsorted.models.exceptions import (
    ContractViolationError,
    EmptyTreeError,
    InvariantViolationError,
)
from rbsorted.models.node import Node, color_of
from rbsorted.models.sortedcontainers.iterators import (
    ColoredIterator,
    RangeIterator,
    ReverseIterator,
)
from rbsorted.models.sortedcontainers.validator import InvariantValidator

logger = logging.getLogger(__name__)


class RedBlackTree(SortedContainer):
    """
    Red-Black Tree implementation of SortedContainer.

    Properties maintained:
    1. Every node is either red or black
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from a node to nil has same number of black nodes
    5. Nil (absent) children count as black

    Duplicate keys are rejected: the container behaves like a sorted set.
    """

    def __init__(
        self,
        keys: Iterable[Any] | None = None,
        *,
        key: Callable[[Any], Any] | None = None,
        check_invariants: bool = False,
    ) -> None:
        """
        Initialize the tree.

        Args:
            keys: Optional initial keys, inserted one by one.
            key: Sort-key function applied to stored keys before comparing,
                 as in ``sorted(key=...)``. None compares keys directly.
            check_invariants: Run the invariant checker after every successful
                 insert or delete (debug mode, O(N) per mutation).
        """
        if key is not None and not callable(key):
            raise TypeError(f"key must be callable or None, got {type(key).__name__}")
        if not isinstance(check_invariants, bool):
            raise TypeError(
                f"check_invariants must be a bool, got {type(check_invariants).__name__}"
            )

        self._root: Node | None = None
        self._size: int = 0
        self._sort_key = key
        self._check_invariants = check_invariants

        if keys is not None:
            for item in keys:
                self.insert(item)

    def insert(self, key: Any) -> bool:
        """Insert a key, rejecting duplicates. O(log N)"""
        if self._root is None:
            self._root = Node(key=key, color=Color.BLACK)
            self._size = 1
            self._after_mutation()
            return True

        # Find insertion point
        target = self._project(key)
        parent = self._root
        current: Node | None = self._root
        go_left = False

        while current is not None:
            parent = current
            current_key = self._project(current.key)
            if target < current_key:
                current = current.left
                go_left = True
            elif current_key < target:
                current = current.right
                go_left = False
            else:
                logger.debug(f"Rejected duplicate key {key!r}")
                return False

        # Insert new red leaf
        new_node = Node(key=key, parent=parent)
        if go_left:
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1
        self._fix_insert(new_node)
        self._after_mutation()
        return True

    def delete(self, key: Any) -> bool:
        """Remove a key. O(log N)"""
        node = self._find_node(key)
        if node is None:
            logger.debug(f"Delete miss for key {key!r}")
            return False

        self._delete_node(node)
        self._size -= 1
        self._after_mutation()
        return True

    def contains(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def traverse(self) -> list[Any]:
        return list(self)

    def traverse_with_colors(self) -> list[tuple[Any, Color]]:
        """Return ``(key, color)`` pairs in ascending key order."""
        return list(ColoredIterator(self._root))

    def size(self) -> int:
        return self._size

    def validate(self) -> bool:
        """Recompute every invariant over the whole tree. O(N)"""
        try:
            self.check()
        except InvariantViolationError as e:
            logger.warning(f"Red-black invariant violated: {e}")
            return False
        return True

    def check(self) -> None:
        """
        Like validate(), but raise instead of returning False.

        Raises:
            InvariantViolationError: Describing the first broken invariant.
        """
        InvariantValidator(self._root, self._size, self._sort_key).check()

    def clear(self) -> None:
        """Remove every key."""
        self._root = None
        self._size = 0
        logger.debug("Tree cleared")

    def min_key(self) -> Any:
        """Smallest stored key. O(log N)"""
        if self._root is None:
            raise EmptyTreeError("min_key() on an empty tree")
        return self._minimum(self._root).key

    def max_key(self) -> Any:
        """Largest stored key. O(log N)"""
        if self._root is None:
            raise EmptyTreeError("max_key() on an empty tree")
        node = self._root
        while node.right:
            node = node.right
        return node.key

    def successor(self, key: Any) -> Any | None:
        """
        Smallest stored key strictly greater than ``key``.

        ``key`` itself does not need to be stored.

        Returns:
            The key, or None if no stored key is greater.
        """
        target = self._project(key)
        best = None
        current = self._root
        while current is not None:
            if target < self._project(current.key):
                best = current
                current = current.left
            else:
                current = current.right
        return best.key if best else None

    def predecessor(self, key: Any) -> Any | None:
        """
        Largest stored key strictly smaller than ``key``.

        Returns:
            The key, or None if no stored key is smaller.
        """
        target = self._project(key)
        best = None
        current = self._root
        while current is not None:
            if self._project(current.key) < target:
                best = current
                current = current.right
            else:
                current = current.left
        return best.key if best else None

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path. O(N)"""
        if self._root is None:
            return 0

        tallest = 0
        stack: list[tuple[Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            tallest = max(tallest, depth)
            if node.left:
                stack.append((node.left, depth + 1))
            if node.right:
                stack.append((node.right, depth + 1))
        return tallest

    def black_height(self) -> int:
        """
        Black-height of the root.

        Counts BLACK nodes below the root down to nil, the nil position
        included. Any path gives the same count on a valid tree, so the
        leftmost one is used.
        """
        count = 0
        node = self._root
        while node is not None:
            node = node.left
            if color_of(node) == Color.BLACK:
                count += 1
        return count

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()

    def __reversed__(self) -> Iterator[Any]:
        return ReverseIterator(self._root)

    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Any]:
        return RangeIterator(self._root, start, end, self._sort_key)

    def __repr__(self) -> str:
        return f"RedBlackTree({self.traverse()!r})"

    def _project(self, key: Any) -> Any:
        """Apply the configured sort-key function."""
        return self._sort_key(key) if self._sort_key is not None else key

    def _after_mutation(self) -> None:
        if self._check_invariants:
            self.check()

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key."""
        target = self._project(key)
        current = self._root
        while current is not None:
            current_key = self._project(current.key)
            if target < current_key:
                current = current.left
            elif current_key < target:
                current = current.right
            else:
                return current
        return None

    def _minimum(self, node: Node) -> Node:
        """Leftmost node of the subtree rooted at node."""
        while node.left:
            node = node.left
        return node

    def _fix_insert(self, node: Node) -> None:
        """Fix Red-Black Tree properties after inserting a red node."""
        while node.parent is not None and node.parent.color == Color.RED:
            parent = node.parent
            # A red parent is never the root, so the grandparent exists
            grandparent = parent.parent

            if parent is grandparent.left:
                uncle = grandparent.right

                if color_of(uncle) == Color.RED:
                    # Case A: Uncle is red
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                if node is parent.right:
                    # Case B: Node is right child (triangle)
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent

                # Case C: Node is left child (line)
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left

                if color_of(uncle) == Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue

                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent

                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_left(grandparent)

        self._root.color = Color.BLACK

    def _rotate_left(self, node: Node) -> None:
        """Left rotation."""
        right_child = node.right
        if right_child is None:
            raise ContractViolationError(
                f"rotate_left on key {node.key!r} which has no right child"
            )

        node.right = right_child.left
        if right_child.left:
            right_child.left.parent = node

        right_child.parent = node.parent

        if node.parent is None:
            self._root = right_child
        elif node is node.parent.left:
            node.parent.left = right_child
        else:
            node.parent.right = right_child

        right_child.left = node
        node.parent = right_child

    def _rotate_right(self, node: Node) -> None:
        """Right rotation."""
        left_child = node.left
        if left_child is None:
            raise ContractViolationError(
                f"rotate_right on key {node.key!r} which has no left child"
            )

        node.left = left_child.right
        if left_child.right:
            left_child.right.parent = node

        left_child.parent = node.parent

        if node.parent is None:
            self._root = left_child
        elif node is node.parent.right:
            node.parent.right = left_child
        else:
            node.parent.left = left_child

        left_child.right = node
        node.parent = left_child

    def _delete_node(self, node: Node) -> None:
        """Delete a node from the tree."""
        if node.left and node.right:
            # Node has two children - find successor
            successor = self._minimum(node.right)

            # Copy successor's key to node, then unlink the successor
            node.key = successor.key
            node = successor

        # Node has at most one child
        child = node.left if node.left else node.right
        parent = node.parent
        removed_color = node.color

        self._replace_node(node, child)
        node.left = node.right = node.parent = None

        if removed_color == Color.BLACK:
            self._fix_delete(child, parent)

    def _replace_node(self, node: Node, child: Node | None) -> None:
        """Replace node with child in tree."""
        if node.parent is None:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child

        if child:
            child.parent = node.parent

    def _fix_delete(self, node: Node | None, parent: Node | None) -> None:
        """
        Fix Red-Black Tree properties after removing a black node.

        ``node`` carries the missing black and may be nil, which is why its
        parent is passed along explicitly.
        """
        while node is not self._root and color_of(node) == Color.BLACK:
            if node is parent.left:
                sibling = parent.right

                if color_of(sibling) == Color.RED:
                    # Case 1: Sibling is red
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    sibling = parent.right

                if sibling is None:
                    raise ContractViolationError(
                        f"double-black under key {parent.key!r} has no sibling"
                    )

                if (
                    color_of(sibling.left) == Color.BLACK
                    and color_of(sibling.right) == Color.BLACK
                ):
                    # Case 2: Both of sibling's children are black
                    sibling.color = Color.RED
                    node = parent
                    parent = node.parent
                else:
                    if color_of(sibling.right) == Color.BLACK:
                        # Case 3: Sibling's near child is red, far child black
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_right(sibling)
                        sibling = parent.right

                    # Case 4: Sibling's far child is red
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    sibling.right.color = Color.BLACK
                    self._rotate_left(parent)
                    node = self._root
            else:
                sibling = parent.left

                if color_of(sibling) == Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    sibling = parent.left

                if sibling is None:
                    raise ContractViolationError(
                        f"double-black under key {parent.key!r} has no sibling"
                    )

                if (
                    color_of(sibling.left) == Color.BLACK
                    and color_of(sibling.right) == Color.BLACK
                ):
                    sibling.color = Color.RED
                    node = parent
                    parent = node.parent
                else:
                    if color_of(sibling.left) == Color.BLACK:
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_left(sibling)
                        sibling = parent.left

                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    sibling.left.color = Color.BLACK
                    self._rotate_right(parent)
                    node = self._root

        if node:
            node.color = Color.BLACK
