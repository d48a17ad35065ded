"""
In-order iterators over a Red-Black Tree.

All iterators walk the tree with an explicit stack instead of recursion and
never modify node colors or links. Mutating the tree while an iterator is
live is not supported.
"""

from collections.abc import Callable, Iterator
from typing import Any

from rbsorted.models.color import Color
from rbsorted.models.node import Node


class _NodeRangeIterator(Iterator[Any]):
    """Ascending walk over the nodes whose keys fall in [start, end)."""

    def __init__(
        self,
        root: Node | None,
        start: Any = None,
        end: Any = None,
        sort_key: Callable[[Any], Any] | None = None,
    ) -> None:
        self._stack: list[Node] = []
        self._sort_key = sort_key
        self._end = self._project(end) if end is not None else None

        # Initialize stack with nodes >= start
        self._push_left_path(root, self._project(start) if start is not None else None)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Check end bound
        if self._end is not None and not self._project(node.key) < self._end:
            self._stack.clear()
            raise StopIteration

        # Push right subtree's left path
        self._push_left_path(node.right, None)

        return self._emit(node)

    def _emit(self, node: Node) -> Any:
        return node

    def _project(self, key: Any) -> Any:
        return self._sort_key(key) if self._sort_key is not None else key

    def _push_left_path(self, node: Node | None, start: Any) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node:
            if start is not None and self._project(node.key) < start:
                # Skip nodes less than start
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class RangeIterator(_NodeRangeIterator):
    """Iterator for range queries on Red-Black Tree, yielding keys."""

    def _emit(self, node: Node) -> Any:
        return node.key


class ColoredIterator(_NodeRangeIterator):
    """Full in-order walk yielding ``(key, color)`` pairs."""

    def __init__(self, root: Node | None) -> None:
        super().__init__(root)

    def _emit(self, node: Node) -> tuple[Any, Color]:
        return node.key, node.color


class ReverseIterator(Iterator[Any]):
    """Descending walk over all keys (right subtree, self, left subtree)."""

    def __init__(self, root: Node | None) -> None:
        self._stack: list[Node] = []
        self._push_right_path(root)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()
        self._push_right_path(node.left)
        return node.key

    def _push_right_path(self, node: Node | None) -> None:
        while node:
            self._stack.append(node)
            node = node.right
