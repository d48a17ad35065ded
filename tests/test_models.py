"""
Tests for data models: Color, Node, and the RedBlackTree sorted container.
"""

import pytest

from rbsorted import Color, EmptyTreeError, RedBlackTree, SortedContainer
from rbsorted.models import Node, color_of


class TestColor:
    """Tests for Color."""

    def test_two_states(self):
        """Test that exactly RED and BLACK exist."""
        assert list(Color) == [Color.RED, Color.BLACK]

    def test_nil_is_black(self):
        """Test that an absent child reports BLACK."""
        assert color_of(None) == Color.BLACK
        assert color_of(Node(key=1)) == Color.RED


class TestNode:
    """Tests for Node."""

    def test_new_node_is_red_leaf(self):
        """Test creating a node."""
        node = Node(key=5)
        assert node.color == Color.RED
        assert node.left is None
        assert node.right is None
        assert node.parent is None

    def test_identity_equality(self):
        """Test that nodes with the same key are still distinct."""
        assert Node(key=5) != Node(key=5)

    def test_repr_skips_parent(self):
        """Test that repr does not walk back up to the parent."""
        parent = Node(key=1, color=Color.BLACK)
        child = Node(key=2, parent=parent)
        parent.right = child

        assert "parent" not in repr(child)


class TestRedBlackTree:
    """Tests for RedBlackTree sorted container."""

    def test_is_sorted_container(self, tree):
        """Test that the tree implements the container interface."""
        assert isinstance(tree, SortedContainer)

    def test_insert_and_contains(self, tree, sample_keys):
        """Test basic insert and contains operations."""
        for key in sample_keys:
            assert tree.insert(key)

        assert tree.contains("key1")
        assert tree.contains("key2")
        assert not tree.contains("key4")
        assert "key3" in tree
        assert "key4" not in tree

    def test_delete(self, tree):
        """Test delete operation."""
        tree.insert("key1")
        tree.insert("key2")

        assert tree.delete("key1")
        assert not tree.contains("key1")
        assert tree.contains("key2")
        assert not tree.delete("key3")

    def test_duplicate_rejected(self, tree):
        """Test inserting an existing key."""
        assert tree.insert("key1")
        assert not tree.insert("key1")

        assert tree.size() == 1
        assert tree.traverse() == ["key1"]

    def test_size_and_len(self, tree, large_sample_keys):
        """Test size accounting."""
        for key in large_sample_keys:
            tree.insert(key)

        assert tree.size() == 1000
        assert len(tree) == 1000
        assert tree

        tree.clear()
        assert tree.size() == 0
        assert not tree
        assert tree.traverse() == []

    def test_iteration(self, tree):
        """Test sorted iteration."""
        tree.insert("c")
        tree.insert("a")
        tree.insert("b")

        assert [k for k in tree] == ["a", "b", "c"]
        assert tree.traverse() == ["a", "b", "c"]

    def test_iteration_is_restartable(self, seven_node_tree):
        """Test that each iteration starts from the smallest key."""
        first = list(seven_node_tree)
        second = list(seven_node_tree)

        assert first == second == [2, 5, 7, 10, 12, 15, 20]

    def test_reversed_iteration(self, seven_node_tree):
        """Test descending iteration."""
        assert list(reversed(seven_node_tree)) == [20, 15, 12, 10, 7, 5, 2]

    def test_range_iteration(self, tree):
        """Test range iteration."""
        for i in range(10):
            tree.insert(f"key{i:02d}")

        # Range [key03, key07)
        keys = list(tree.iterator("key03", "key07"))
        assert keys == ["key03", "key04", "key05", "key06"]

    def test_open_ended_range_iteration(self, seven_node_tree):
        """Test range iteration with a single bound."""
        assert list(seven_node_tree.iterator(start=11)) == [12, 15, 20]
        assert list(seven_node_tree.iterator(end=7)) == [2, 5]
        assert list(seven_node_tree.iterator(30, 40)) == []

    def test_traverse_with_colors(self, seven_node_tree):
        """Test in-order traversal reporting colors."""
        assert seven_node_tree.traverse_with_colors() == [
            (2, Color.RED),
            (5, Color.BLACK),
            (7, Color.RED),
            (10, Color.BLACK),
            (12, Color.RED),
            (15, Color.BLACK),
            (20, Color.RED),
        ]

    def test_min_max(self, seven_node_tree):
        """Test smallest and largest key."""
        assert seven_node_tree.min_key() == 2
        assert seven_node_tree.max_key() == 20

    def test_min_max_empty(self, tree):
        """Test that an empty tree has no minimum or maximum."""
        with pytest.raises(EmptyTreeError):
            tree.min_key()
        with pytest.raises(ValueError):
            tree.max_key()

    def test_successor_predecessor(self, seven_node_tree):
        """Test neighbour lookups for stored and unstored keys."""
        assert seven_node_tree.successor(10) == 12
        assert seven_node_tree.predecessor(10) == 7
        assert seven_node_tree.successor(8) == 10
        assert seven_node_tree.predecessor(8) == 7

        assert seven_node_tree.successor(20) is None
        assert seven_node_tree.predecessor(2) is None

    def test_height_and_black_height(self, tree, seven_node_tree):
        """Test height helpers."""
        assert tree.height() == 0
        assert tree.black_height() == 0

        assert seven_node_tree.height() == 3
        # 10B -> 5B -> 2R -> nil: 5 and nil are black
        assert seven_node_tree.black_height() == 2

    def test_construct_from_iterable(self):
        """Test building a tree from keys, duplicates included."""
        tree = RedBlackTree([3, 1, 2, 3, 1])

        assert tree.traverse() == [1, 2, 3]
        assert tree.size() == 3
        assert tree.validate()

    def test_repr(self):
        """Test string representation."""
        assert repr(RedBlackTree([2, 1])) == "RedBlackTree([1, 2])"

    def test_incomparable_keys(self, tree):
        """Test that mixing incomparable keys raises TypeError."""
        tree.insert(1)
        with pytest.raises(TypeError):
            tree.insert("one")

        assert tree.traverse() == [1]
