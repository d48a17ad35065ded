"""
Shared pytest fixtures for Red-Black Tree tests.
"""

import random

import pytest

from rbsorted import RedBlackTree


@pytest.fixture
def tree():
    """Provide a fresh, empty RedBlackTree."""
    return RedBlackTree()


@pytest.fixture
def checked_tree():
    """Provide an empty tree that validates itself after every mutation."""
    return RedBlackTree(check_invariants=True)


@pytest.fixture
def seven_node_tree():
    """
    Provide a full three-level tree.

    Shape after inserting 10, 5, 15, 2, 7, 12, 20:
    10B(5B(2R, 7R), 15B(12R, 20R))
    """
    return RedBlackTree([10, 5, 15, 2, 7, 12, 20])


@pytest.fixture
def rng():
    """Provide a seeded random generator so failures are reproducible."""
    return random.Random(12345)


@pytest.fixture
def sample_keys():
    """Provide sample keys for testing."""
    return ["key1", "key2", "key3"]


@pytest.fixture
def large_sample_keys():
    """Provide larger sample for stress testing."""
    return [f"key{i:04d}" for i in range(1000)]
