"""
Shared pytest fixtures for red-black tree tests.
"""

import random

import pytest

from redblack import RedBlackTree


def compare_by_key(a, b) -> int:
    """Order (key, label) pairs by key only, so labels tell duplicates apart."""
    return (a[0] > b[0]) - (a[0] < b[0])


@pytest.fixture
def tree():
    """Provide an empty tree using natural ordering."""
    return RedBlackTree()


@pytest.fixture
def keyed_tree():
    """Provide an empty tree ordering (key, label) pairs by key."""
    return RedBlackTree(compare=compare_by_key)


@pytest.fixture
def seven_node_tree():
    """Provide the tree built from 50, 30, 70, 20, 40, 60, 80."""
    return RedBlackTree([50, 30, 70, 20, 40, 60, 80])


@pytest.fixture
def rng():
    """Provide a seeded random generator so failures are reproducible."""
    return random.Random(1234)
