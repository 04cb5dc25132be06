"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test modules.
"""

import numpy as np
import pytest

from matrix_reorder.services import MatrixStore, ReorderService


@pytest.fixture
def small_store():
    """
    Fixture for the 2x2 example matrix.

    Rows "a", "b"; columns "x", "y"; values [[1, 2], [3, 4]].
    """
    store = MatrixStore()
    store.load(["a", "b"], ["x", "y"], [[1, 2], [3, 4]])
    return store


@pytest.fixture
def block_matrix():
    """
    Fixture for a matrix with two hidden row/column blocks.

    Rows 0, 2, 4 correlate with each other, as do rows 1, 3, 5; columns
    follow the same interleaving.
    """
    high = [9.0, 1.0, 8.0, 2.0, 9.5]
    low = [1.0, 9.0, 2.0, 8.5, 1.5]
    data = [high, low, [h + 0.5 for h in high], [l + 0.2 for l in low],
            [h - 0.3 for h in high], [l - 0.1 for l in low]]
    row_names = [f"r{i}" for i in range(6)]
    column_names = [f"c{j}" for j in range(5)]
    return row_names, column_names, data


@pytest.fixture
def block_store(block_matrix):
    """Fixture for a store loaded with ``block_matrix``."""
    store = MatrixStore()
    store.load(*block_matrix)
    return store


@pytest.fixture
def random_store():
    """Fixture for a store with a reproducible 12x9 random matrix."""
    rng = np.random.default_rng(42)
    data = rng.uniform(-5, 20, size=(12, 9))
    store = MatrixStore()
    store.load([f"row{i}" for i in range(12)], [f"col{j}" for j in range(9)], data.tolist())
    return store


@pytest.fixture
def service_for():
    """Factory fixture building a ReorderService with a seeded generator."""
    def _make(store, seed=0, max_iter=500):
        return ReorderService(store, rng=np.random.default_rng(seed), max_iter=max_iter)

    return _make
