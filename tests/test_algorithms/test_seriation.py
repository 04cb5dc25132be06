"""
Tests for greedy seriation and the 2D sort.
"""

import numpy as np
import pytest

from matrix_reorder.algorithms.reordering import is_permutation
from matrix_reorder.algorithms.seriation import greedy_seriation, two_dim_sort


# ------------------------------------------------------------------
# greedy_seriation
# ------------------------------------------------------------------


def test_greedy_seriation_small_chain():
    """Starts at the most central line and follows the strongest links."""
    lines = np.array([[1, 2, 3], [1, 2, 3.1], [3, 2, 1]], dtype=float)
    np.testing.assert_array_equal(greedy_seriation(lines), [1, 0, 2])


def test_greedy_seriation_groups_blocks(block_matrix):
    """Correlated rows and columns end up adjacent."""
    _, _, data = block_matrix
    X = np.array(data)

    rows = greedy_seriation(X)
    assert is_permutation(rows, 6)
    assert {frozenset(rows[:3]), frozenset(rows[3:])} == {
        frozenset({0, 2, 4}),
        frozenset({1, 3, 5}),
    }

    cols = greedy_seriation(X.T)
    assert is_permutation(cols, 5)
    assert set(cols[:3]) == {0, 2, 4} or set(cols[:2]) == {1, 3}


def test_greedy_seriation_constant_lines():
    """All-zero similarity still yields a full permutation."""
    order = greedy_seriation(np.ones((4, 3)))
    np.testing.assert_array_equal(order, [0, 1, 2, 3])


def test_greedy_seriation_empty_and_single():
    assert greedy_seriation(np.zeros((0, 3))).size == 0
    np.testing.assert_array_equal(greedy_seriation(np.array([[1.0, 2.0]])), [0])


def test_greedy_seriation_random_is_permutation():
    rng = np.random.default_rng(21)
    X = rng.normal(size=(15, 8))
    assert is_permutation(greedy_seriation(X), 15)
    assert is_permutation(greedy_seriation(X.T), 8)


# ------------------------------------------------------------------
# two_dim_sort
# ------------------------------------------------------------------


def test_two_dim_sort_2x2_terminates():
    rows, cols, info = two_dim_sort(np.array([[1.0, 2.0], [3.0, 4.0]]), [0, 1], [0, 1])
    assert info["n_iter"] <= 500
    assert is_permutation(rows, 2)
    assert is_permutation(cols, 2)


def test_two_dim_sort_stable_input_converges_immediately():
    rows, cols, info = two_dim_sort(np.eye(2), [0, 1], [0, 1])
    np.testing.assert_array_equal(rows, [0, 1])
    np.testing.assert_array_equal(cols, [0, 1])
    assert info == {"n_iter": 1, "converged": True}


def test_two_dim_sort_single_bubble_pass_per_iteration():
    """One iteration moves the heaviest row to the end but does not fully sort."""
    X = np.array([[3.0], [2.0], [1.0]])

    rows, _, info = two_dim_sort(X, [0, 1, 2], [0], max_iter=1)
    np.testing.assert_array_equal(rows, [1, 2, 0])
    assert info == {"n_iter": 1, "converged": False}

    rows, cols, info = two_dim_sort(X, [0, 1, 2], [0])
    np.testing.assert_array_equal(rows, [2, 1, 0])
    np.testing.assert_array_equal(cols, [0])
    assert info == {"n_iter": 3, "converged": True}


def test_two_dim_sort_starts_from_current_order():
    X = np.array([[3.0], [1.0], [2.0]])
    rows, _, info = two_dim_sort(X, [1, 2, 0], [0])
    np.testing.assert_array_equal(rows, [1, 2, 0])
    assert info["n_iter"] == 1


def test_two_dim_sort_zero_columns_do_not_produce_nan():
    X = np.array([[0.0, 1.0, 0.0], [0.0, 2.0, 0.0], [0.0, 0.5, 0.0]])
    rows, cols, info = two_dim_sort(X, [0, 1, 2], [0, 1, 2])
    assert is_permutation(rows, 3)
    assert is_permutation(cols, 3)
    assert info["converged"]


def test_two_dim_sort_respects_iteration_cap():
    rng = np.random.default_rng(8)
    X = rng.uniform(0, 10, size=(30, 20))
    rows, cols, info = two_dim_sort(X, np.arange(30), np.arange(20), max_iter=3)
    assert info["n_iter"] <= 3
    assert is_permutation(rows, 30)
    assert is_permutation(cols, 20)


def test_two_dim_sort_does_not_mutate_inputs():
    row_order = np.array([2, 0, 1])
    col_order = np.array([1, 0])
    two_dim_sort(np.arange(6, dtype=float).reshape(3, 2), row_order, col_order)
    np.testing.assert_array_equal(row_order, [2, 0, 1])
    np.testing.assert_array_equal(col_order, [1, 0])


def test_two_dim_sort_invalid_max_iter():
    with pytest.raises(ValueError):
        two_dim_sort(np.eye(2), [0, 1], [0, 1], max_iter=0)
