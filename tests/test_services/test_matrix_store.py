"""
Tests for the MatrixStore document object.
"""

import numpy as np
import pytest

from matrix_reorder.algorithms.normalization import NormalizationMode, RangePolicy
from matrix_reorder.exceptions import InvalidPermutationError, ShapeError
from matrix_reorder.services import MatrixStore


def test_new_store_is_empty():
    store = MatrixStore()
    assert not store.has_data
    assert store.shape == (0, 0)
    assert store.row_order.size == 0
    assert store.normalization.mode is NormalizationMode.NONE


def test_load_sets_identity_orders(small_store):
    assert small_store.has_data
    assert small_store.shape == (2, 2)
    assert small_store.row_names == ["a", "b"]
    assert small_store.column_names == ["x", "y"]
    np.testing.assert_array_equal(small_store.data, [[1, 2], [3, 4]])
    np.testing.assert_array_equal(small_store.row_order, [0, 1])
    np.testing.assert_array_equal(small_store.column_order, [0, 1])
    assert not small_store.has_normalized


def test_load_resets_normalization_and_order(small_store):
    small_store.set_normalization("row")
    small_store.set_row_order([1, 0])
    small_store.load(["p", "q", "r"], ["x"], [[1], [2], [3]])
    assert small_store.normalization.mode is NormalizationMode.NONE
    assert not small_store.has_normalized
    np.testing.assert_array_equal(small_store.row_order, [0, 1, 2])


def test_load_ragged_rows_is_all_or_nothing(small_store):
    small_store.set_row_order([1, 0])
    with pytest.raises(ShapeError):
        small_store.load(["p", "q"], ["x", "y"], [[1, 2], [3]])
    # previous state untouched
    assert small_store.row_names == ["a", "b"]
    np.testing.assert_array_equal(small_store.data, [[1, 2], [3, 4]])
    np.testing.assert_array_equal(small_store.row_order, [1, 0])


def test_load_row_name_count_mismatch():
    store = MatrixStore()
    with pytest.raises(ShapeError):
        store.load(["a"], ["x", "y"], [[1, 2], [3, 4]])
    assert not store.has_data


def test_load_non_numeric_values():
    store = MatrixStore()
    with pytest.raises(ValueError):
        store.load(["a"], ["x"], [["abc"]])
    assert not store.has_data


def test_load_empty_matrix():
    store = MatrixStore()
    store.load([], [], [])
    assert store.has_data
    assert store.shape == (0, 0)


def test_data_is_read_only(small_store):
    with pytest.raises(ValueError):
        small_store.data[0, 0] = 99
    with pytest.raises(ValueError):
        small_store.row_order[0] = 1


def test_load_copies_input():
    data = [[1.0, 2.0]]
    store = MatrixStore()
    store.load(["a"], ["x", "y"], data)
    data[0][0] = 50.0
    assert store.data[0, 0] == 1.0


def test_clear(small_store):
    small_store.set_normalization("global")
    small_store.clear()
    assert not small_store.has_data
    assert small_store.row_names == []
    assert small_store.normalized.size == 0
    assert small_store.row_order.size == 0


def test_set_row_order_validates(small_store):
    small_store.set_row_order([1, 0])
    for bad in ([0, 0], [0], [0, 1, 2], [0, 2], ["1", "0"], [0, None], None, 5):
        with pytest.raises(InvalidPermutationError):
            small_store.set_row_order(bad)
    np.testing.assert_array_equal(small_store.row_order, [1, 0])


def test_set_column_order_validates(small_store):
    small_store.set_column_order(np.array([1, 0]))
    with pytest.raises(InvalidPermutationError):
        small_store.set_column_order([1, 1])
    np.testing.assert_array_equal(small_store.column_order, [1, 0])


def test_set_order_copies_input(small_store):
    order = np.array([1, 0])
    small_store.set_row_order(order)
    order[0] = 0
    np.testing.assert_array_equal(small_store.row_order, [1, 0])


def test_reset_order(small_store):
    small_store.set_row_order([1, 0])
    small_store.set_column_order([1, 0])
    small_store.reset_order()
    np.testing.assert_array_equal(small_store.row_order, [0, 1])
    np.testing.assert_array_equal(small_store.column_order, [0, 1])


def test_set_normalization_row_example(small_store):
    small_store.set_normalization(NormalizationMode.ROW)
    assert small_store.has_normalized
    np.testing.assert_allclose(small_store.normalized, [[0, 1], [0, 1]])
    np.testing.assert_allclose(small_store.working_matrix(), [[0, 1], [0, 1]])


def test_set_normalization_none_uses_raw(small_store):
    small_store.set_normalization("row")
    small_store.set_normalization("none")
    assert not small_store.has_normalized
    np.testing.assert_array_equal(small_store.working_matrix(), [[1, 2], [3, 4]])


def test_range_policy_applies_and_resets_with_mode(small_store):
    small_store.set_normalization("row")
    small_store.set_range_policy("b", "zero-max")
    assert small_store.normalization.policy_for("b") is RangePolicy.ZERO_MAX
    assert small_store.normalization.policy_for("a") is RangePolicy.MIN_MAX
    np.testing.assert_allclose(small_store.normalized, [[0, 1], [0.75, 1]])

    small_store.set_normalization("column")
    assert small_store.normalization.ranges == {}


def test_normalization_state_is_a_copy(small_store):
    state = small_store.normalization
    state.ranges["a"] = RangePolicy.ZERO_MAX
    assert small_store.normalization.ranges == {}


def test_normalization_ignores_order(small_store):
    small_store.set_row_order([1, 0])
    small_store.set_normalization("column")
    np.testing.assert_allclose(small_store.normalized, [[0, 0], [1, 1]])
