"""
Tests for matrix normalization.
"""

import numpy as np
import pytest

from matrix_reorder.algorithms.normalization import (
    NormalizationMode,
    RangePolicy,
    normalize,
    scale_line,
)


def test_row_min_max_example():
    """[[1,2],[3,4]] normalized per row gives [[0,1],[0,1]]."""
    result = normalize([[1, 2], [3, 4]], "row", row_names=["a", "b"])
    np.testing.assert_allclose(result, [[0.0, 1.0], [0.0, 1.0]])


def test_column_min_max():
    """Each column is rescaled independently."""
    result = normalize([[1, 10], [3, 30], [2, 20]], "column", column_names=["x", "y"])
    np.testing.assert_allclose(result, [[0.0, 0.0], [1.0, 1.0], [0.5, 0.5]])


def test_global_min_max():
    """Global mode uses a single min/max for the whole matrix."""
    result = normalize([[0, 5], [10, 2.5]], NormalizationMode.GLOBAL)
    np.testing.assert_allclose(result, [[0.0, 0.5], [1.0, 0.25]])


@pytest.mark.parametrize("mode", ["row", "column", "global"])
def test_constant_values_map_to_half(mode):
    """Constant input normalizes to 0.5 everywhere, never 0."""
    data = np.full((3, 4), 7.0)
    result = normalize(data, mode, row_names=list("abc"), column_names=list("wxyz"))
    assert result.shape == (3, 4)
    np.testing.assert_array_equal(result, 0.5)


def test_constant_row_among_varying_rows():
    """Only the constant row gets the 0.5 sentinel."""
    result = normalize([[2, 2, 2], [0, 5, 10]], "row", row_names=["flat", "ramp"])
    np.testing.assert_allclose(result, [[0.5, 0.5, 0.5], [0.0, 0.5, 1.0]])


def test_none_returns_empty():
    """Mode none signals 'use raw values' with an empty result."""
    result = normalize([[1, 2], [3, 4]], "none")
    assert result.size == 0


def test_zero_max_policy_per_label():
    """Zero-max rows divide by their max; other rows stay min-max."""
    result = normalize(
        [[2, 4], [2, 4]],
        "row",
        ranges={"b": RangePolicy.ZERO_MAX},
        row_names=["a", "b"],
    )
    np.testing.assert_allclose(result, [[0.0, 1.0], [0.5, 1.0]])


def test_zero_max_all_zero_line():
    """Zero-max with max == 0 gives 0 rather than dividing by zero."""
    result = normalize(
        [[0, 0], [0, 3]],
        "column",
        ranges={"x": "zero-max", "y": "zero-max"},
        column_names=["x", "y"],
    )
    np.testing.assert_allclose(result, [[0.0, 0.0], [0.0, 1.0]])


def test_global_ignores_range_policies():
    """Global mode always uses min-max."""
    result = normalize([[1, 3]], "global", ranges={"a": "zero-max"}, row_names=["a"])
    np.testing.assert_allclose(result, [[0.0, 1.0]])


def test_normalize_does_not_mutate_input():
    """The raw matrix is left untouched."""
    data = np.array([[1.0, 2.0], [3.0, 4.0]])
    normalize(data, "row", row_names=["a", "b"])
    np.testing.assert_array_equal(data, [[1.0, 2.0], [3.0, 4.0]])


def test_values_within_unit_interval():
    """Min-max output lies in [0, 1] for arbitrary input."""
    rng = np.random.default_rng(3)
    data = rng.normal(size=(8, 6)) * 100
    for mode in ("row", "column", "global"):
        result = normalize(data, mode)
        assert result.min() >= 0.0
        assert result.max() <= 1.0


def test_scale_line_empty():
    """An empty line stays empty."""
    assert scale_line(np.array([])).size == 0


def test_unknown_mode_raises():
    """Unknown modes are rejected."""
    with pytest.raises(ValueError):
        normalize([[1, 2]], "diagonal")
