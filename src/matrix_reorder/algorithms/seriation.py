"""
Seriation algorithms.

Two heuristics that place similar lines next to each other:

- ``greedy_seriation``: nearest-neighbour chain over a correlation matrix.
- ``two_dim_sort``: iterative row/column reordering by normalized weights,
  one bubble pass per axis per iteration, in the spirit of reciprocal
  averaging.

Neither is an exact optimizer; both are deterministic.
"""

from __future__ import annotations

from typing import Any, Dict, Sequence, Tuple
import numpy as np

from .statistics import similarity_matrix
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

Array2D = np.ndarray

DEFAULT_MAX_ITER = 500


def greedy_seriation(lines: Array2D) -> np.ndarray:
    """
    Order lines by a greedy nearest-neighbour chain.

    Starts from the line with the largest total similarity, then repeatedly
    appends the unused line with the highest mean similarity to all lines
    selected so far. Ties go to the lowest original index.

    Args:
        lines: Array of shape (N, L), one axis-line per row

    Returns:
        Ordering of the N original indices
    """
    S = similarity_matrix(lines)
    n = S.shape[0]
    if n == 0:
        return np.zeros(0, dtype=np.intp)

    start = int(np.argmax(S.sum(axis=1)))
    selected = [start]
    used = np.zeros(n, dtype=bool)
    used[start] = True
    # Running sum of similarity to the selected set; the mean differs only
    # by the common factor len(selected).
    acc = S[:, start].copy()

    while len(selected) < n:
        scores = np.where(used, -np.inf, acc / len(selected))
        best = int(np.argmax(scores))
        if used[best] or not np.isfinite(scores[best]):
            remaining = np.flatnonzero(~used)
            selected.extend(int(i) for i in remaining)
            break
        selected.append(best)
        used[best] = True
        acc += S[:, best]

    return np.asarray(selected, dtype=np.intp)


def _line_weights(sub: Array2D) -> np.ndarray:
    """
    Weight per row of *sub*: scale every column to sum 1, then sum each row.

    Columns summing to 0 contribute 0.
    """
    col_sums = sub.sum(axis=0)
    scaled = np.divide(
        sub,
        col_sums,
        out=np.zeros_like(sub),
        where=col_sums != 0,
    )
    return scaled.sum(axis=1)


def _bubble_pass(order: np.ndarray, weights: np.ndarray) -> np.ndarray:
    """Single left-to-right bubble pass; the heavier neighbour moves right."""
    order = order.copy()
    weights = weights.copy()
    for i in range(order.size - 1):
        if weights[i] > weights[i + 1]:
            order[i], order[i + 1] = order[i + 1], order[i]
            weights[i], weights[i + 1] = weights[i + 1], weights[i]
    return order


def two_dim_sort(
    X: Array2D,
    row_order: Sequence[int],
    column_order: Sequence[int],
    *,
    max_iter: int = DEFAULT_MAX_ITER,
) -> Tuple[np.ndarray, np.ndarray, Dict[str, Any]]:
    """
    Iteratively reorder rows and columns by normalized weights.

    Each iteration:
    1. Column-normalize the submatrix in the current order and sum each row
       to get row weights; run one bubble pass over the row order.
    2. Row-normalize and sum each column to get column weights; run one
       bubble pass over the column order.

    Stops when neither order changed during an iteration or after
    *max_iter* iterations.

    Args:
        X: Matrix of shape (R, C) in original index space
        row_order: Current row ordering
        column_order: Current column ordering
        max_iter: Iteration cap

    Returns:
        Tuple of:
        - new row ordering
        - new column ordering
        - info: Dictionary with n_iter and converged
    """
    if max_iter < 1:
        raise ValueError(f"max_iter must be >= 1, got {max_iter}")

    X = np.asarray(X, dtype=np.float64)
    rows = np.asarray(row_order, dtype=np.intp).copy()
    cols = np.asarray(column_order, dtype=np.intp).copy()

    n_iter = 0
    converged = False
    for _ in range(max_iter):
        n_iter += 1
        prev_rows = rows.copy()
        prev_cols = cols.copy()

        sub = X[np.ix_(rows, cols)]
        rows = _bubble_pass(rows, _line_weights(sub))

        sub = X[np.ix_(rows, cols)]
        cols = _bubble_pass(cols, _line_weights(sub.T))

        if np.array_equal(rows, prev_rows) and np.array_equal(cols, prev_cols):
            converged = True
            break

    logger.info(
        "2D sort finished after %d iteration(s) (converged=%s)", n_iter, converged
    )
    return rows, cols, {"n_iter": n_iter, "converged": converged}
