"""
Per-line statistics and pairwise similarity.

Every reordering method ranks axis-lines either by a scalar summary
(``statistic``) or by Pearson correlation against other lines
(``correlation`` / ``similarity_matrix``). Degenerate inputs fall back to 0
instead of producing NaN.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Union
import numpy as np

Array2D = np.ndarray
Values = Union[Sequence[float], np.ndarray]


class StatisticMethod(str, Enum):
    SUM = "sum"
    MEAN = "mean"
    MEDIAN = "median"
    MAX = "max"
    MIN = "min"
    VARIANCE = "variance"


def statistic(values: Values, method: StatisticMethod | str) -> float:
    """
    Summarize a sequence of values.

    Non-finite entries (NaN, +/-inf) are dropped first. If nothing is left
    the result is 0.

    Args:
        values: Sequence of numbers
        method: sum, mean, median, max, min or variance (population variance)

    Returns:
        The statistic as a Python float
    """
    method = StatisticMethod(method)
    v = np.asarray(values, dtype=np.float64).ravel()
    v = v[np.isfinite(v)]
    if v.size == 0:
        return 0.0

    if method is StatisticMethod.SUM:
        return float(v.sum())
    if method is StatisticMethod.MEAN:
        return float(v.mean())
    if method is StatisticMethod.MEDIAN:
        s = np.sort(v)
        mid = s.size // 2
        if s.size % 2 == 0:
            return float((s[mid - 1] + s[mid]) / 2)
        return float(s[mid])
    if method is StatisticMethod.MAX:
        return float(v.max())
    if method is StatisticMethod.MIN:
        return float(v.min())
    mean = v.mean()
    return float(np.mean((v - mean) ** 2))


def correlation(a: Values, b: Values) -> float:
    """
    Pearson correlation coefficient using the sum-of-products formula.

    Returns 0 when the sequences differ in length or when either is constant
    (zero denominator). The result is clipped to [-1, 1].
    """
    x = np.asarray(a, dtype=np.float64).ravel()
    y = np.asarray(b, dtype=np.float64).ravel()
    if x.size != y.size or x.size == 0:
        return 0.0

    n = x.size
    sx, sy = x.sum(), y.sum()
    num = n * np.dot(x, y) - sx * sy
    den = np.sqrt((n * np.dot(x, x) - sx * sx) * (n * np.dot(y, y) - sy * sy))
    if den == 0 or not np.isfinite(den):
        return 0.0
    r = num / den
    if not np.isfinite(r):
        return 0.0
    return float(np.clip(r, -1.0, 1.0))


def similarity_matrix(lines: Array2D) -> Array2D:
    """
    Pairwise correlation between the rows of *lines*.

    Uses the same sum-of-products formula and zero fallback as
    ``correlation``; the diagonal is forced to 1 (a line is always fully
    similar to itself, constant or not).

    Args:
        lines: Array of shape (N, L), one axis-line per row

    Returns:
        Symmetric array of shape (N, N)
    """
    X = np.asarray(lines, dtype=np.float64)
    N, L = X.shape
    if N == 0:
        return np.zeros((0, 0), dtype=np.float64)

    s = X.sum(axis=1)
    cross = L * (X @ X.T) - np.outer(s, s)
    var = np.diag(cross).copy()
    den2 = np.outer(var, var)
    with np.errstate(invalid="ignore", divide="ignore"):
        S = cross / np.sqrt(den2)
    S[~np.isfinite(S) | (den2 <= 0)] = 0.0
    S = np.clip(S, -1.0, 1.0)
    np.fill_diagonal(S, 1.0)
    return S
