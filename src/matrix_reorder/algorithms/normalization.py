"""
Matrix normalization.

Rescales a matrix per row, per column or globally into [0, 1]. Constant
lines map to the mid-scale value 0.5 under min-max scaling so they render
neither as empty nor as full cells.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional, Sequence
import numpy as np

from ..utils.logging_config import get_logger

logger = get_logger(__name__)

Array2D = np.ndarray

CONSTANT_FILL = 0.5


class NormalizationMode(str, Enum):
    NONE = "none"
    ROW = "row"
    COLUMN = "column"
    GLOBAL = "global"


class RangePolicy(str, Enum):
    ZERO_MAX = "zero-max"
    MIN_MAX = "min-max"


def empty_normalized() -> Array2D:
    """Return the empty matrix that signals "use raw values"."""
    return np.empty((0, 0), dtype=np.float64)


def scale_line(values: np.ndarray, policy: RangePolicy = RangePolicy.MIN_MAX) -> np.ndarray:
    """
    Rescale a single axis-line.

    Args:
        values: 1-D array of finite values
        policy: min-max gives ``(v - min) / (max - min)`` (0.5 for a constant
            line); zero-max gives ``v / max`` (0 when ``max == 0``)

    Returns:
        New float64 array of the same length
    """
    v = np.asarray(values, dtype=np.float64)
    if v.size == 0:
        return v.copy()
    lo = float(v.min())
    hi = float(v.max())
    if RangePolicy(policy) is RangePolicy.ZERO_MAX:
        if hi == 0:
            return np.zeros_like(v)
        return v / hi
    if hi == lo:
        return np.full_like(v, CONSTANT_FILL)
    return (v - lo) / (hi - lo)


def normalize(
    data: Array2D,
    mode: NormalizationMode | str,
    ranges: Optional[Mapping[str, RangePolicy | str]] = None,
    row_names: Optional[Sequence[str]] = None,
    column_names: Optional[Sequence[str]] = None,
) -> Array2D:
    """
    Compute a normalized copy of *data*.

    Args:
        data: Raw matrix of shape (R, C)
        mode: ``none``, ``row``, ``column`` or ``global``
        ranges: Optional per-label range policy. Keys are row names in row
            mode and column names in column mode; unlisted labels use
            min-max. Ignored in global mode.
        row_names: Labels of the rows (needed to look up row policies)
        column_names: Labels of the columns (needed to look up column policies)

    Returns:
        Array of shape (R, C) with values in [0, 1], or an empty array when
        mode is ``none``
    """
    mode = NormalizationMode(mode)
    X = np.asarray(data, dtype=np.float64)
    ranges = ranges or {}

    if mode is NormalizationMode.NONE:
        return empty_normalized()

    if mode is NormalizationMode.GLOBAL:
        if X.size == 0:
            return np.zeros(X.shape, dtype=np.float64)
        lo = float(X.min())
        hi = float(X.max())
        logger.debug("Normalizing globally: min=%s, max=%s", lo, hi)
        if hi == lo:
            return np.full(X.shape, CONSTANT_FILL, dtype=np.float64)
        return (X - lo) / (hi - lo)

    if mode is NormalizationMode.ROW:
        names = list(row_names) if row_names is not None else [None] * X.shape[0]
        out = np.empty_like(X)
        for i in range(X.shape[0]):
            policy = RangePolicy(ranges.get(names[i], RangePolicy.MIN_MAX))
            if X.shape[1]:
                logger.debug(
                    "Normalizing row %s: min=%s, max=%s, range=%s",
                    names[i], X[i].min(), X[i].max(), policy.value,
                )
            out[i] = scale_line(X[i], policy)
        return out

    names = list(column_names) if column_names is not None else [None] * X.shape[1]
    out = np.empty_like(X)
    for j in range(X.shape[1]):
        policy = RangePolicy(ranges.get(names[j], RangePolicy.MIN_MAX))
        if X.shape[0]:
            logger.debug(
                "Normalizing column %s: min=%s, max=%s, range=%s",
                names[j], X[:, j].min(), X[:, j].max(), policy.value,
            )
        out[:, j] = scale_line(X[:, j], policy)
    return out
