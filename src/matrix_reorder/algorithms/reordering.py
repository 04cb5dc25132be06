"""
Permutation-producing reordering procedures.

Every function is pure: it takes the current ordering (an integer array of
original line indices) plus the lines to rank and returns a new ordering.
Lines are always passed as a 2-D array with one axis-line per row, so the
same function serves rows (``X``) and columns (``X.T``).
"""

from __future__ import annotations

import unicodedata
from enum import Enum
from typing import Optional, Sequence
import numpy as np

from .statistics import StatisticMethod, correlation, statistic
from ..exceptions import OutOfRangeError

Array2D = np.ndarray

ALPHABETICAL = "alphabetical"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def identity_order(n: int) -> np.ndarray:
    """Return the identity ordering ``[0, 1, ..., n-1]``."""
    return np.arange(n, dtype=np.intp)


def is_permutation(order: Sequence[int], n: int) -> bool:
    """Check that *order* holds every index of ``[0, n)`` exactly once."""
    try:
        a = np.asarray(order)
    except (TypeError, ValueError):
        return False
    if not (np.issubdtype(a.dtype, np.integer) or np.issubdtype(a.dtype, np.floating)):
        return False
    if a.ndim != 1 or a.size != n:
        return False
    if n == 0:
        return True
    if not np.issubdtype(a.dtype, np.integer):
        if not np.all(np.mod(a, 1) == 0):
            return False
        a = a.astype(np.intp)
    if a.min() < 0 or a.max() >= n:
        return False
    return np.unique(a).size == n


def collation_key(label) -> tuple:
    """Case- and accent-insensitive sort key; the exact text breaks ties."""
    text = str(label)
    folded = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in folded if not unicodedata.combining(c))
    return base.casefold(), text.casefold()


def _stable_sort(order: np.ndarray, keys: Sequence, direction: SortDirection) -> np.ndarray:
    """Sort *order* by ``keys[index]``; ties keep their current relative order."""
    ranked = sorted(
        order.tolist(),
        key=lambda idx: keys[idx],
        reverse=direction is SortDirection.DESC,
    )
    return np.asarray(ranked, dtype=np.intp)


def statistic_sort(
    lines: Array2D,
    order: Sequence[int],
    method: StatisticMethod | str,
    direction: SortDirection | str = SortDirection.ASC,
    labels: Optional[Sequence[str]] = None,
) -> np.ndarray:
    """
    Sort lines by a per-line statistic or alphabetically by label.

    Args:
        lines: Array of shape (N, L), one axis-line per row
        order: Current ordering of the N lines
        method: A ``StatisticMethod`` or ``"alphabetical"``
        direction: ``asc`` or ``desc``
        labels: Line labels, required for alphabetical sorting

    Returns:
        New ordering

    Raises:
        ValueError: If alphabetical sorting is requested without labels
    """
    direction = SortDirection(direction)
    order = np.asarray(order, dtype=np.intp)

    if method == ALPHABETICAL:
        if labels is None:
            raise ValueError("Alphabetical sort needs line labels")
        keys = [collation_key(name) for name in labels]
        return _stable_sort(order, keys, direction)

    method = StatisticMethod(method)
    X = np.asarray(lines, dtype=np.float64)
    keys = [statistic(X[i], method) for i in range(X.shape[0])]
    return _stable_sort(order, keys, direction)


def similarity_sort(
    lines: Array2D,
    order: Sequence[int],
    target: int,
    direction: SortDirection | str = SortDirection.DESC,
) -> np.ndarray:
    """
    Sort lines by their correlation with a target line.

    The target's similarity with itself is always 1, so in descending order
    it leads unless other lines tie with it.

    Raises:
        OutOfRangeError: If *target* is not a valid line index
    """
    direction = SortDirection(direction)
    X = np.asarray(lines, dtype=np.float64)
    n = X.shape[0]
    if not 0 <= target < n:
        raise OutOfRangeError(f"Target index {target} outside [0, {n})")

    keys = [
        1.0 if i == target else correlation(X[i], X[target])
        for i in range(n)
    ]
    return _stable_sort(np.asarray(order, dtype=np.intp), keys, direction)


def reverse_order(order: Sequence[int]) -> np.ndarray:
    """Reverse an ordering."""
    return np.asarray(order, dtype=np.intp)[::-1].copy()


def shuffle_order(order: Sequence[int], rng: np.random.Generator) -> np.ndarray:
    """
    Uniform Fisher-Yates shuffle of an ordering.

    Args:
        order: Current ordering
        rng: Random source; pass a seeded generator for reproducible results

    Returns:
        Shuffled copy of *order*
    """
    out = np.asarray(order, dtype=np.intp).copy()
    for i in range(out.size - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        out[i], out[j] = out[j], out[i]
    return out
