"""
Matrix Store - the document object that owns one loaded matrix.

Holds the raw values, the row/column labels, the normalization state with
its normalized copy, and the current row/column permutations. Algorithms
never keep references to these; they receive read-only arrays and hand back
new orderings which the store validates before accepting.

Usage:
    from matrix_reorder.services import MatrixStore

    store = MatrixStore()
    store.load(["a", "b"], ["x", "y"], [[1, 2], [3, 4]])
    store.set_normalization("row")
    store.set_row_order([1, 0])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple
import numpy as np

from ..algorithms.normalization import (
    NormalizationMode,
    RangePolicy,
    empty_normalized,
    normalize,
)
from ..algorithms.reordering import identity_order, is_permutation
from ..exceptions import InvalidPermutationError, ShapeError
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class NormalizationState:
    """Active normalization mode and per-label range policies."""

    mode: NormalizationMode = NormalizationMode.NONE
    ranges: Dict[str, RangePolicy] = field(default_factory=dict)

    def policy_for(self, label: str) -> RangePolicy:
        """Range policy for a label (min-max unless overridden)."""
        return self.ranges.get(label, RangePolicy.MIN_MAX)


def _readonly(a: np.ndarray) -> np.ndarray:
    view = a.view()
    view.flags.writeable = False
    return view


class MatrixStore:
    """
    Owner of a matrix, its normalization and its row/column orderings.

    Not thread-safe: a host serving several clients must serialize access to
    a store.
    """

    def __init__(self):
        self._reset_state()

    def _reset_state(self) -> None:
        self._row_names: List[str] = []
        self._column_names: List[str] = []
        self._data = np.zeros((0, 0), dtype=np.float64)
        self._normalization = NormalizationState()
        self._normalized = empty_normalized()
        self._row_order = identity_order(0)
        self._column_order = identity_order(0)
        self._has_data = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(
        self,
        row_names: Sequence[str],
        column_names: Sequence[str],
        data: Sequence[Sequence[float]],
    ) -> None:
        """
        Replace the matrix and reset normalization and orderings.

        Validation happens before any state is touched, so a failed load
        leaves the previous matrix intact.

        Args:
            row_names: One label per row
            column_names: One label per column
            data: Rows of values, each with ``len(column_names)`` entries

        Raises:
            ShapeError: If the grid is ragged or does not match the labels
        """
        row_names = [str(n) for n in row_names]
        column_names = [str(n) for n in column_names]
        rows = list(data)

        if len(rows) != len(row_names):
            raise ShapeError(
                f"Got {len(rows)} data rows for {len(row_names)} row names"
            )
        n_cols = len(column_names)
        for i, row in enumerate(rows):
            if len(row) != n_cols:
                raise ShapeError(
                    f"Row {i} ({row_names[i]!r}) has {len(row)} values, "
                    f"expected {n_cols}"
                )

        try:
            values = np.array(rows, dtype=np.float64).reshape(len(rows), n_cols)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Matrix values are not numeric: {e}") from e
        values.flags.writeable = False

        self._row_names = row_names
        self._column_names = column_names
        self._data = values
        self._normalization = NormalizationState()
        self._normalized = empty_normalized()
        self._row_order = identity_order(len(row_names))
        self._column_order = identity_order(n_cols)
        self._has_data = True
        logger.info(
            "Data set with %d rows and %d columns.", len(row_names), n_cols
        )

    def clear(self) -> None:
        """Drop all data, normalization and orderings."""
        self._reset_state()
        logger.info("Matrix store cleared")

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def has_data(self) -> bool:
        return self._has_data

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self._row_names), len(self._column_names)

    @property
    def row_names(self) -> List[str]:
        return list(self._row_names)

    @property
    def column_names(self) -> List[str]:
        return list(self._column_names)

    @property
    def data(self) -> np.ndarray:
        return _readonly(self._data)

    @property
    def normalized(self) -> np.ndarray:
        """Normalized matrix, or an empty array when normalization is off."""
        return _readonly(self._normalized)

    @property
    def has_normalized(self) -> bool:
        return self._normalized.size > 0

    @property
    def normalization(self) -> NormalizationState:
        """Copy of the current normalization state."""
        return NormalizationState(
            mode=self._normalization.mode,
            ranges=dict(self._normalization.ranges),
        )

    @property
    def row_order(self) -> np.ndarray:
        return _readonly(self._row_order)

    @property
    def column_order(self) -> np.ndarray:
        return _readonly(self._column_order)

    def working_matrix(self) -> np.ndarray:
        """Matrix that reordering reads: normalized values if present, else raw."""
        return self.normalized if self.has_normalized else self.data

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------

    def set_normalization(self, mode: NormalizationMode | str) -> None:
        """Switch normalization mode, clearing per-label ranges, and recompute."""
        self._normalization = NormalizationState(mode=NormalizationMode(mode))
        self.normalize()

    def set_range_policy(self, label: str, policy: RangePolicy | str) -> None:
        """Override the range policy of one row or column label and recompute."""
        self._normalization.ranges[str(label)] = RangePolicy(policy)
        self.normalize()

    def normalize(self) -> np.ndarray:
        """Recompute the normalized matrix from the raw data and current state."""
        if not self._has_data:
            self._normalized = empty_normalized()
            return self.normalized
        self._normalized = normalize(
            self._data,
            self._normalization.mode,
            self._normalization.ranges,
            row_names=self._row_names,
            column_names=self._column_names,
        )
        return self.normalized

    # ------------------------------------------------------------------
    # Orderings
    # ------------------------------------------------------------------

    def set_row_order(self, order: Sequence[int]) -> None:
        """
        Replace the row ordering.

        Raises:
            InvalidPermutationError: If *order* is not a permutation of the rows
        """
        self._row_order = self._validated(order, len(self._row_names), "row")

    def set_column_order(self, order: Sequence[int]) -> None:
        """
        Replace the column ordering.

        Raises:
            InvalidPermutationError: If *order* is not a permutation of the columns
        """
        self._column_order = self._validated(order, len(self._column_names), "column")

    def reset_order(self) -> None:
        """Restore the identity ordering on both axes."""
        self._row_order = identity_order(len(self._row_names))
        self._column_order = identity_order(len(self._column_names))

    @staticmethod
    def _validated(order: Sequence[int], n: int, axis: str) -> np.ndarray:
        if not is_permutation(order, n):
            raise InvalidPermutationError(
                f"{axis} order must be a permutation of 0..{n - 1}, got {order!r}"
            )
        return np.asarray(order).astype(np.intp)
