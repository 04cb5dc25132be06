"""
Reorder Service - applies reordering algorithms to a Matrix Store.

The algorithms in ``matrix_reorder.algorithms`` are pure functions; this
service feeds them the store's working matrix and current orderings and
writes the result back. Operations on an empty store, or with a target
index outside the axis, are no-ops so interactive flows never fail.

Usage:
    from matrix_reorder.services import MatrixStore, ReorderService

    store = MatrixStore()
    store.load(rows, cols, values)
    service = ReorderService(store)
    service.sort_rows("sum", "desc")
    service.two_dim_sort()
"""

from __future__ import annotations

from typing import Any, Dict, Optional
import numpy as np

from ..algorithms.reordering import (
    SortDirection,
    reverse_order,
    shuffle_order,
    similarity_sort,
    statistic_sort,
)
from ..algorithms.seriation import greedy_seriation, two_dim_sort
from ..algorithms.statistics import StatisticMethod
from ..config import config
from ..exceptions import OutOfRangeError
from ..utils.logging_config import get_logger
from .matrix_store import MatrixStore

logger = get_logger(__name__)


class ReorderService:
    """
    Reordering operations bound to one store.

    Every method returns ``True`` when it replaced an ordering and ``False``
    when it was a no-op.
    """

    def __init__(
        self,
        store: MatrixStore,
        *,
        rng: Optional[np.random.Generator] = None,
        max_iter: Optional[int] = None,
    ):
        """
        Args:
            store: The store whose orderings are rewritten
            rng: Random source for shuffles; defaults to one seeded from config
            max_iter: 2D-sort iteration cap; defaults to config
        """
        self.store = store
        self.rng = rng if rng is not None else config.engine.make_rng()
        self.max_iter = max_iter if max_iter is not None else config.engine.two_dim_sort_max_iter
        self.last_two_dim_info: Dict[str, Any] = {}

    def _ready(self, operation: str) -> bool:
        if not self.store.has_data:
            logger.debug("%s skipped: no data loaded", operation)
            return False
        return True

    # ------------------------------------------------------------------
    # Statistical sort
    # ------------------------------------------------------------------

    def sort_rows(
        self,
        method: StatisticMethod | str,
        direction: SortDirection | str = SortDirection.ASC,
    ) -> bool:
        """Sort rows by a statistic over each row, or alphabetically by row name."""
        if not self._ready("sort_rows"):
            return False
        order = statistic_sort(
            self.store.working_matrix(),
            self.store.row_order,
            method,
            direction,
            labels=self.store.row_names,
        )
        self.store.set_row_order(order)
        return True

    def sort_columns(
        self,
        method: StatisticMethod | str,
        direction: SortDirection | str = SortDirection.ASC,
    ) -> bool:
        """Sort columns by a statistic over each column, or alphabetically by column name."""
        if not self._ready("sort_columns"):
            return False
        order = statistic_sort(
            self.store.working_matrix().T,
            self.store.column_order,
            method,
            direction,
            labels=self.store.column_names,
        )
        self.store.set_column_order(order)
        return True

    # ------------------------------------------------------------------
    # Similarity sort
    # ------------------------------------------------------------------

    def sort_rows_by_similarity(
        self, target: int, direction: SortDirection | str = SortDirection.DESC
    ) -> bool:
        """Sort rows by correlation with the row at original index *target*."""
        if not self._ready("sort_rows_by_similarity"):
            return False
        try:
            order = similarity_sort(
                self.store.working_matrix(), self.store.row_order, target, direction
            )
        except OutOfRangeError as e:
            logger.debug("sort_rows_by_similarity skipped: %s", e)
            return False
        self.store.set_row_order(order)
        return True

    def sort_columns_by_similarity(
        self, target: int, direction: SortDirection | str = SortDirection.DESC
    ) -> bool:
        """Sort columns by correlation with the column at original index *target*."""
        if not self._ready("sort_columns_by_similarity"):
            return False
        try:
            order = similarity_sort(
                self.store.working_matrix().T, self.store.column_order, target, direction
            )
        except OutOfRangeError as e:
            logger.debug("sort_columns_by_similarity skipped: %s", e)
            return False
        self.store.set_column_order(order)
        return True

    # ------------------------------------------------------------------
    # Seriation
    # ------------------------------------------------------------------

    def apply_seriation(self) -> bool:
        """Greedy nearest-neighbour seriation of both rows and columns."""
        if not self._ready("apply_seriation"):
            return False
        X = self.store.working_matrix()
        row_order = greedy_seriation(X)
        column_order = greedy_seriation(X.T)
        self.store.set_row_order(row_order)
        self.store.set_column_order(column_order)
        logger.info("Seriation applied to %d rows and %d columns", *X.shape)
        return True

    def two_dim_sort(self) -> bool:
        """Iterative 2D sort starting from the current orderings."""
        if not self._ready("two_dim_sort"):
            return False
        row_order, column_order, info = two_dim_sort(
            self.store.working_matrix(),
            self.store.row_order,
            self.store.column_order,
            max_iter=self.max_iter,
        )
        self.store.set_row_order(row_order)
        self.store.set_column_order(column_order)
        self.last_two_dim_info = info
        return True

    # ------------------------------------------------------------------
    # Reversal / shuffle / reset
    # ------------------------------------------------------------------

    def reverse_rows(self) -> bool:
        if not self._ready("reverse_rows"):
            return False
        self.store.set_row_order(reverse_order(self.store.row_order))
        return True

    def reverse_columns(self) -> bool:
        if not self._ready("reverse_columns"):
            return False
        self.store.set_column_order(reverse_order(self.store.column_order))
        return True

    def shuffle_rows(self) -> bool:
        if not self._ready("shuffle_rows"):
            return False
        self.store.set_row_order(shuffle_order(self.store.row_order, self.rng))
        return True

    def shuffle_columns(self) -> bool:
        if not self._ready("shuffle_columns"):
            return False
        self.store.set_column_order(shuffle_order(self.store.column_order, self.rng))
        return True

    def reset_order(self) -> bool:
        """Restore identity orderings."""
        if not self._ready("reset_order"):
            return False
        self.store.reset_order()
        return True
