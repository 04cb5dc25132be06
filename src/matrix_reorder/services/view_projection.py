"""
View projection - the matrix as currently displayed.

Combines a store's orderings with its raw and normalized values. The result
is rebuilt on every call and never cached, so it always reflects the store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import numpy as np
import pandas as pd

from .matrix_store import MatrixStore


@dataclass
class DisplayCell:
    """One displayed cell."""

    row: str
    column: str
    raw_value: float
    normalized_value: Optional[float] = None


@dataclass
class DisplayMatrix:
    """Labels and cells in display order."""

    row_names: List[str] = field(default_factory=list)
    column_names: List[str] = field(default_factory=list)
    cells: List[List[DisplayCell]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.row_names or not self.column_names

    @property
    def has_normalized(self) -> bool:
        return any(
            cell.normalized_value is not None for row in self.cells for cell in row
        )

    def display_values(self) -> np.ndarray:
        """Dense (R, C) array of the value a renderer shows: normalized if present, else raw."""
        return np.array(
            [
                [
                    c.normalized_value if c.normalized_value is not None else c.raw_value
                    for c in row
                ]
                for row in self.cells
            ],
            dtype=np.float64,
        ).reshape(len(self.row_names), len(self.column_names))

    def to_frame(self, normalized: bool = False) -> pd.DataFrame:
        """
        Export as a DataFrame indexed by row labels.

        Args:
            normalized: Use normalized values (falls back to raw values when
                the matrix has no normalized values)
        """
        if normalized:
            values = self.display_values()
        else:
            values = np.array(
                [[c.raw_value for c in row] for row in self.cells], dtype=np.float64
            ).reshape(len(self.row_names), len(self.column_names))
        return pd.DataFrame(values, index=self.row_names, columns=self.column_names)


def current_matrix(store: MatrixStore) -> DisplayMatrix:
    """
    Project a store into display order.

    Safe to call at any time; an empty store yields an empty projection.
    """
    if not store.has_data:
        return DisplayMatrix()

    row_names = store.row_names
    column_names = store.column_names
    data = store.data
    normalized = store.normalized if store.has_normalized else None
    row_order = store.row_order
    column_order = store.column_order

    cells = [
        [
            DisplayCell(
                row=row_names[i],
                column=column_names[j],
                raw_value=float(data[i, j]),
                normalized_value=(
                    float(normalized[i, j]) if normalized is not None else None
                ),
            )
            for j in column_order
        ]
        for i in row_order
    ]
    return DisplayMatrix(
        row_names=[row_names[i] for i in row_order],
        column_names=[column_names[j] for j in column_order],
        cells=cells,
    )
