"""Service layer: the matrix document, its reordering operations and its display view."""

from .matrix_store import MatrixStore, NormalizationState
from .reorder_service import ReorderService
from .view_projection import DisplayCell, DisplayMatrix, current_matrix

__all__ = [
    "MatrixStore",
    "NormalizationState",
    "ReorderService",
    "DisplayCell",
    "DisplayMatrix",
    "current_matrix",
]
