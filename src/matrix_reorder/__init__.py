"""
Matrix Reorder - Core Package

Load a numeric matrix, rescale it and reorder its rows and columns so that
clusters, gradients and blocks become visible.

This package provides:
- Algorithm layer: normalization, statistics, sorting and seriation
- Service layer: the matrix store, reordering service and display projection
- Rendering layer: SVG output of the displayed matrix
"""

__version__ = "0.1.0"

from .exceptions import (
    ShapeError,
    InvalidPermutationError,
    OutOfRangeError,
    MatrixParseError,
)
from .services import MatrixStore, ReorderService, current_matrix

# Explicitly import subpackages to ensure they're discoverable
from . import algorithms
from . import services
from . import rendering
from . import utils

__all__ = [
    "ShapeError",
    "InvalidPermutationError",
    "OutOfRangeError",
    "MatrixParseError",
    "MatrixStore",
    "ReorderService",
    "current_matrix",
    "algorithms",
    "services",
    "rendering",
    "utils",
]
