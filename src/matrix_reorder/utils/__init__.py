"""Utility modules for Matrix Reorder."""

from .logging_config import get_logger, setup_logging
from .matrix_loader import (
    parse_matrix_text,
    load_matrix_file,
    generate_random_matrix,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "parse_matrix_text",
    "load_matrix_file",
    "generate_random_matrix",
]
