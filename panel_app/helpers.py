"""
Shared helpers for the Panel application.

Provides the explorer factory and UI constants used by the app module.
"""

from typing import Optional

import numpy as np

from matrix_reorder.config import config
from matrix_reorder.services import MatrixStore, ReorderService
from matrix_reorder.utils.logging_config import get_logger

from panel_app.components import MatrixExplorer

logger = get_logger(__name__)

# UI constants
HEADER_BG = "#2596be"
HEADER_FG = "#FFFFFF"


def create_explorer(rng: Optional[np.random.Generator] = None) -> MatrixExplorer:
    """
    Create an explorer with its own store, one per browser session.

    Args:
        rng: Optional random source for shuffles (defaults to config seed)
    """
    store = MatrixStore()
    service = ReorderService(
        store,
        rng=rng,
        max_iter=config.engine.two_dim_sort_max_iter,
    )
    logger.info("Created matrix explorer session")
    return MatrixExplorer(store=store, service=service)
