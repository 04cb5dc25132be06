"""Rendering of the displayed matrix."""

from .settings import (
    ENCODINGS,
    VisualizationSettings,
    calculate_optimal_label_rotation,
    label_size_for_cell,
)
from .svg import generate_matrix_svg, lerp_color, hex_to_rgb

__all__ = [
    "ENCODINGS",
    "VisualizationSettings",
    "calculate_optimal_label_rotation",
    "label_size_for_cell",
    "generate_matrix_svg",
    "lerp_color",
    "hex_to_rgb",
]
