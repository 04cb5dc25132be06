"""
Visualization settings and label layout helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

ENCODINGS = ("circle", "color", "circle-color", "color-text")

DEFAULT_MIN_COLOR = "#e3f0fb"
DEFAULT_MAX_COLOR = "#7daee6"


@dataclass
class VisualizationSettings:
    """How the displayed matrix is drawn."""

    encoding: str = "color"
    cell_size: int = 40
    cell_spacing: int = 2
    label_rotation: float = 45
    font_size: int = 14
    min_color: str = DEFAULT_MIN_COLOR
    max_color: str = DEFAULT_MAX_COLOR

    def __post_init__(self):
        """Validate the encoding and sizes."""
        if self.encoding not in ENCODINGS:
            raise ValueError(
                f"Unknown encoding: {self.encoding}. Expected one of {', '.join(ENCODINGS)}"
            )
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.cell_spacing < 0:
            raise ValueError(f"cell_spacing must be >= 0, got {self.cell_spacing}")

    def with_cell_size(self, size: int) -> "VisualizationSettings":
        """Copy with a new cell size and the label font size that suits it."""
        return VisualizationSettings(
            encoding=self.encoding,
            cell_size=size,
            cell_spacing=self.cell_spacing,
            label_rotation=self.label_rotation,
            font_size=label_size_for_cell(size),
            min_color=self.min_color,
            max_color=self.max_color,
        )


def label_size_for_cell(cell_size: int) -> int:
    """Font size for labels next to cells of the given size."""
    if cell_size < 18:
        return 10
    if cell_size < 28:
        return 12
    return 14


def estimate_text_width(text: str, font_size: float) -> float:
    """Rough rendered width of *text* (average glyph is 0.6 em)."""
    return len(text) * font_size * 0.6


def calculate_optimal_label_rotation(
    column_names: Sequence[str], cell_size: float, font_size: float = 14
) -> int:
    """
    Pick a column label rotation (degrees) so labels fit above their cells.

    Returns 0 when the longest label fits the cell width, 90 when it is more
    than three cells wide, and an intermediate angle otherwise.
    """
    if not column_names:
        return 45

    text_width = estimate_text_width(max(column_names, key=len), font_size)
    if text_width <= cell_size:
        return 0
    if text_width > cell_size * 3:
        return 90

    space_ratio = cell_size / text_width
    if space_ratio > 0.8:
        return 15
    if space_ratio > 0.6:
        return 30
    if space_ratio > 0.4:
        return 45
    if space_ratio > 0.2:
        return 60
    return 75
