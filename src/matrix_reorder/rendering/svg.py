"""
SVG rendering of a displayed matrix.

Cells are coloured by interpolating between two colours according to the
displayed value (normalized if available, else raw), rescaled by the
displayed minimum and maximum and clipped to [0, 1].
"""

from __future__ import annotations

import math
from typing import Optional, Tuple
from xml.sax.saxutils import escape

import numpy as np

from ..services.view_projection import DisplayMatrix
from .settings import VisualizationSettings, estimate_text_width

RGB = Tuple[int, int, int]


def hex_to_rgb(color: str) -> RGB:
    """Parse ``#rgb`` or ``#rrggbb`` into an (r, g, b) tuple."""
    h = color.lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) != 6:
        raise ValueError(f"Invalid hex colour: {color}")
    num = int(h, 16)
    return (num >> 16) & 255, (num >> 8) & 255, num & 255


def lerp_color(a: str, b: str, t: float) -> str:
    """Interpolate between two hex colours; ``t`` in [0, 1]."""
    c1 = hex_to_rgb(a)
    c2 = hex_to_rgb(b)
    r, g, b_ = (int(round(x + (y - x) * float(t))) for x, y in zip(c1, c2))
    return f"rgb({r},{g},{b_})"


def rotated_text_bbox(text: str, font_size: float, angle: float) -> Tuple[float, float]:
    """Width and height of the bounding box of *text* rotated by *angle* degrees."""
    w = estimate_text_width(text, font_size)
    h = font_size
    rad = math.radians(angle)
    width = abs(w * math.cos(rad)) + abs(h * math.sin(rad))
    height = abs(w * math.sin(rad)) + abs(h * math.cos(rad))
    return width, height


def _num(value: float) -> str:
    """Compact number formatting for SVG attributes."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def generate_matrix_svg(
    display: DisplayMatrix,
    settings: Optional[VisualizationSettings] = None,
) -> str:
    """
    Render a displayed matrix as an SVG document.

    Args:
        display: Output of ``current_matrix``
        settings: Encoding, sizes and colours; defaults apply if omitted

    Returns:
        SVG markup
    """
    s = settings or VisualizationSettings()
    fs = s.font_size
    step = s.cell_size + s.cell_spacing
    rows = len(display.row_names)
    cols = len(display.column_names)

    longest_col = max(display.column_names, key=len, default="")
    col_box_w, col_box_h = rotated_text_bbox(longest_col, fs, s.label_rotation)
    extra_right = col_box_w + 12 if s.label_rotation else 24
    extra_top = col_box_h + 8 if s.label_rotation else fs + 16

    longest_row = max(display.row_names, key=len, default="")
    row_label_width = estimate_text_width(longest_row, fs)
    pad_x = 16 + row_label_width + 8
    pad_y = extra_top
    width = pad_x + cols * step + extra_right
    height = pad_y + rows * step + 16

    values = display.display_values()
    finite = values[np.isfinite(values)]
    if finite.size:
        lo, hi = float(finite.min()), float(finite.max())
    else:
        lo, hi = 0.0, 1.0
    if lo == hi:
        lo, hi = 0.0, 1.0

    def color(t: float) -> str:
        return lerp_color(s.min_color, s.max_color, t)

    parts = [
        f"<svg xmlns='http://www.w3.org/2000/svg' width='{_num(width)}' "
        f"height='{_num(height)}' font-family='sans-serif' font-size='{fs}'>\n"
    ]

    parts.append("<g class='col-labels'>\n")
    for j, name in enumerate(display.column_names):
        x = pad_x + j * step + s.cell_size / 2
        y = pad_y - 8
        if s.label_rotation:
            parts.append(
                f"<text x='{_num(x)}' y='{_num(y)}' text-anchor='start' "
                f"dominant-baseline='middle' "
                f"transform='rotate({_num(-s.label_rotation)},{_num(x)},{_num(y)})'>"
                f"{escape(name)}</text>"
            )
        else:
            parts.append(
                f"<text x='{_num(x)}' y='{_num(y)}' text-anchor='middle' "
                f"dominant-baseline='auto'>{escape(name)}</text>"
            )
    parts.append("</g>\n")

    parts.append("<g class='row-labels'>\n")
    for i, name in enumerate(display.row_names):
        x = pad_x - row_label_width - 8
        y = pad_y + i * step + s.cell_size / 2 + fs * 0.35
        parts.append(
            f"<text x='{_num(x)}' y='{_num(y)}' text-anchor='start' "
            f"dominant-baseline='middle'>{escape(name)}</text>"
        )
    parts.append("</g>\n")

    parts.append("<g class='matrix-cells' stroke-width='1'>\n")
    half = s.cell_size / 2
    for i in range(rows):
        for j in range(cols):
            norm = float((values[i, j] - lo) / (hi - lo))
            norm = min(max(norm, 0.0), 1.0) if math.isfinite(norm) else 0.0
            fill = color(norm)
            x = pad_x + j * step
            y = pad_y + i * step
            rect = (
                f"  <rect x='{_num(x)}' y='{_num(y)}' width='{s.cell_size}' "
                f"height='{s.cell_size}'"
            )
            if s.encoding in ("circle", "circle-color"):
                parts.append(f"{rect} fill='white' fill-opacity='1' stroke='{fill}' />\n")
                parts.append(
                    f"  <circle cx='{_num(x + half)}' cy='{_num(y + half)}' "
                    f"r='{_num(half * norm)}' fill='{fill}' fill-opacity='{_num(norm)}' "
                    f"stroke='{fill}' />\n"
                )
            else:
                parts.append(
                    f"{rect} fill='{fill}' fill-opacity='{_num(norm)}' stroke='{fill}' />\n"
                )
                if s.encoding == "color-text":
                    label = escape(f"{display.cells[i][j].raw_value:g}")
                    parts.append(
                        f"  <text x='{_num(x + half)}' y='{_num(y + half + fs * 0.35)}' "
                        f"text-anchor='middle' dominant-baseline='middle' "
                        f"fill='#222'>{label}</text>\n"
                    )
    parts.append("</g>\n")
    parts.append("</svg>\n")
    return "".join(parts)
