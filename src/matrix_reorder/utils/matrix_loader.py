"""
Matrix file loading.

Turns delimited text into the ``(row_names, column_names, data)`` triple
that ``MatrixStore.load`` accepts. The first header cell is a corner label;
the remaining header cells name the columns. Every other line starts with
its row name.
"""

import io
from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np
import pandas as pd

from ..exceptions import MatrixParseError
from .logging_config import get_logger

logger = get_logger(__name__)

DELIMITERS = {"csv": ",", "tsv": "\t"}

ParsedMatrix = Tuple[List[str], List[str], List[List[float]]]


def parse_matrix_text(text: str, extension: str) -> ParsedMatrix:
    """
    Parse CSV or TSV text into labels and values.

    Non-numeric cells become NaN.

    Args:
        text: File contents
        extension: ``"csv"`` or ``"tsv"`` (case-insensitive, leading dot allowed)

    Returns:
        Tuple of (row_names, column_names, data)

    Raises:
        MatrixParseError: If the extension is unsupported or the text lacks
            a header and at least one data row, or a line
            does not have as many fields as the header
    """
    ext = extension.lower().lstrip(".")
    if ext not in DELIMITERS:
        raise MatrixParseError(f"Unsupported file type: {extension}")

    lines = text.strip().splitlines()
    if len(lines) < 2:
        raise MatrixParseError("File must have header and at least one data row.")

    # header=None keeps duplicate labels as written
    try:
        grid = pd.read_csv(
            io.StringIO(text.strip()),
            sep=DELIMITERS[ext],
            header=None,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
    except pd.errors.ParserError as e:
        raise MatrixParseError(f"Error processing file: {e}") from e

    # With keep_default_na=False only padded fields of short lines are NaN
    short = grid.isna().any(axis=1)
    if short.any():
        line = int(short.to_numpy().argmax())
        raise MatrixParseError(
            f"Line {line + 1} has fewer fields than the header ({grid.shape[1]})"
        )

    column_names = [str(name) for name in grid.iloc[0, 1:]]
    body = grid.iloc[1:]
    row_names = [str(name) for name in body.iloc[:, 0]]
    values = body.iloc[:, 1:].apply(pd.to_numeric, errors="coerce").to_numpy(dtype=np.float64)
    values = values.reshape(len(row_names), len(column_names))

    logger.info(
        "Parsed %s matrix with %d rows and %d columns",
        ext.upper(), len(row_names), len(column_names),
    )
    return row_names, column_names, values.tolist()


def load_matrix_file(path: Union[str, Path]) -> ParsedMatrix:
    """
    Read and parse a ``.csv`` or ``.tsv`` file.

    Raises:
        MatrixParseError: If the file type is unsupported or parsing fails
    """
    path = Path(path)
    return parse_matrix_text(path.read_text(encoding="utf-8"), path.suffix)


def generate_random_matrix(
    rows: int,
    columns: int,
    rng: Optional[np.random.Generator] = None,
) -> ParsedMatrix:
    """
    Generate a demo matrix of integers in [0, 100).

    Rows are named ``Row 1..rows`` and columns ``Col 1..columns``.
    """
    if rows < 0 or columns < 0:
        raise ValueError(f"Matrix size must be non-negative, got {rows}x{columns}")
    rng = rng if rng is not None else np.random.default_rng()
    values = rng.integers(0, 100, size=(rows, columns)).astype(np.float64)
    row_names = [f"Row {i + 1}" for i in range(rows)]
    column_names = [f"Col {j + 1}" for j in range(columns)]
    return row_names, column_names, values.tolist()
