"""
Exception types raised by the matrix engine.

All of them derive from the built-in exception a caller would otherwise
expect (``ValueError`` for bad input, ``IndexError`` for bad indices), so
existing ``except ValueError`` handlers keep working.
"""


class ShapeError(ValueError):
    """Input grid is ragged or does not match its row/column names."""


class InvalidPermutationError(ValueError):
    """A supplied ordering is not a bijection on the expected index range."""


class OutOfRangeError(IndexError):
    """A target line index lies outside the valid axis range."""


class MatrixParseError(ValueError):
    """Matrix text could not be parsed into names and values."""
