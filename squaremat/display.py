"""Plain-text rendering of square matrices.

Matrices are rendered as decimal values: a whole matrix is one line per row
with values separated by single spaces, a row is one line, a column is one
value per line, and a single element is one value on its own line. None of
these helpers modify the matrix they render.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

import numpy as np

from . import _matrix
from .config import MatrixContext

__all__ = [
    "display",
    "display_column",
    "display_element",
    "display_row",
    "format_column",
    "format_element",
    "format_matrix",
    "format_row",
]


def _grid(matrix: Sequence[int] | np.ndarray, context: MatrixContext) -> np.ndarray:
    buffer = _matrix.ensure_length(_matrix.as_buffer(matrix), context.element_count)
    return buffer.reshape(context.height, context.width)


def _join(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def format_matrix(matrix: Sequence[int] | np.ndarray, context: MatrixContext) -> str:
    """Return ``matrix`` as text.

    >>> format_matrix([1, 2, 3, 4], MatrixContext(2))
    '1 2\\n3 4\\n'
    """

    return "".join(f"{_join(row)}\n" for row in _grid(matrix, context).tolist())


def format_row(matrix: Sequence[int] | np.ndarray, context: MatrixContext, row: int) -> str:
    index = _matrix.ensure_index(row, context.height, axis="row")
    return f"{_join(_grid(matrix, context)[index].tolist())}\n"


def format_column(matrix: Sequence[int] | np.ndarray, context: MatrixContext, column: int) -> str:
    index = _matrix.ensure_index(column, context.width, axis="column")
    return "".join(f"{value}\n" for value in _grid(matrix, context)[:, index].tolist())


def format_element(
    matrix: Sequence[int] | np.ndarray, context: MatrixContext, row: int, column: int
) -> str:
    r = _matrix.ensure_index(row, context.height, axis="row")
    c = _matrix.ensure_index(column, context.width, axis="column")
    return f"{int(_grid(matrix, context)[r, c])}\n"


def _write(text: str, stream: Optional[TextIO]) -> None:
    (stream if stream is not None else sys.stdout).write(text)


def display(matrix: Sequence[int] | np.ndarray, context: MatrixContext, *, stream: Optional[TextIO] = None) -> None:
    _write(format_matrix(matrix, context), stream)


def display_row(
    matrix: Sequence[int] | np.ndarray, context: MatrixContext, row: int, *, stream: Optional[TextIO] = None
) -> None:
    _write(format_row(matrix, context, row), stream)


def display_column(
    matrix: Sequence[int] | np.ndarray, context: MatrixContext, column: int, *, stream: Optional[TextIO] = None
) -> None:
    _write(format_column(matrix, context, column), stream)


def display_element(
    matrix: Sequence[int] | np.ndarray,
    context: MatrixContext,
    row: int,
    column: int,
    *,
    stream: Optional[TextIO] = None,
) -> None:
    _write(format_element(matrix, context, row, column), stream)
