"""Square-matrix arithmetic over unsigned 32-bit integers."""

from .config import DEFAULT_NTHREADS, DEFAULT_ORDER, DEFAULT_SEED, MatrixContext
from .display import (
    display,
    display_column,
    display_element,
    display_row,
    format_column,
    format_element,
    format_matrix,
    format_row,
)
from .engine import MatrixEngine
from .errors import DimensionMismatch, IndexOutOfRange, InvalidDimension, MatrixError
from .rng import LinearCongruentialGenerator

__all__ = [
    "DEFAULT_NTHREADS",
    "DEFAULT_ORDER",
    "DEFAULT_SEED",
    "MatrixContext",
    "MatrixEngine",
    "LinearCongruentialGenerator",
    "MatrixError",
    "InvalidDimension",
    "IndexOutOfRange",
    "DimensionMismatch",
    "display",
    "display_row",
    "display_column",
    "display_element",
    "format_matrix",
    "format_row",
    "format_column",
    "format_element",
]
