"""Exception types raised by :mod:`squaremat`."""

from __future__ import annotations


class MatrixError(ValueError):
    """Base class for invalid matrix operations."""


class InvalidDimension(MatrixError):
    """Raised when a matrix order or thread count is not a positive integer."""


class IndexOutOfRange(MatrixError, IndexError):
    """Raised when a row, column or element index falls outside the matrix."""


class DimensionMismatch(MatrixError):
    """Raised when an operand does not match the active element count."""
