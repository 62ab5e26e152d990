"""Flat-buffer kernels for square uint32 matrices.

Every matrix is a one-dimensional ``numpy.uint32`` array of ``order * order``
elements in row-major order. Arithmetic wraps modulo ``2**32``.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from numbers import Integral
from typing import Callable, List, Sequence

import numpy as np

from .errors import DimensionMismatch, IndexOutOfRange

LOGGER = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF

Matrix = np.ndarray
Multiply = Callable[[np.ndarray, np.ndarray], np.ndarray]


def as_buffer(values: Sequence[int] | np.ndarray) -> Matrix:
    if isinstance(values, np.ndarray) and values.dtype == np.uint32:
        return values
    try:
        array = np.asarray(values)
    except OverflowError as exc:
        raise ValueError("matrix elements must fit in 32 unsigned bits") from exc
    if array.size == 0:
        return array.astype(np.uint32)
    if array.dtype == object and all(
        isinstance(value, Integral) and not isinstance(value, bool) for value in array.flat
    ):
        # numpy falls back to object dtype for ints beyond 64 bits.
        raise ValueError("matrix elements must fit in 32 unsigned bits")
    if array.dtype.kind not in "iu":
        raise TypeError(f"matrix elements must be integers, got dtype {array.dtype}")
    if array.min() < 0 or array.max() > UINT32_MAX:
        raise ValueError("matrix elements must fit in 32 unsigned bits")
    return array.astype(np.uint32)


def ensure_length(buffer: Matrix, element_count: int, *, name: str = "matrix") -> Matrix:
    if buffer.ndim != 1:
        raise DimensionMismatch(f"{name} must be a flat buffer, got shape {buffer.shape}")
    if buffer.shape[0] != element_count:
        raise DimensionMismatch(
            f"{name} has {buffer.shape[0]} elements, expected {element_count}"
        )
    return buffer


def ensure_index(index: int, order: int, *, axis: str = "index") -> int:
    if isinstance(index, bool) or not isinstance(index, Integral):
        raise IndexOutOfRange(f"{axis} must be an integer, got {index!r}")
    if not 0 <= index < order:
        raise IndexOutOfRange(f"{axis} {index} outside [0, {order})")
    return int(index)


def as_scalar(value: int, *, name: str = "scalar") -> np.uint32:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= UINT32_MAX:
        raise ValueError(f"{name} must fit in 32 unsigned bits, got {value}")
    return np.uint32(value)


def zeros(order: int) -> Matrix:
    return np.zeros(order * order, dtype=np.uint32)


def identity(order: int) -> Matrix:
    eye = zeros(order)
    # Diagonal entries sit every ``order + 1`` positions in the flat buffer.
    eye[:: order + 1] = 1
    return eye


def clone(matrix: Matrix) -> Matrix:
    return matrix.copy()


def _multiply_rows(left: np.ndarray, right: np.ndarray, out: np.ndarray) -> None:
    """Accumulate ``left @ right`` into ``out`` for one block of rows.

    The loop runs in i-k-j order: for every inner index ``k`` the whole row
    ``k`` of ``right`` is scaled by column ``k`` of the block and added to
    the output rows, so both ``right`` and ``out`` are read sequentially.
    """

    scratch = np.empty_like(out)
    for k in range(left.shape[1]):
        left_column = left[:, k : k + 1]
        if not left_column.any():
            continue
        np.multiply(left_column, right[k], out=scratch)
        np.add(out, scratch, out=out)


def matmul(
    left: Matrix,
    right: Matrix,
    order: int,
    *,
    row_chunk: int = 64,
    nthreads: int = 1,
) -> Matrix:
    if row_chunk <= 0:
        raise ValueError("row_chunk must be positive")
    left_rows = left.reshape(order, order)
    right_rows = right.reshape(order, order)
    out = np.zeros((order, order), dtype=np.uint32)
    blocks = [(start, min(start + row_chunk, order)) for start in range(0, order, row_chunk)]

    def _block(bounds: tuple[int, int]) -> None:
        start, end = bounds
        _multiply_rows(left_rows[start:end], right_rows, out[start:end])

    if nthreads > 1 and len(blocks) > 1:
        LOGGER.debug("Multiplying %d row blocks on %d threads", len(blocks), nthreads)
        with ThreadPoolExecutor(max_workers=nthreads) as pool:
            # list() re-raises the first worker exception, if any.
            list(pool.map(_block, blocks))
    else:
        for bounds in blocks:
            _block(bounds)
    return out.reshape(-1)


def matmul_reference(left: Sequence[int], right: Sequence[int], order: int) -> List[int]:
    """Pure-Python dot-product form of :func:`matmul`.

    Each output cell ``c`` walks row ``c // order`` of ``left`` and column
    ``c % order`` of ``right``. Slow, but the index arithmetic is explicit.
    """

    count = order * order
    out = [0] * count
    for c in range(count):
        row_start = (c // order) * order
        column = c % order
        total = 0
        for k in range(order):
            total = (total + int(left[row_start + k]) * int(right[k * order + column])) & UINT32_MAX
        out[c] = total
    return out


def matrix_power(matrix: Matrix, exponent: int, order: int, multiply: Multiply) -> Matrix:
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return identity(order)
    result = identity(order)
    base = clone(matrix)
    exp = exponent
    while exp > 0:
        if exp & 1:
            result = multiply(result, base)
        exp >>= 1
        if exp:
            base = multiply(base, base)
    return result


def matrix_power_linear(matrix: Matrix, exponent: int, order: int, multiply: Multiply) -> Matrix:
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return identity(order)
    result = clone(matrix)
    for _ in range(exponent - 1):
        result = multiply(result, matrix)
    return result
