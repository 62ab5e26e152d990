"""Square uint32 matrix engine.

:class:`MatrixEngine` owns a :class:`~squaremat.config.MatrixContext` and a
:class:`~squaremat.rng.LinearCongruentialGenerator`. Every operation reads
the active context, validates its operands against it, and returns either a
freshly allocated flat buffer or a Python ``int``. Inputs are never modified.

Arithmetic is performed modulo ``2**32``; overflow wraps silently.
"""

from __future__ import annotations

import logging
import threading
from functools import partial
from numbers import Integral
from typing import List, Optional, Sequence

import numpy as np

from . import _matrix
from .config import DEFAULT_ORDER, DEFAULT_ROW_CHUNK, DEFAULT_SEED, MatrixContext
from .rng import LinearCongruentialGenerator

LOGGER = logging.getLogger(__name__)

Matrix = _matrix.Matrix
MatrixLike = Sequence[int] | np.ndarray

POWER_METHODS = ("squaring", "linear")


class MatrixEngine:
    """Factory, transforms, arithmetic and reductions for one matrix order."""

    def __init__(
        self,
        context: Optional[MatrixContext] = None,
        *,
        seed: int = DEFAULT_SEED,
        row_chunk: int = DEFAULT_ROW_CHUNK,
    ) -> None:
        if row_chunk <= 0:
            raise ValueError("row_chunk must be positive")
        self._context = context if context is not None else MatrixContext(order=DEFAULT_ORDER)
        self._generator = LinearCongruentialGenerator(seed)
        self._row_chunk = row_chunk
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def context(self) -> MatrixContext:
        return self._context

    @property
    def order(self) -> int:
        return self._context.order

    @property
    def generator(self) -> LinearCongruentialGenerator:
        return self._generator

    def set_dimensions(self, order: int) -> MatrixContext:
        """Switch to a new matrix order.

        Buffers created under the previous order are left untouched; passing
        them to this engine afterwards raises
        :class:`~squaremat.errors.DimensionMismatch`.
        """

        with self._lock:
            self._context = self._context.with_order(order)
            LOGGER.debug("Dimension context set to %s", self._context.describe())
            return self._context

    def set_nthreads(self, count: int) -> MatrixContext:
        with self._lock:
            self._context = self._context.with_nthreads(count)
            LOGGER.debug("Thread hint set to %d", count)
            return self._context

    def set_seed(self, value: int) -> None:
        with self._lock:
            self._generator.seed(value)

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------
    def _snapshot(self) -> MatrixContext:
        # Each operation works against one context even if another thread
        # reconfigures the engine part way through.
        with self._lock:
            return self._context

    @staticmethod
    def _operand(matrix: MatrixLike, context: MatrixContext, name: str = "matrix") -> Matrix:
        buffer = _matrix.as_buffer(matrix)
        return _matrix.ensure_length(buffer, context.element_count, name=name)

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------
    def zero(self) -> Matrix:
        return _matrix.zeros(self._snapshot().order)

    def identity(self) -> Matrix:
        return _matrix.identity(self._snapshot().order)

    def random(self, seed: int) -> Matrix:
        """Reseed the generator with ``seed`` and fill a matrix row by row."""

        _matrix.as_scalar(seed, name="seed")
        with self._lock:
            self._generator.seed(seed)
            return self._generator.fill(self._context.element_count)

    def uniform(self, value: int) -> Matrix:
        fill = _matrix.as_scalar(value, name="value")
        return np.full(self._snapshot().element_count, fill, dtype=np.uint32)

    def sequence(self, start: int, step: int) -> Matrix:
        first = _matrix.as_scalar(start, name="start")
        stride = _matrix.as_scalar(step, name="step")
        offsets = np.arange(self._snapshot().element_count, dtype=np.uint32)
        return offsets * stride + first

    # ------------------------------------------------------------------
    # Structural transforms
    # ------------------------------------------------------------------
    def clone(self, matrix: MatrixLike) -> Matrix:
        return _matrix.clone(self._operand(matrix, self._snapshot()))

    def reverse(self, matrix: MatrixLike) -> Matrix:
        """Mirror the linear index: ``result[i] == matrix[count - 1 - i]``."""

        return self._operand(matrix, self._snapshot())[::-1].copy()

    def transpose(self, matrix: MatrixLike) -> Matrix:
        context = self._snapshot()
        grid = self._operand(matrix, context).reshape(context.order, context.order)
        return np.ascontiguousarray(grid.T).reshape(-1)

    # ------------------------------------------------------------------
    # Elementwise and scalar arithmetic
    # ------------------------------------------------------------------
    def scalar_add(self, matrix: MatrixLike, scalar: int) -> Matrix:
        buffer = self._operand(matrix, self._snapshot())
        return np.add(buffer, _matrix.as_scalar(scalar), dtype=np.uint32)

    def scalar_mul(self, matrix: MatrixLike, scalar: int) -> Matrix:
        buffer = self._operand(matrix, self._snapshot())
        return np.multiply(buffer, _matrix.as_scalar(scalar), dtype=np.uint32)

    def matrix_add(self, left: MatrixLike, right: MatrixLike) -> Matrix:
        context = self._snapshot()
        a = self._operand(left, context, "left")
        b = self._operand(right, context, "right")
        return np.add(a, b, dtype=np.uint32)

    # ------------------------------------------------------------------
    # Multiplication
    # ------------------------------------------------------------------
    def _multiplier(self, context: MatrixContext) -> _matrix.Multiply:
        return partial(
            _matrix.matmul,
            order=context.order,
            row_chunk=self._row_chunk,
            nthreads=context.nthreads,
        )

    def matrix_mul(self, left: MatrixLike, right: MatrixLike) -> Matrix:
        """Return the matrix product ``left x right``."""

        context = self._snapshot()
        a = self._operand(left, context, "left")
        b = self._operand(right, context, "right")
        return self._multiplier(context)(a, b)

    def matrix_pow(self, matrix: MatrixLike, exponent: int, *, method: str = "squaring") -> Matrix:
        """Raise ``matrix`` to a non-negative integer power.

        ``exponent == 0`` yields the identity regardless of ``matrix``. The
        ``"squaring"`` method needs O(log exponent) products; ``"linear"``
        performs ``exponent - 1`` successive products. Both give identical
        results.
        """

        if isinstance(exponent, bool) or not isinstance(exponent, Integral):
            raise ValueError(f"exponent must be an integer, got {exponent!r}")
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        if method not in POWER_METHODS:
            raise ValueError(f"method must be one of {POWER_METHODS}, got {method!r}")
        context = self._snapshot()
        buffer = self._operand(matrix, context)
        LOGGER.debug("Raising order-%d matrix to power %d (%s)", context.order, exponent, method)
        power = _matrix.matrix_power if method == "squaring" else _matrix.matrix_power_linear
        return power(buffer, int(exponent), context.order, self._multiplier(context))

    # ------------------------------------------------------------------
    # Reductions
    # ------------------------------------------------------------------
    def sum(self, matrix: MatrixLike) -> int:
        return int(self._operand(matrix, self._snapshot()).sum(dtype=np.uint32))

    def trace(self, matrix: MatrixLike) -> int:
        context = self._snapshot()
        buffer = self._operand(matrix, context)
        return int(buffer[:: context.order + 1].sum(dtype=np.uint32))

    def minimum(self, matrix: MatrixLike) -> int:
        return int(self._operand(matrix, self._snapshot()).min())

    def maximum(self, matrix: MatrixLike) -> int:
        return int(self._operand(matrix, self._snapshot()).max())

    def frequency(self, matrix: MatrixLike, value: int) -> int:
        buffer = self._operand(matrix, self._snapshot())
        return int(np.count_nonzero(buffer == _matrix.as_scalar(value, name="value")))

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def element(self, matrix: MatrixLike, row: int, column: int) -> int:
        context = self._snapshot()
        buffer = self._operand(matrix, context)
        r = _matrix.ensure_index(row, context.order, axis="row")
        c = _matrix.ensure_index(column, context.order, axis="column")
        return int(buffer[r * context.order + c])

    def row(self, matrix: MatrixLike, index: int) -> List[int]:
        context = self._snapshot()
        buffer = self._operand(matrix, context)
        r = _matrix.ensure_index(index, context.order, axis="row")
        return buffer[r * context.order : (r + 1) * context.order].tolist()

    def column(self, matrix: MatrixLike, index: int) -> List[int]:
        context = self._snapshot()
        buffer = self._operand(matrix, context)
        c = _matrix.ensure_index(index, context.order, axis="column")
        return buffer[c :: context.order].tolist()
