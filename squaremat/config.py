"""Configuration helpers for square-matrix computations.

The module centralises defaults to keep them consistent between the engine,
the CLI, and tests.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from numbers import Integral

from .errors import InvalidDimension

DEFAULT_ORDER = 4
DEFAULT_NTHREADS = 1
DEFAULT_SEED = 0
DEFAULT_ROW_CHUNK = 64


def _positive(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidDimension(f"{name} must be >= 1, got {value}")
    return int(value)


@dataclass(frozen=True, slots=True)
class MatrixContext:
    """Dimension parameters shared by every matrix an engine touches.

    Parameters
    ----------
    order:
        Side length of every square matrix. Matrices are stored as flat
        row-major buffers of ``order * order`` elements.
    nthreads:
        Number of worker threads the multiplication kernel may use. ``1``
        keeps multiplication sequential.
    """

    order: int
    nthreads: int = DEFAULT_NTHREADS

    def __post_init__(self) -> None:
        object.__setattr__(self, "order", _positive("order", self.order))
        object.__setattr__(self, "nthreads", _positive("nthreads", self.nthreads))

    @property
    def width(self) -> int:
        return self.order

    @property
    def height(self) -> int:
        return self.order

    @property
    def element_count(self) -> int:
        return self.order * self.order

    def with_order(self, order: int) -> "MatrixContext":
        return replace(self, order=order)

    def with_nthreads(self, nthreads: int) -> "MatrixContext":
        return replace(self, nthreads=nthreads)

    def describe(self) -> str:
        """Return a human readable description.

        >>> MatrixContext(3).describe()
        'order=3 elements=9 nthreads=1'
        """

        return f"order={self.order} elements={self.element_count} nthreads={self.nthreads}"
