"""Deterministic linear-congruential generator for random matrices."""

from __future__ import annotations

import logging
from numbers import Integral

import numpy as np

LOGGER = logging.getLogger(__name__)

UINT32_MASK = 0xFFFFFFFF
LCG_MULTIPLIER = 214013
LCG_INCREMENT = 2531011


class LinearCongruentialGenerator:
    """Produce values in ``[0, 32767]`` from a single 32-bit state word.

    The sequence is fully determined by the starting seed; it is not suitable
    for anything security related.
    """

    def __init__(self, seed: int = 0) -> None:
        self._state = 0
        self.seed(seed)

    @property
    def state(self) -> int:
        return self._state

    def seed(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise ValueError(f"seed must be an integer, got {value!r}")
        if not 0 <= value <= UINT32_MASK:
            raise ValueError(f"seed must fit in 32 unsigned bits, got {value}")
        LOGGER.debug("Reseeding generator with %d", value)
        self._state = int(value)

    def next(self) -> int:
        self._state = (LCG_MULTIPLIER * self._state + LCG_INCREMENT) & UINT32_MASK
        return (self._state >> 16) & 0x7FFF

    def fill(self, count: int) -> np.ndarray:
        if count < 0:
            raise ValueError("count must be non-negative")
        values = np.empty(count, dtype=np.uint32)
        state = self._state
        for idx in range(count):
            state = (LCG_MULTIPLIER * state + LCG_INCREMENT) & UINT32_MASK
            values[idx] = (state >> 16) & 0x7FFF
        self._state = state
        return values
