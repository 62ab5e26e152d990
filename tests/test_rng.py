from __future__ import annotations

import numpy as np
import pytest

from squaremat import LinearCongruentialGenerator


def test_generator_matches_known_sequence() -> None:
    generator = LinearCongruentialGenerator(1)
    assert [generator.next() for _ in range(4)] == [41, 18467, 6334, 26500]


def test_generator_starts_from_zero_seed() -> None:
    generator = LinearCongruentialGenerator()
    assert generator.state == 0
    assert generator.next() == 38
    assert generator.state == 2531011


def test_fill_continues_the_same_stream() -> None:
    drawn = LinearCongruentialGenerator(42)
    filled = LinearCongruentialGenerator(42)
    expected = [drawn.next() for _ in range(9)]
    values = filled.fill(9)
    assert values.dtype == np.uint32
    assert values.tolist() == expected
    assert filled.state == drawn.state == 1036078381


def test_values_stay_within_fifteen_bits() -> None:
    values = LinearCongruentialGenerator(123456789).fill(500)
    assert int(values.max()) <= 0x7FFF


def test_reseed_restarts_stream() -> None:
    generator = LinearCongruentialGenerator(7)
    first = generator.fill(5).tolist()
    generator.seed(7)
    assert generator.fill(5).tolist() == first


@pytest.mark.parametrize("seed", [-1, 2**32])
def test_seed_must_fit_in_uint32(seed: int) -> None:
    with pytest.raises(ValueError):
        LinearCongruentialGenerator(seed)


def test_fill_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        LinearCongruentialGenerator().fill(-1)


@pytest.mark.parametrize("seed", [1.9, True, None])
def test_seed_must_be_an_integer(seed) -> None:
    generator = LinearCongruentialGenerator(3)
    with pytest.raises(ValueError):
        generator.seed(seed)
    assert generator.state == 3
