from __future__ import annotations

import numpy as np
import pytest

from squaremat import DimensionMismatch, MatrixEngine


def test_clone_copies_without_aliasing(engine: MatrixEngine) -> None:
    source = engine.sequence(1, 1)
    copy = engine.clone(source)
    np.testing.assert_array_equal(copy, source)
    copy[0] = 99
    assert source[0] == 1


def test_reverse_mirrors_linear_index(engine3: MatrixEngine) -> None:
    source = engine3.sequence(0, 1)
    assert engine3.reverse(source).tolist() == [8, 7, 6, 5, 4, 3, 2, 1, 0]


def test_reverse_and_transpose_are_involutions(engine3: MatrixEngine) -> None:
    source = engine3.random(11)
    np.testing.assert_array_equal(engine3.reverse(engine3.reverse(source)), source)
    np.testing.assert_array_equal(engine3.transpose(engine3.transpose(source)), source)


def test_transpose(engine3: MatrixEngine) -> None:
    source = engine3.sequence(1, 1)
    assert engine3.transpose(source).tolist() == [1, 4, 7, 2, 5, 8, 3, 6, 9]


def test_transforms_leave_input_untouched(engine3: MatrixEngine) -> None:
    source = engine3.sequence(1, 1)
    engine3.transpose(source)
    engine3.reverse(source)
    assert source.tolist() == list(range(1, 10))


def test_transforms_accept_plain_lists(engine: MatrixEngine) -> None:
    assert engine.transpose([1, 2, 3, 4]).tolist() == [1, 3, 2, 4]


def test_scalar_add_wraps(engine: MatrixEngine) -> None:
    assert engine.scalar_add([4294967295, 1, 2, 3], 1).tolist() == [0, 2, 3, 4]


def test_scalar_mul_wraps(engine: MatrixEngine) -> None:
    assert engine.scalar_mul([2147483648, 1, 2, 3], 2).tolist() == [0, 2, 4, 6]


def test_matrix_add_wraps(engine: MatrixEngine) -> None:
    left = [4294967295, 10, 20, 30]
    right = [2, 1, 2, 3]
    assert engine.matrix_add(left, right).tolist() == [1, 11, 22, 33]


@pytest.mark.parametrize("scalar", [0, 1, 3, 4294967295])
def test_sum_of_scalar_add(engine3: MatrixEngine, scalar: int) -> None:
    source = engine3.random(5)
    expected = (engine3.sum(source) + scalar * 9) % 2**32
    assert engine3.sum(engine3.scalar_add(source, scalar)) == expected


def test_matrix_add_rejects_mismatched_operands(engine: MatrixEngine) -> None:
    with pytest.raises(DimensionMismatch):
        engine.matrix_add([1, 2, 3, 4], [1, 2, 3])


def test_operands_must_be_flat(engine: MatrixEngine) -> None:
    with pytest.raises(DimensionMismatch):
        engine.clone([[1, 2], [3, 4]])


def test_operands_must_hold_uint32_values(engine: MatrixEngine) -> None:
    with pytest.raises(ValueError):
        engine.clone([1, 2, 3, -4])
    with pytest.raises(TypeError):
        engine.clone([1.0, 2.0, 3.0, 4.0])


def test_elements_beyond_sixty_four_bits_are_out_of_range(engine: MatrixEngine) -> None:
    with pytest.raises(ValueError, match="32 unsigned bits"):
        engine.clone([2**64, 0, 0, 0])
    with pytest.raises(ValueError, match="32 unsigned bits"):
        engine.matrix_add([1, 2, 3, 4], [-(2**70), 0, 0, 0])
