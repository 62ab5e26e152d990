from __future__ import annotations

import pytest

from squaremat import MatrixContext, MatrixEngine


@pytest.fixture()
def engine() -> MatrixEngine:
    return MatrixEngine(MatrixContext(order=2))


@pytest.fixture()
def engine3() -> MatrixEngine:
    return MatrixEngine(MatrixContext(order=3))
