"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import FullPrecisionMatrix, ReducedPrecisionMatrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=[ReducedPrecisionMatrix, FullPrecisionMatrix], ids=['fp32', 'fp64'])
def matrix_cls(request):
    """Each test using this fixture runs once per storage precision."""
    return request.param


@pytest.fixture
def small_grid():
    """2x3 grid with exactly representable values in both precisions."""
    return [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]


@pytest.fixture
def random_pair(matrix_cls, rng):
    """Two same-shape matrices of small dyadic values (exact in float32)."""
    a = np.round(rng.uniform(-8, 8, (4, 3)) * 4) / 4
    b = np.round(rng.uniform(-8, 8, (4, 3)) * 4) / 4
    return matrix_cls.from_grid(a), matrix_cls.from_grid(b)
