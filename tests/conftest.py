"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_2x2():
    """Small integer matrix used across operator tests."""
    return Matrix([[1, 2], [3, 4]])


@pytest.fixture
def random_square(rng):
    """Well-conditioned 5x5 float matrix (diagonally dominant)."""
    a = rng.standard_normal((5, 5)) + 5.0 * np.eye(5)
    return Matrix.from_array(a)
