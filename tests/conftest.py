import numpy as np
import pytest


@pytest.fixture
def cubic_points():
    """Control polygon whose curve passes (0.5, 0.75) at t=0.5."""
    return np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 1.0], [1.0, 0.0]])


@pytest.fixture
def quadratic_points():
    return np.array([[0.0, 0.0], [2.0, 3.0], [4.0, 0.0]])


@pytest.fixture
def high_degree_points():
    rng = np.random.default_rng(7)
    return rng.uniform(-5.0, 5.0, size=(9, 2))
