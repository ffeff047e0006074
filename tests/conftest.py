import numpy as np
import pytest

from relaxed_splines.core.points import Point


@pytest.fixture
def zigzag_points():
    return [Point(0, 0), Point(1, 2), Point(2, 0), Point(3, 2)]


@pytest.fixture
def three_points():
    return [Point(0, 0), Point(1, 3), Point(2, 0)]


@pytest.fixture
def random_points():
    rng = np.random.default_rng(1234)
    return rng.uniform(-100.0, 100.0, size=(1000, 2))
