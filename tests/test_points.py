import dataclasses

import numpy as np
import pytest

from relaxed_splines.core.points import Axis, CoordinateStore, Point
from relaxed_splines.exceptions import CoordinateLengthError, ValidationError


def test_point_is_immutable():
    p = Point(1, 2)
    assert p.x == 1.0 and isinstance(p.x, float)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0


def test_point_unpacks():
    x, y = Point(3, 4)
    assert (x, y) == (3.0, 4.0)
    assert Point(3, 4).as_tuple() == (3.0, 4.0)


def test_store_axes(zigzag_points):
    store = CoordinateStore(zigzag_points)
    assert store.size() == 4
    assert len(store) == 4
    np.testing.assert_array_equal(store.axis_values(Axis.X), [0, 1, 2, 3])
    np.testing.assert_array_equal(store.axis_values(Axis.Y), [0, 2, 0, 2])
    np.testing.assert_array_equal(store.x_coordinates, store.axis_values(Axis.X))
    assert store.first is zigzag_points[0]
    assert store.last is zigzag_points[-1]


def test_store_accepts_pairs():
    store = CoordinateStore([(0, 1), (2, 3), (4, 5)])
    assert store.points[1] == Point(2, 3)


def test_axis_values_is_idempotent_and_a_copy(zigzag_points):
    store = CoordinateStore(zigzag_points)
    first = store.axis_values(Axis.Y)
    second = store.axis_values(Axis.Y)
    np.testing.assert_array_equal(first, second)

    first[:] = 99.0
    np.testing.assert_array_equal(store.axis_values(Axis.Y), [0, 2, 0, 2])


def test_with_coordinates_returns_new_store(zigzag_points):
    store = CoordinateStore(zigzag_points)
    moved = store.with_x_coordinates([10, 11, 12, 13])

    np.testing.assert_array_equal(moved.x_coordinates, [10, 11, 12, 13])
    np.testing.assert_array_equal(moved.y_coordinates, [0, 2, 0, 2])
    np.testing.assert_array_equal(store.x_coordinates, [0, 1, 2, 3])

    lifted = store.with_y_coordinates([5, 5, 5, 5])
    assert lifted.points[2] == Point(2, 5)


def test_with_coordinates_rejects_wrong_length(zigzag_points):
    store = CoordinateStore(zigzag_points)
    with pytest.raises(CoordinateLengthError) as excinfo:
        store.with_y_coordinates([1, 2, 3])
    assert excinfo.value.expected == 4
    assert excinfo.value.actual == 3
    assert isinstance(excinfo.value, ValidationError)


def test_from_axes_rejects_mismatch():
    with pytest.raises(CoordinateLengthError):
        CoordinateStore.from_axes([1, 2, 3], [1, 2])


def test_store_rejects_triples():
    with pytest.raises(ValidationError):
        CoordinateStore([(0, 0, 1), (1, 2, 1), (2, 0, 1)])
