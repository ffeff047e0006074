"""
Relaxed Splines Point Storage

Immutable point type and the coordinate store that splits an ordered point
sequence into its X and Y axes for the per-axis tridiagonal solve.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence, Tuple, Union

import numpy as np

from ..exceptions import CoordinateLengthError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A 2D point with float coordinates"""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


PointLike = Union[Point, Sequence[float]]


class Axis(Enum):
    X = 0
    Y = 1


def as_point(value: PointLike) -> Point:
    """Coerce an ``(x, y)`` pair into a :class:`Point` (Points pass through)"""
    if isinstance(value, Point):
        return value
    try:
        x, y = value
        return Point(x, y)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            "each point must be a pair of numbers",
            error_details={'point': repr(value)}
        ) from e


class CoordinateStore:
    """
    Ordered point sequence exposed as two independent coordinate axes.

    The store never changes after construction. Replacing an axis produces
    a new store, and the replacement must have exactly ``size()`` values so
    the X and Y axes can never disagree in length.
    """

    def __init__(self, points: Iterable[PointLike]):
        self._points: Tuple[Point, ...] = tuple(as_point(p) for p in points)
        self._axes = (
            np.array([p.x for p in self._points], dtype=np.float64),
            np.array([p.y for p in self._points], dtype=np.float64),
        )
        logger.debug(f"CoordinateStore holding {len(self._points)} points")

    @classmethod
    def from_axes(cls, x_values: Sequence[float], y_values: Sequence[float]) -> 'CoordinateStore':
        """Build a store from separate X and Y sequences of equal length"""
        if len(x_values) != len(y_values):
            raise CoordinateLengthError('Y', len(x_values), len(y_values))
        return cls(zip(x_values, y_values))

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    @property
    def first(self) -> Point:
        return self._points[0]

    @property
    def last(self) -> Point:
        return self._points[-1]

    def size(self) -> int:
        return len(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def axis_values(self, axis: Axis) -> np.ndarray:
        """Return a fresh copy of one coordinate axis, in point order

        Args:
            axis: Which axis to extract

        Returns:
            Float64 array of length ``size()``
        """
        return self._axes[Axis(axis).value].copy()

    @property
    def x_coordinates(self) -> np.ndarray:
        return self.axis_values(Axis.X)

    @property
    def y_coordinates(self) -> np.ndarray:
        return self.axis_values(Axis.Y)

    def with_x_coordinates(self, values: Sequence[float]) -> 'CoordinateStore':
        """Return a new store whose X axis is replaced by ``values``"""
        if len(values) != self.size():
            raise CoordinateLengthError('X', self.size(), len(values))
        return CoordinateStore.from_axes(list(values), self._axes[1])

    def with_y_coordinates(self, values: Sequence[float]) -> 'CoordinateStore':
        """Return a new store whose Y axis is replaced by ``values``"""
        if len(values) != self.size():
            raise CoordinateLengthError('Y', self.size(), len(values))
        return CoordinateStore.from_axes(self._axes[0], list(values))

    def __repr__(self):
        return f"CoordinateStore(size={self.size()})"
