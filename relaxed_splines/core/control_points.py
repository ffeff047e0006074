"""
Relaxed Splines Control Points

Turns an ordered sequence of data points into the control points of the
relaxed cubic spline through them. The X and Y axes are solved as two
independent tridiagonal systems and zipped back together, with the first
and last data points kept as the curve's fixed endpoints.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

import numpy as np

from .points import Axis, CoordinateStore, Point, PointLike
from .tridiagonal import MIN_POINTS, SplineSolver
from ..exceptions import ConfigurationError, DegenerateInputError, InsufficientPointsError
from ..utils.geometric_validation import validate_points_input

logger = logging.getLogger(__name__)


@dataclass
class SplineConfig:
    """Configuration for control point computation"""
    allow_degenerate: bool = True  # accept N == 3 as a 1x1 system
    validate_input: bool = True  # reject NaN / inf coordinates
    parallel_axes: bool = False  # solve X and Y on worker threads
    samples_per_segment: int = 16

    def validate(self) -> 'SplineConfig':
        if not isinstance(self.samples_per_segment, int) or self.samples_per_segment < 1:
            raise ConfigurationError(
                f"samples_per_segment must be a positive integer, got {self.samples_per_segment!r}",
                config_key="samples_per_segment",
                config_value=str(self.samples_per_segment)
            )
        return self


def _as_store(points: Union[CoordinateStore, Iterable[PointLike]]) -> CoordinateStore:
    if isinstance(points, CoordinateStore):
        return points
    return CoordinateStore(points)


def check_point_count(num_points: int, config: SplineConfig) -> None:
    """Raise if ``num_points`` cannot produce a tridiagonal system under ``config``"""
    if num_points < MIN_POINTS:
        raise InsufficientPointsError(num_points, MIN_POINTS)
    if num_points == MIN_POINTS and not config.allow_degenerate:
        raise DegenerateInputError(
            "three points give a single-row system; enable allow_degenerate to solve it"
        )


def control_points(points: Union[CoordinateStore, Iterable[PointLike]],
                   config: Optional[SplineConfig] = None) -> List[Point]:
    """
    Compute the relaxed cubic spline control points for ``points``

    Args:
        points: Ordered data points (Points, ``(x, y)`` pairs or a CoordinateStore)
        config: Optional configuration

    Returns:
        N points: the first data point, the N-2 solved interior control
        points and the last data point

    Raises:
        InsufficientPointsError: Fewer than three points
        DegenerateInputError: Three points with ``allow_degenerate`` off
        ValidationError: Non-finite coordinates with ``validate_input`` on
    """
    config = (config or SplineConfig()).validate()
    store = _as_store(points)
    n = store.size()

    check_point_count(n, config)

    x_values = store.axis_values(Axis.X)
    y_values = store.axis_values(Axis.Y)

    if config.validate_input:
        validate_points_input(np.column_stack([x_values, y_values]))

    solver = SplineSolver()
    if config.parallel_axes:
        with ThreadPoolExecutor(max_workers=2) as executor:
            future_x = executor.submit(solver.solve_axis, x_values)
            future_y = executor.submit(solver.solve_axis, y_values)
            solved_x = future_x.result()
            solved_y = future_y.result()
    else:
        solved_x = solver.solve_axis(x_values)
        solved_y = solver.solve_axis(y_values)

    result = [store.first]
    result.extend(Point(x, y) for x, y in zip(solved_x, solved_y))
    result.append(store.last)

    logger.debug(f"Computed {len(result)} control points from {n} data points")
    return result
