"""
Relaxed Splines Interpolation Engine

Object interface over the control point solver. A RelaxedSplineInterpolator
carries one SplineConfig and produces control points, Bezier segments or a
full SplineComponents bundle for any number of point sequences.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

import numpy as np

from .bezier import BezierSegment, sample_curve, segments_from_control_points
from .control_points import SplineConfig, control_points
from .points import CoordinateStore, Point, PointLike
from .tridiagonal import SplineSolver

logger = logging.getLogger(__name__)


@dataclass
class SplineComponents:
    """Container for relaxed spline fitting results"""
    data_points: List[Point]
    control_points: List[Point]
    segments: List[BezierSegment]
    metadata: Dict[str, Any] = field(default_factory=dict)

    def keys(self):
        """Make compatible with dict-like access"""
        return ['data_points', 'control_points', 'segments']

    def values(self):
        """Make compatible with dict-like access"""
        return [self.data_points, self.control_points, self.segments]

    def items(self):
        """Make compatible with dict-like access"""
        return zip(self.keys(), self.values())


class RelaxedSplineInterpolator:
    """
    Relaxed cubic spline interpolator.

    Each call is self-contained, so one interpolator can be shared between
    threads as long as every caller passes its own points.
    """

    def __init__(self, config: Optional[SplineConfig] = None):
        """Initialize the interpolator

        Args:
            config: Solver configuration (defaults to ``SplineConfig()``)
        """
        self.config = (config or SplineConfig()).validate()
        self.solver = SplineSolver()

        logger.debug(f"Initialized RelaxedSplineInterpolator with {self.config}")

    def solve_axis(self, values: Sequence[float]) -> np.ndarray:
        """Interior control values for a single coordinate axis"""
        return self.solver.solve_axis(values)

    def control_points(self, points: Union[CoordinateStore, Iterable[PointLike]]) -> List[Point]:
        return control_points(points, self.config)

    def sample(self, points: Union[CoordinateStore, Iterable[PointLike]],
               samples_per_segment: Optional[int] = None) -> np.ndarray:
        return sample_curve(points, samples_per_segment, self.config)

    def fit(self, points: Union[CoordinateStore, Iterable[PointLike]]) -> SplineComponents:
        """Solve for control points and derive the Bezier segments

        Args:
            points: Ordered data points

        Returns:
            SplineComponents with data points, control points and segments
        """
        store = points if isinstance(points, CoordinateStore) else CoordinateStore(points)
        controls = control_points(store, self.config)
        segments = segments_from_control_points(store.points, controls)

        metadata = {
            'n_points': store.size(),
            'n_interior': store.size() - 2,
            'n_segments': len(segments),
            'degenerate': store.size() == 3,
            'parallel_axes': self.config.parallel_axes,
        }

        return SplineComponents(
            data_points=list(store.points),
            control_points=controls,
            segments=segments,
            metadata=metadata
        )
