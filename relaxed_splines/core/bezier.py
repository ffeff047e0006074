"""
Relaxed Splines Bezier Segments

Converts relaxed spline control points into the cubic Bezier segments that
a renderer can draw directly, and samples the resulting curve.

For control points B[0..N-1] the segment between data points S[i] and
S[i+1] has inner handles (2 B[i] + B[i+1]) / 3 and (B[i] + 2 B[i+1]) / 3.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from .control_points import SplineConfig, control_points
from .points import CoordinateStore, Point, PointLike, as_point
from ..exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BezierSegment:
    """Cubic Bezier segment between two consecutive data points"""
    start: Point
    control1: Point
    control2: Point
    end: Point

    def evaluate(self, t: Union[float, np.ndarray]) -> np.ndarray:
        """Evaluate the segment at parameter(s) ``t`` in [0, 1]

        Returns:
            Array of shape (2,) for a scalar ``t``, otherwise (len(t), 2)
        """
        t = np.asarray(t, dtype=np.float64)
        p0, p1, p2, p3 = (np.array(p.as_tuple()) for p in self.as_tuple())
        s = 1.0 - t[..., None]
        u = t[..., None]
        return s ** 3 * p0 + 3 * s ** 2 * u * p1 + 3 * s * u ** 2 * p2 + u ** 3 * p3

    def as_tuple(self):
        return (self.start, self.control1, self.control2, self.end)


def segments_from_control_points(data_points: Sequence[PointLike],
                                 controls: Sequence[PointLike]) -> List[BezierSegment]:
    """Build N-1 Bezier segments from data points and their spline control points"""
    data = [as_point(p) for p in data_points]
    ctrl = [as_point(p) for p in controls]
    if len(data) != len(ctrl):
        raise ValidationError(
            f"got {len(data)} data points but {len(ctrl)} control points",
            validation_type="segment"
        )

    segments = []
    for i in range(len(data) - 1):
        b0, b1 = ctrl[i], ctrl[i + 1]
        segments.append(BezierSegment(
            start=data[i],
            control1=Point((2 * b0.x + b1.x) / 3, (2 * b0.y + b1.y) / 3),
            control2=Point((b0.x + 2 * b1.x) / 3, (b0.y + 2 * b1.y) / 3),
            end=data[i + 1],
        ))
    return segments


def bezier_segments(points: Union[CoordinateStore, Iterable[PointLike]],
                    config: Optional[SplineConfig] = None) -> List[BezierSegment]:
    """Solve for control points and return the N-1 Bezier segments through ``points``"""
    store = points if isinstance(points, CoordinateStore) else CoordinateStore(points)
    controls = control_points(store, config)
    return segments_from_control_points(store.points, controls)


def sample_curve(points: Union[CoordinateStore, Iterable[PointLike]],
                 samples_per_segment: Optional[int] = None,
                 config: Optional[SplineConfig] = None) -> np.ndarray:
    """
    Sample the relaxed spline through ``points``

    Args:
        points: Ordered data points
        samples_per_segment: Samples per segment, excluding the shared end
            point (defaults to ``config.samples_per_segment``)
        config: Optional configuration

    Returns:
        Array of shape ((N-1) * samples_per_segment + 1, 2) that starts at
        the first data point, ends at the last one and passes through all
        the others
    """
    config = config or SplineConfig()
    if samples_per_segment is None:
        samples_per_segment = config.samples_per_segment
    if not isinstance(samples_per_segment, int) or samples_per_segment < 1:
        raise ConfigurationError(
            "samples_per_segment must be a positive integer",
            config_key="samples_per_segment",
            config_value=str(samples_per_segment)
        )

    segments = bezier_segments(points, config)
    t = np.arange(samples_per_segment, dtype=np.float64) / samples_per_segment

    pieces = [segment.evaluate(t) for segment in segments]
    pieces.append(np.array([segments[-1].end.as_tuple()]))
    curve = np.vstack(pieces)

    logger.debug(f"Sampled {len(curve)} curve points from {len(segments)} segments")
    return curve
