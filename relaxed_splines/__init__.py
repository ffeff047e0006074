"""Relaxed cubic spline control points via the tridiagonal matrix algorithm."""
__version__ = "1.0.0"

from .core.points import Point, Axis, CoordinateStore
from .core.tridiagonal import SplineSolver, TridiagonalSystem, build_rhs, solve_tridiagonal
from .core.control_points import SplineConfig, control_points
from .core.bezier import BezierSegment, bezier_segments, sample_curve
from .core.interpolation import RelaxedSplineInterpolator, SplineComponents
from .api import compute_control_points, load_points, save_points
from .exceptions import (
    RelaxedSplinesError,
    InsufficientPointsError,
    DegenerateInputError,
    ValidationError,
    CoordinateLengthError,
    ConfigurationError,
    PointsFileError,
)
