"""
Relaxed Splines Core Module

Point storage, the tridiagonal solver, control point orchestration and the
Bezier segment conversion.
"""

from .points import Point, Axis, CoordinateStore
from .tridiagonal import TridiagonalSystem, SplineSolver, build_rhs, solve_tridiagonal
from .control_points import SplineConfig, control_points
from .bezier import BezierSegment, bezier_segments, sample_curve, segments_from_control_points
from .interpolation import RelaxedSplineInterpolator, SplineComponents

__all__ = [
    'Point',
    'Axis',
    'CoordinateStore',
    'TridiagonalSystem',
    'SplineSolver',
    'build_rhs',
    'solve_tridiagonal',
    'SplineConfig',
    'control_points',
    'BezierSegment',
    'bezier_segments',
    'sample_curve',
    'segments_from_control_points',
    'RelaxedSplineInterpolator',
    'SplineComponents',
]
