"""
Geometric Validation Utilities

Validation of input point arrays and of computed control points, plus an
independent reference solve of the relaxed spline system through scipy's
banded solver.
"""

import logging
from typing import Any, Dict, Sequence

import numpy as np
from scipy.linalg import solve_banded

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


def validate_points_input(points: np.ndarray, name: str = "points") -> None:
    """Validate an (N, 2) coordinate array and raise appropriate errors"""
    if points is None:
        raise ValidationError(f"{name} cannot be None")

    array = np.asarray(points, dtype=np.float64)

    if array.ndim != 2 or array.shape[1] != 2:
        raise ValidationError(
            f"{name} must have shape (N, 2)",
            error_details={'shape': array.shape}
        )

    bad_rows = np.flatnonzero(~np.isfinite(array).all(axis=1))
    if bad_rows.size:
        raise ValidationError(
            f"{name} contains NaN or infinite values",
            error_details={'first_bad_index': int(bad_rows[0]), 'count': int(bad_rows.size)}
        )


def reference_solve(values: Sequence[float]) -> np.ndarray:
    """
    Solve one axis of the relaxed spline system with scipy

    Builds the same right-hand side as the Thomas solver but solves the
    (1, 4, 1) system with :func:`scipy.linalg.solve_banded`, so it can act as
    an independent check.

    Args:
        values: The N >= 3 coordinate values of one axis

    Returns:
        The N-2 interior control values
    """
    v = np.asarray(values, dtype=np.float64)
    n = len(v)
    if n < 3:
        raise ValidationError(f"reference solve needs at least 3 values, got {n}")

    rhs = 6.0 * v[1:-1]
    rhs[0] -= v[0]
    rhs[-1] -= v[-1]

    m = n - 2
    banded = np.zeros((3, m))
    banded[0, 1:] = 1.0
    banded[1, :] = 4.0
    banded[2, :-1] = 1.0
    return solve_banded((1, 1), banded, rhs)


def junction_points(controls: np.ndarray) -> np.ndarray:
    """Data points implied by control points: (B[i-1] + 4 B[i] + B[i+1]) / 6"""
    controls = np.asarray(controls, dtype=np.float64)
    return (controls[:-2] + 4.0 * controls[1:-1] + controls[2:]) / 6.0


def validate_control_points(points: Sequence[Sequence[float]],
                            controls: Sequence[Sequence[float]],
                            tolerance: float = 1e-9) -> Dict[str, Any]:
    """
    Validate computed control points against the data points they came from

    Args:
        points: Original data points, N of them
        controls: Control points returned by the solver
        tolerance: Maximum acceptable junction error, relative to the data scale

    Returns:
        Validation results dictionary
    """
    validation_results = {
        'is_valid': True,
        'length_ok': False,
        'endpoints_preserved': False,
        'max_junction_error': float('inf'),
        'errors': []
    }

    data = np.array([tuple(p) for p in points], dtype=np.float64).reshape(-1, 2)
    ctrl = np.array([tuple(p) for p in controls], dtype=np.float64).reshape(-1, 2)

    validation_results['length_ok'] = len(data) == len(ctrl)
    if not validation_results['length_ok']:
        validation_results['is_valid'] = False
        validation_results['errors'].append(
            f"Length mismatch: {len(data)} data points, {len(ctrl)} control points"
        )
        return validation_results

    endpoints_ok = bool(np.array_equal(data[0], ctrl[0]) and np.array_equal(data[-1], ctrl[-1]))
    validation_results['endpoints_preserved'] = endpoints_ok
    if not endpoints_ok:
        validation_results['errors'].append("Endpoints were modified")

    if len(data) >= 3:
        scale = max(1.0, float(np.abs(data).max()))
        error = float(np.abs(junction_points(ctrl) - data[1:-1]).max())
        validation_results['max_junction_error'] = error
        if error > tolerance * scale:
            validation_results['errors'].append(f"Curve misses data points by {error:.3e}")
    else:
        validation_results['errors'].append("Need at least 3 points to check junctions")

    if validation_results['errors']:
        validation_results['is_valid'] = False

    logger.debug(f"Control point validation complete: {len(validation_results['errors'])} errors found")
    return validation_results
