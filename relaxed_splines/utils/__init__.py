"""
Relaxed Splines Utilities Module

Input validation, the scipy reference solve, conversions between point
containers and logging setup.
"""

from .geometric_validation import (
    validate_points_input, validate_control_points, reference_solve, junction_points
)

from .tensor_ops import (
    tensor_to_numpy, numpy_to_tensor, points_to_array, array_to_points
)

from .logging import setup_logging

__all__ = [
    # Geometric validation
    'validate_points_input',
    'validate_control_points',
    'reference_solve',
    'junction_points',

    # Tensor operations
    'tensor_to_numpy',
    'numpy_to_tensor',
    'points_to_array',
    'array_to_points',

    # Logging
    'setup_logging',
]
