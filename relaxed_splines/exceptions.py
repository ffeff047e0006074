"""
Relaxed Splines Custom Exceptions

Provides specific exception classes for the errors that can occur while
validating input points, solving the tridiagonal system and reading or
writing point files.
"""

import functools
from typing import Optional


class RelaxedSplinesError(Exception):
    """Base exception class for all Relaxed Splines errors"""

    def __init__(self, message: str, error_code: str = "RS_GENERAL"):
        super().__init__(message)
        self.error_code = error_code
        self.message = message

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class InsufficientPointsError(RelaxedSplinesError):
    """Raised when there are too few points to build the tridiagonal system"""

    def __init__(self, num_points: int, required: int = 3):
        self.num_points = num_points
        self.required = required

        full_message = (
            f"insufficient points for spline solve "
            f"(got {num_points}, need at least {required})"
        )

        super().__init__(full_message, "RS_INSUFFICIENT_POINTS")


class DegenerateInputError(RelaxedSplinesError):
    """Raised for a three point input when the 1x1 system is disabled"""

    def __init__(self, message: str, num_points: int = 3):
        self.num_points = num_points
        super().__init__(f"Degenerate input: {message}", "RS_DEGENERATE")


class ValidationError(RelaxedSplinesError):
    """Raised when input points fail validation"""

    def __init__(self, message: str, validation_type: str = "input",
                 error_details: Optional[dict] = None,
                 error_code: str = "RS_VALIDATION"):
        self.validation_type = validation_type
        self.error_details = error_details or {}

        full_message = f"{validation_type.title()} validation failed: {message}"

        if error_details:
            details_str = ", ".join(f"{k}={v}" for k, v in error_details.items())
            full_message += f" (details: {details_str})"

        super().__init__(full_message, error_code)


class CoordinateLengthError(ValidationError):
    """Raised when a replacement axis does not match the stored point count"""

    def __init__(self, axis: str, expected: int, actual: int):
        self.axis = axis
        self.expected = expected
        self.actual = actual

        super().__init__(
            f"{axis} coordinates must have length {expected}, got {actual}",
            validation_type="coordinate",
            error_code="RS_COORDINATE_LENGTH",
        )


class ConfigurationError(RelaxedSplinesError):
    """Raised when configuration is invalid"""

    def __init__(self, message: str, config_key: str = None,
                 config_value: str = None):
        self.config_key = config_key
        self.config_value = config_value

        full_message = f"Configuration error: {message}"

        if config_key:
            full_message += f" (key: {config_key}"
            if config_value:
                full_message += f", value: {config_value}"
            full_message += ")"

        super().__init__(full_message, "RS_CONFIG")


class PointsFileError(RelaxedSplinesError):
    """Raised when a points file cannot be read or parsed"""

    def __init__(self, message: str, path: str = None,
                 original_error: Exception = None):
        self.path = path
        self.original_error = original_error

        full_message = f"Points file error: {message}"

        if path:
            full_message += f" (path: {path})"

        if original_error:
            full_message += f" (caused by: {type(original_error).__name__}: {original_error})"

        super().__init__(full_message, "RS_POINTS_FILE")


# Helper functions for error handling

def handle_spline_error(func):
    """Decorator that wraps unexpected errors from file handling as PointsFileError"""
    @functools.wraps(func)
    def wrapper(path, *args, **kwargs):
        try:
            return func(path, *args, **kwargs)
        except RelaxedSplinesError:
            raise  # Re-raise our own errors as-is
        except Exception as e:
            raise PointsFileError(
                f"Unexpected error in {func.__name__}",
                path=str(path),
                original_error=e
            ) from e
    return wrapper


__all__ = [
    'RelaxedSplinesError',
    'InsufficientPointsError',
    'DegenerateInputError',
    'ValidationError',
    'CoordinateLengthError',
    'ConfigurationError',
    'PointsFileError',
    'handle_spline_error',
]
