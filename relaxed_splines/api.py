"""
Relaxed Splines High-Level API

Simple functions for computing relaxed spline control points from whatever
container the caller has (Point lists, NumPy arrays, PyTorch tensors) and
for reading and writing point files.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np
import torch

from .core.bezier import BezierSegment
from .core.control_points import SplineConfig, control_points
from .core.points import Point, PointLike
from .exceptions import ConfigurationError, PointsFileError, handle_spline_error
from .utils.tensor_ops import array_to_points, numpy_to_tensor, points_to_array

logger = logging.getLogger(__name__)

JSON_SUFFIXES = ('.json',)
CSV_SUFFIXES = ('.csv',)
TEXT_SUFFIXES = ('.txt', '.dat')

# Main API Functions

def compute_control_points(
    points: Union[Sequence[PointLike], np.ndarray, torch.Tensor],
    config: Optional[SplineConfig] = None
) -> Union[List[Point], np.ndarray, torch.Tensor]:
    """
    Compute relaxed spline control points, returning the caller's container type

    Args:
        points: Ordered data points as a Point/pair sequence, an (N, 2)
            ndarray or an (N, 2) tensor
        config: Optional solver configuration

    Returns:
        Control points as a list of Points, an ndarray or a tensor on the
        same device with the same dtype as the input

    Example:
        >>> compute_control_points([(0, 0), (1, 2), (2, 0), (3, 2)])[1]
        Point(x=1.0, y=3.3333333333333335)
    """
    array = points_to_array(points)
    result = control_points(array_to_points(array), config)

    if isinstance(points, torch.Tensor):
        out_dtype = points.dtype if points.is_floating_point() else torch.float64
        return numpy_to_tensor(points_to_array(result), device=points.device, dtype=out_dtype)

    if isinstance(points, np.ndarray):
        out_dtype = points.dtype if np.issubdtype(points.dtype, np.floating) else np.float64
        return points_to_array(result).astype(out_dtype)

    return result


def _parse_json_points(data: Any) -> List[Point]:
    if isinstance(data, dict) and 'points' in data:
        data = data['points']
    if not isinstance(data, list):
        raise ValueError("expected a list of points")

    points = []
    for item in data:
        if isinstance(item, dict):
            points.append(Point(item['x'], item['y']))
        else:
            x, y = item
            points.append(Point(x, y))
    return points


def _has_header(path: Path, delimiter: Optional[str]) -> bool:
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            first = line.split(delimiter)[0]
            try:
                float(first)
            except ValueError:
                return True
            return False
    return False


@handle_spline_error
def load_points(path: Union[str, Path]) -> List[Point]:
    """
    Load data points from a JSON, CSV or whitespace separated text file

    JSON files hold a list of ``[x, y]`` pairs or ``{"x": .., "y": ..}``
    objects (optionally under a ``"points"`` key). CSV and text files hold
    two columns with an optional header line.

    Args:
        path: File to read

    Returns:
        List of Points in file order
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix not in JSON_SUFFIXES + CSV_SUFFIXES + TEXT_SUFFIXES:
        raise ConfigurationError(
            f"Unsupported points file format '{suffix}'",
            config_key="input_format",
            config_value=suffix
        )
    if not path.exists():
        raise PointsFileError("file does not exist", path=str(path))

    if suffix in JSON_SUFFIXES:
        with open(path, 'r', encoding='utf-8') as f:
            points = _parse_json_points(json.load(f))
    else:
        delimiter = ',' if suffix in CSV_SUFFIXES else None
        skip = 1 if _has_header(path, delimiter) else 0
        array = np.loadtxt(path, delimiter=delimiter, skiprows=skip, ndmin=2)
        points = array_to_points(points_to_array(array))

    logger.info(f"Loaded {len(points)} points from {path}")
    return points


@handle_spline_error
def save_points(path: Union[str, Path], points: Sequence[PointLike]) -> Path:
    """Write points as JSON (``[[x, y], ...]``), CSV or whitespace text, chosen by file suffix

    Args:
        path: Output file
        points: Points to write

    Returns:
        The output path
    """
    path = Path(path)
    suffix = path.suffix.lower()
    array = points_to_array(points)

    if suffix in JSON_SUFFIXES:
        write_json(path, array.tolist())
    elif suffix in CSV_SUFFIXES:
        np.savetxt(path, array, delimiter=',', header='x,y', comments='', fmt='%.17g')
    elif suffix in TEXT_SUFFIXES:
        np.savetxt(path, array, delimiter=' ', header='x y', comments='', fmt='%.17g')
    else:
        raise ConfigurationError(
            f"Unsupported output format '{suffix}'",
            config_key="output_format",
            config_value=suffix
        )

    logger.info(f"Saved {len(array)} points to {path}")
    return path


@handle_spline_error
def write_json(path: Union[str, Path], data: Any) -> Path:
    """Write ``data`` as indented JSON"""
    path = Path(path)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)
        f.write("\n")
    return path


def segments_to_dict(segments: Sequence[BezierSegment]) -> List[Dict[str, List[float]]]:
    """JSON-ready representation of Bezier segments"""
    return [
        {
            'start': list(segment.start.as_tuple()),
            'control1': list(segment.control1.as_tuple()),
            'control2': list(segment.control2.as_tuple()),
            'end': list(segment.end.as_tuple()),
        }
        for segment in segments
    ]
