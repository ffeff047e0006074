"""
Tensor Operations Utilities

Converts between the point containers accepted at the API boundary: lists
of Points or pairs, NumPy (N, 2) arrays and PyTorch (N, 2) tensors.
"""

import logging
from typing import Any, List, Optional

import numpy as np
import torch

from ..core.points import Point
from ..exceptions import ValidationError

logger = logging.getLogger(__name__)


def tensor_to_numpy(tensor: torch.Tensor) -> np.ndarray:
    """Convert PyTorch tensor to NumPy array safely

    Args:
        tensor: Input PyTorch tensor

    Returns:
        NumPy array
    """
    return tensor.detach().cpu().numpy()


def numpy_to_tensor(array: np.ndarray, device: Optional[torch.device] = None,
                    dtype: Optional[torch.dtype] = None) -> torch.Tensor:
    """Convert NumPy array to PyTorch tensor

    Args:
        array: Input NumPy array
        device: Target device
        dtype: Target data type

    Returns:
        PyTorch tensor
    """
    tensor = torch.from_numpy(np.ascontiguousarray(array))

    if dtype is not None:
        tensor = tensor.to(dtype)

    if device is not None:
        tensor = tensor.to(device)

    return tensor


def points_to_array(points: Any) -> np.ndarray:
    """Convert any supported point container into a float64 (N, 2) array

    Args:
        points: Sequence of Points or pairs, NumPy array or PyTorch tensor

    Returns:
        NumPy array of shape (N, 2)
    """
    if isinstance(points, torch.Tensor):
        array = tensor_to_numpy(points).astype(np.float64)
    elif isinstance(points, np.ndarray):
        array = points.astype(np.float64)
    else:
        array = np.array([tuple(p) for p in points], dtype=np.float64)
        if array.size == 0:
            array = array.reshape(0, 2)

    if array.ndim != 2 or array.shape[1] != 2:
        raise ValidationError(
            "points must have shape (N, 2)",
            error_details={'shape': array.shape}
        )
    return array


def array_to_points(array: np.ndarray) -> List[Point]:
    """Convert an (N, 2) array into a list of Points"""
    return [Point(x, y) for x, y in np.asarray(array, dtype=np.float64)]
