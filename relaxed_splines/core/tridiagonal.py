"""
Relaxed Splines Tridiagonal Solver

Builds the right-hand side of the relaxed cubic spline system for a single
coordinate axis and solves it with the Thomas algorithm. The coefficient
matrix is fixed:

    | 4 1       |
    | 1 4 1     |
    |   . . .   |
    |     1 4 1 |
    |       1 4 |

It is strictly diagonally dominant, so the forward sweep never divides by
zero and no pivoting is needed.

References:
    http://en.wikipedia.org/wiki/Tridiagonal_matrix_algorithm
    http://www.math.ucla.edu/~baker/149.1.02w/handouts/dd_splines.pdf
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..exceptions import InsufficientPointsError

logger = logging.getLogger(__name__)

MIN_POINTS = 3

SUB_DIAGONAL = 1.0
DIAGONAL = 4.0
SUPER_DIAGONAL = 1.0


@dataclass
class TridiagonalSystem:
    """Banded form of A·z = d with sub (a), main (b) and super (c) diagonals"""
    a: np.ndarray
    b: np.ndarray
    c: np.ndarray
    d: np.ndarray

    @classmethod
    def relaxed(cls, rhs: Sequence[float]) -> 'TridiagonalSystem':
        """Fixed (1, 4, 1) system for the given right-hand side"""
        d = np.array(rhs, dtype=np.float64)
        size = len(d)
        if size == 0:
            raise InsufficientPointsError(size + 2, MIN_POINTS)

        a = np.full(size, SUB_DIAGONAL)
        b = np.full(size, DIAGONAL)
        c = np.full(size, SUPER_DIAGONAL)
        a[0] = 0.0
        c[-1] = 0.0
        return cls(a=a, b=b, c=c, d=d)

    def __len__(self) -> int:
        return len(self.d)

    def to_dense(self) -> np.ndarray:
        """Full matrix A, mostly for inspection and tests"""
        size = len(self)
        matrix = np.diag(self.b)
        if size > 1:
            matrix += np.diag(self.a[1:], k=-1) + np.diag(self.c[:-1], k=1)
        return matrix


def build_rhs(values: Sequence[float]) -> np.ndarray:
    """
    Build the right-hand side vector for one coordinate axis

    For data values S[0..N-1] the relaxed spline equations are

        [ 6 S[1]   - S[0]   ]
        [ 6 S[i]            ]   for i = 2 .. N-3
        [ 6 S[N-2] - S[N-1] ]

    With three points the first and last rows are the same row, so both
    endpoint corrections apply to it: 6 S[1] - S[0] - S[2].

    Args:
        values: The N coordinate values of one axis

    Returns:
        Array of length N-2

    Raises:
        InsufficientPointsError: If fewer than three values are given
    """
    v = np.asarray(values, dtype=np.float64)
    n = len(v)
    if n < MIN_POINTS:
        raise InsufficientPointsError(n, MIN_POINTS)

    rhs = 6.0 * v[1:n - 1]
    rhs[0] -= v[0]
    rhs[-1] -= v[n - 1]
    return rhs


def solve_tridiagonal(rhs: Sequence[float]) -> np.ndarray:
    """
    Solve the (1, 4, 1) tridiagonal system with the Thomas algorithm

    Args:
        rhs: Right-hand side vector of length M >= 1

    Returns:
        New array of length M holding the solution; ``rhs`` is left untouched
    """
    system = TridiagonalSystem.relaxed(rhs)
    a, b, c, d = system.a, system.b, system.c, system.d
    n = len(d) - 1

    c[0] /= b[0]
    d[0] /= b[0]

    # forward sweep
    for i in range(1, n):
        denom = b[i] - a[i] * c[i - 1]
        c[i] /= denom
        d[i] = (d[i] - a[i] * d[i - 1]) / denom

    if n > 0:
        d[n] = (d[n] - a[n] * d[n - 1]) / (b[n] - a[n] * c[n - 1])

    # back substitution
    for i in range(n - 1, -1, -1):
        d[i] -= c[i] * d[i + 1]

    return d


class SplineSolver:
    """Per-axis solver: right-hand side construction followed by the Thomas sweep"""

    def build_rhs(self, values: Sequence[float]) -> np.ndarray:
        return build_rhs(values)

    def solve(self, rhs: Sequence[float]) -> np.ndarray:
        return solve_tridiagonal(rhs)

    def solve_axis(self, values: Sequence[float]) -> np.ndarray:
        """Interior control values (length N-2) for one axis of N values"""
        solved = self.solve(self.build_rhs(values))
        logger.debug(f"Solved axis: {len(values)} values -> {len(solved)} control values")
        return solved
