import numpy as np
import pytest

from relaxed_splines.core.tridiagonal import (
    SplineSolver,
    TridiagonalSystem,
    build_rhs,
    solve_tridiagonal,
)
from relaxed_splines.exceptions import InsufficientPointsError
from relaxed_splines.utils.geometric_validation import reference_solve


def test_rhs_four_points():
    # [6*v1 - v0, 6*v2 - v3]
    np.testing.assert_array_equal(build_rhs([0, 1, 2, 3]), [6.0, 9.0])
    np.testing.assert_array_equal(build_rhs([0, 2, 0, 2]), [12.0, -2.0])


def test_rhs_middle_rows_are_plain():
    np.testing.assert_array_equal(build_rhs([1, 2, 3, 4, 5]), [11.0, 18.0, 19.0])
    np.testing.assert_array_equal(
        build_rhs([1, 2, 3, 4, 5, 6]), [11.0, 18.0, 24.0, 24.0]
    )


def test_rhs_three_points_combines_both_endpoints():
    np.testing.assert_array_equal(build_rhs([0, 3, 2]), [16.0])


def test_rhs_length():
    for n in range(3, 12):
        assert len(build_rhs(np.arange(n))) == n - 2


@pytest.mark.parametrize("values", [[], [1.0], [1.0, 2.0]])
def test_rhs_rejects_short_input(values):
    with pytest.raises(InsufficientPointsError) as excinfo:
        build_rhs(values)
    assert "insufficient points for spline solve" in str(excinfo.value)
    assert excinfo.value.num_points == len(values)


def test_rhs_does_not_modify_input():
    values = np.array([0.0, 1.0, 2.0, 3.0])
    build_rhs(values)
    np.testing.assert_array_equal(values, [0.0, 1.0, 2.0, 3.0])


def test_solve_two_by_two_by_hand():
    # [[4, 1], [1, 4]] z = d, Cramer's rule with det = 15
    np.testing.assert_allclose(solve_tridiagonal([6.0, 9.0]), [1.0, 2.0])
    np.testing.assert_allclose(solve_tridiagonal([12.0, -2.0]), [10.0 / 3.0, -4.0 / 3.0])


def test_solve_single_row():
    np.testing.assert_allclose(solve_tridiagonal([16.0]), [4.0])


def test_solve_empty_rejected():
    with pytest.raises(InsufficientPointsError):
        solve_tridiagonal([])


def test_solve_leaves_rhs_untouched():
    rhs = np.array([6.0, 9.0])
    solve_tridiagonal(rhs)
    np.testing.assert_array_equal(rhs, [6.0, 9.0])


def test_solve_matches_dense_system():
    rng = np.random.default_rng(7)
    for m in range(1, 20):
        rhs = rng.normal(size=m)
        dense = TridiagonalSystem.relaxed(rhs).to_dense()
        np.testing.assert_allclose(dense @ solve_tridiagonal(rhs), rhs, atol=1e-12)


def test_relaxed_system_coefficients():
    system = TridiagonalSystem.relaxed([1.0, 2.0, 3.0])
    np.testing.assert_array_equal(system.a, [0.0, 1.0, 1.0])
    np.testing.assert_array_equal(system.b, [4.0, 4.0, 4.0])
    np.testing.assert_array_equal(system.c, [1.0, 1.0, 0.0])
    np.testing.assert_array_equal(
        system.to_dense(), [[4, 1, 0], [1, 4, 1], [0, 1, 4]]
    )


def test_linear_data_is_its_own_control_polygon():
    values = np.linspace(-3.0, 7.0, 12)
    np.testing.assert_allclose(SplineSolver().solve_axis(values), values[1:-1])


def test_large_system_is_stable(random_points):
    values = random_points[:, 0]
    solved = SplineSolver().solve_axis(values)

    assert np.all(np.isfinite(solved))
    assert np.abs(solved).max() <= 3.5 * np.abs(values).max()
    np.testing.assert_allclose(solved, reference_solve(values), rtol=1e-10, atol=1e-9)
