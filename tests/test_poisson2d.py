import numpy as np
import pytest

from numlab.poisson2d import (
    check_results,
    jacobi_poisson,
    main,
    make_rhs,
    poisson2d_reference,
    size_to_2d,
)


@pytest.mark.parametrize("size,expected", [(4, (2, 2)), (6, (3, 2)), (16, (4, 4)), (11, (11, 1))])
def test_size_to_2d_table(size, expected):
    assert size_to_2d(size) == expected


def test_size_to_2d_grid_holds_every_process():
    for size in range(1, 17):
        y, x = size_to_2d(size)
        assert y * x == size
        assert y >= x


@pytest.mark.parametrize("size", [17, -1])
def test_size_to_2d_out_of_range(size):
    with pytest.raises(ValueError):
        size_to_2d(size)


def test_make_rhs_boundary_zero_and_centre_peak():
    rhs = make_rhs(5, 5)
    assert rhs.shape == (5, 5)
    assert np.all(rhs[0] == 0.0) and np.all(rhs[-1] == 0.0)
    assert np.all(rhs[:, 0] == 0.0) and np.all(rhs[:, -1] == 0.0)
    assert rhs[2, 2] == pytest.approx(1.0)
    assert rhs[2, 2] == rhs.max()


def test_make_rhs_symmetries():
    rhs = make_rhs(9, 9)
    np.testing.assert_allclose(rhs, rhs[::-1, :])
    np.testing.assert_allclose(rhs, rhs[:, ::-1])
    np.testing.assert_allclose(rhs, rhs.T)


def test_make_rhs_shape_is_rows_by_columns():
    assert make_rhs(7, 4).shape == (4, 7)


def test_make_rhs_rejects_tiny_mesh():
    with pytest.raises(ValueError):
        make_rhs(2, 5)


def test_reference_and_jacobi_agree():
    rhs = make_rhs(12, 10)
    aref, ref_errors = poisson2d_reference(rhs, 1e-5, 30)
    a, errors = jacobi_poisson(rhs, 1e-5, 30)
    np.testing.assert_array_equal(a, aref)
    assert errors == ref_errors
    assert check_results(a, aref, 1e-5)


def test_iteration_limit_and_periodic_boundaries():
    rhs = make_rhs(8, 8)
    a, errors = jacobi_poisson(rhs, 1e-12, 7)
    assert len(errors) == 7
    np.testing.assert_array_equal(a[0, 1:-1], a[-2, 1:-1])
    np.testing.assert_array_equal(a[-1, 1:-1], a[1, 1:-1])
    np.testing.assert_array_equal(a[1:-1, 0], a[1:-1, -2])
    np.testing.assert_array_equal(a[1:-1, -1], a[1:-1, 1])
    assert a[0, 0] == 0.0 and a[-1, -1] == 0.0


def test_stops_once_change_is_within_tolerance():
    rhs = make_rhs(6, 6)
    tol = 1e-3
    _, errors = poisson2d_reference(rhs, tol, 100000)
    assert errors[-1] <= tol
    assert all(e > tol for e in errors[:-1])


def test_zero_iterations_gives_zero_field():
    rhs = make_rhs(5, 5)
    a, errors = jacobi_poisson(rhs, 1e-5, 0)
    assert errors == []
    assert np.all(a == 0.0)


def test_negative_iteration_limit_raises():
    with pytest.raises(ValueError):
        jacobi_poisson(make_rhs(5, 5), 1e-5, -1)


def test_check_results_detects_interior_mismatch_only():
    aref, _ = poisson2d_reference(make_rhs(6, 6), 1e-5, 5)
    a = aref.copy()
    a[0, 0] += 1.0
    assert check_results(a, aref, 1e-5)
    a[2, 3] += 1e-3
    assert not check_results(a, aref, 1e-5)
    assert check_results(a, aref, 1e-2)


def test_check_results_shape_mismatch():
    with pytest.raises(ValueError):
        check_results(np.zeros((4, 4)), np.zeros((4, 5)), 1e-5)


def test_main_reports_success(capsys):
    assert main(["5", "8", "6"]) == 0
    out = capsys.readouterr().out
    assert "Jacobi relaxation calculation: max 5 iterations on 8 x 6 mesh" in out
    assert "8x6: Ref:" in out