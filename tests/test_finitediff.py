import math

import pytest

from numlab.finitediff import backward_diff, central_diff, error_table, forward_diff, main


def test_linear_function_is_exact():
    f = lambda x: 2.0 * x + 1.0  # noqa: E731
    assert forward_diff(f, 3.0, 0.5) == pytest.approx(2.0)
    assert backward_diff(f, 3.0, 0.5) == pytest.approx(2.0)
    assert central_diff(f, 3.0, 0.5) == pytest.approx(2.0)


def test_central_exact_for_quadratic():
    f = lambda x: x * x  # noqa: E731
    assert central_diff(f, 3.0, 0.1) == pytest.approx(2 * 3.0)


def test_forward_and_backward_average_to_central_step():
    x, h = 0.7, 0.01
    avg = 0.5 * (forward_diff(math.sin, x, h) + backward_diff(math.sin, x, h))
    assert avg == pytest.approx(central_diff(math.sin, x, 2 * h))


def test_zero_step_rejected():
    with pytest.raises(ValueError):
        forward_diff(math.sin, 1.0, 0.0)


def test_error_table_shape():
    rows = error_table()
    assert len(rows) == 17
    assert rows[0][0] == 1.0
    assert rows[-1][0] == pytest.approx(1e-16)
    assert all(err >= 0 for row in rows for err in row[1:])


def test_central_beats_forward_at_moderate_step():
    rows = error_table(1.0, 6)
    h, fwd, bwd, cen = rows[3]
    assert cen < fwd
    assert cen < bwd


def test_forward_error_shrinks_with_step():
    rows = error_table(1.0, 5)
    fwd_errors = [row[1] for row in rows]
    assert fwd_errors == sorted(fwd_errors, reverse=True)


def test_error_table_rejects_zero_steps():
    with pytest.raises(ValueError):
        error_table(1.0, 0)


def test_main_prints_rows(capsys):
    assert main(["--steps", "4"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 4