import random

import pytest

from numlab.interpolation import lagrange_interpolate, main, make_noisy_quadratic


def test_passes_through_nodes():
    xs = [0.0, 1.5, 2.0, 4.0]
    ys = [1.0, -2.0, 3.5, 0.25]
    for x, y in zip(xs, ys):
        assert lagrange_interpolate(x, xs, ys) == pytest.approx(y)


def test_reproduces_quadratic_exactly():
    xs = [0.0, 1.0, 2.0]
    ys = [1 + 2 * x + 3 * x * x for x in xs]
    x = 0.5
    assert lagrange_interpolate(x, xs, ys) == pytest.approx(1 + 2 * x + 3 * x * x)


def test_single_point_is_constant():
    assert lagrange_interpolate(9.0, [2.0], [5.0]) == pytest.approx(5.0)


def test_length_mismatch():
    with pytest.raises(ValueError):
        lagrange_interpolate(0.0, [0.0, 1.0], [1.0])


def test_empty_points():
    with pytest.raises(ValueError):
        lagrange_interpolate(0.0, [], [])


def test_duplicate_nodes():
    with pytest.raises(ValueError):
        lagrange_interpolate(0.5, [1.0, 1.0], [2.0, 3.0])


def test_noisy_quadratic_bounds():
    n = 20
    xs, ys = make_noisy_quadratic(n, random.Random(3))
    assert len(xs) == len(ys) == n
    for i, (x, y) in enumerate(zip(xs, ys)):
        assert 10.0 * i / n <= x <= 10.0 * (i + 0.2) / n
        exact = 1 + 2 * x + 3 * x * x
        assert 0.75 * exact <= y <= 1.25 * exact
    assert xs == sorted(xs)


def test_noisy_quadratic_is_reproducible():
    first_xs, first_ys = make_noisy_quadratic(5, random.Random(11))
    second_xs, second_ys = make_noisy_quadratic(5, random.Random(11))
    other_xs, _ = make_noisy_quadratic(5, random.Random(12))
    assert len(first_xs) == 5
    assert len(first_ys) == 5
    assert list(first_xs) == list(second_xs)
    assert list(first_ys) == list(second_ys)
    assert list(first_xs) != list(other_xs)


def test_noisy_quadratic_rejects_zero_points():
    with pytest.raises(ValueError):
        make_noisy_quadratic(0, random.Random(1))


def test_main_output(capsys):
    assert main(["--points", "4", "--refinement", "2", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "# The Fitted Form " in lines
    marker = lines.index("# The Fitted Form ")
    assert len(lines) - marker - 1 == 8