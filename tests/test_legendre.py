import pytest

from numlab.legendre import (
    eval_polynomial,
    eval_polynomial_derivative,
    legendre_coefficients,
    legendre_zeros,
    main,
)


def test_low_order_coefficients():
    assert legendre_coefficients(0) == [1.0]
    assert legendre_coefficients(1) == [0.0, 1.0]
    assert legendre_coefficients(2) == pytest.approx([-0.5, 0.0, 1.5])


@pytest.mark.parametrize("n", range(0, 9))
def test_coefficient_count(n):
    assert len(legendre_coefficients(n)) == n + 1


@pytest.mark.parametrize("n", range(0, 9))
def test_endpoint_values(n):
    coeffs = legendre_coefficients(n)
    at_one = eval_polynomial(1.0, coeffs)
    assert at_one == pytest.approx(1.0)
    assert eval_polynomial(-1.0, coeffs) == pytest.approx((-1) ** n * at_one)


def test_negative_order_raises():
    with pytest.raises(ValueError):
        legendre_coefficients(-1)


def test_eval_polynomial_known_value():
    assert eval_polynomial(2.0, [1.0, 2.0, 3.0]) == pytest.approx(17.0)


def test_derivative_known_value():
    assert eval_polynomial_derivative(2.0, [1.0, 2.0, 3.0]) == pytest.approx(14.0)


def test_derivative_matches_finite_difference():
    coeffs = legendre_coefficients(5)
    x, h = 0.3, 1e-6
    numeric = (eval_polynomial(x + h, coeffs) - eval_polynomial(x - h, coeffs)) / (2 * h)
    assert eval_polynomial_derivative(x, coeffs) == pytest.approx(numeric, rel=1e-6)


def test_derivative_of_constant_is_zero():
    assert eval_polynomial_derivative(0.7, [4.0]) == 0.0


@pytest.mark.parametrize("n", range(1, 11))
def test_zeros_are_roots(n):
    coeffs = legendre_coefficients(n)
    zeros = legendre_zeros(n)
    assert len(zeros) == n
    for z in zeros:
        assert abs(eval_polynomial(z, coeffs)) < 1e-8


@pytest.mark.parametrize("n", range(1, 11))
def test_zeros_sorted_symmetric_and_inside(n):
    zeros = legendre_zeros(n)
    assert zeros == sorted(zeros)
    assert all(-1.0 < z < 1.0 for z in zeros)
    for lo, hi in zip(zeros, reversed(zeros)):
        assert lo == pytest.approx(-hi, abs=1e-9)
    assert len(set(round(z, 8) for z in zeros)) == n


def test_zero_order_has_no_zeros():
    assert legendre_zeros(0) == []


def test_main_prints_zeros(capsys):
    assert main(["3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Coefficients"
    zeros_index = out.index("Zeros")
    printed = [float(v) for v in out[zeros_index + 1].split()]
    assert printed == pytest.approx(legendre_zeros(3))


def test_main_reads_order_from_input(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "2")
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-2] == "Zeros"
    assert len(out[-1].split()) == 2


def test_main_rejects_negative_order(capsys):
    assert main(["--", "-2"]) == 1
    assert "Error" in capsys.readouterr().err