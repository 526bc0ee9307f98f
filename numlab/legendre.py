"""Legendre polynomial coefficients, evaluation and zeros."""

from __future__ import annotations

import argparse
import math
import operator
import sys
from functools import reduce
from typing import Sequence


def legendre_coefficients(n: int) -> list[float]:
    """Return the coefficients of P_n in ascending powers of x.

    Uses the three-term recurrence m P_m = (2m-1) x P_{m-1} - (m-1) P_{m-2}.
    """
    n = operator.index(n)
    if n < 0:
        raise ValueError("the Legendre polynomial order must be a non-negative integer")
    if n == 0:
        return [1.0]
    prev, curr = [1.0], [0.0, 1.0]
    for m in range(2, n + 1):
        padded_prev = prev + [0.0, 0.0]
        nxt = [-(m - 1) * prev[0] / m]
        nxt.extend(
            ((2 * m - 1) * curr[i - 1] - (m - 1) * padded_prev[i]) / m
            for i in range(1, m + 1)
        )
        prev, curr = curr, nxt
    return curr


def eval_polynomial(x: float, coeffs: Sequence[float]) -> float:
    """Evaluate the polynomial with ascending coefficients ``coeffs`` at ``x``."""
    return reduce(lambda acc, c: acc * x + c, reversed(coeffs), 0.0)


def eval_polynomial_derivative(x: float, coeffs: Sequence[float]) -> float:
    """Evaluate the derivative of the polynomial with ascending coefficients at ``x``."""
    derivative = [power * c for power, c in enumerate(coeffs)][1:]
    return eval_polynomial(x, derivative)


def legendre_zeros(n: int, tol: float = 1e-9, max_iter: int = 10000) -> list[float]:
    """Return the n zeros of P_n in ascending order, found by Newton's method.

    Each root starts from the asymptotic estimate
    (1 - 1/(8n^2) + 1/(8n^3)) cos(pi (4k - 1) / (4n + 2)).
    """
    coeffs = legendre_coefficients(n)
    zeros = []
    for k in range(1, n + 1):
        x = (1.0 - 1.0 / (8.0 * n * n) + 1.0 / (8.0 * n * n * n)) * math.cos(
            math.pi * (4.0 * k - 1.0) / (4.0 * n + 2.0)
        )
        for _ in range(max_iter):
            dx = -eval_polynomial(x, coeffs) / eval_polynomial_derivative(x, coeffs)
            x += dx
            if abs(dx) <= tol:
                break
        zeros.append(x)
    zeros.reverse()
    return zeros


def _read_order(value: int | None) -> int:
    if value is not None:
        return value
    return int(input("What order Legendre polynomial? "))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the coefficients and zeros of a Legendre polynomial."""
    parser = argparse.ArgumentParser(description="Legendre polynomial coefficients and zeros.")
    parser.add_argument("order", nargs="?", type=int, help="polynomial order")
    args = parser.parse_args(argv)
    order = _read_order(args.order)

    if order < 0:
        print(
            "Error! The Legendre polynomial needs to be of positive integer order.",
            file=sys.stderr,
        )
        return 1

    coeffs = legendre_coefficients(order)
    print("Coefficients")
    for power in range(order, 0, -1):
        print(f"{coeffs[power]:.20f} x^{power} +  ")
    print(f"{coeffs[0]:.20f} x^0")

    print("Zeros")
    print(" ".join(f"{z:.20f}" for z in legendre_zeros(order)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())