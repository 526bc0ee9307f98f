"""Midpoint-rule integration in one and two dimensions, with timing demos."""

from __future__ import annotations

import argparse
import math
import time
from typing import Callable, Sequence

import numpy as np

_CHUNK = 1 << 20


def _check_intervals(n: int) -> None:
    if n < 1:
        raise ValueError("the number of sub-intervals must be positive")


def midpoint_1d(f: Callable[[np.ndarray], np.ndarray], a: float, b: float, n: int) -> float:
    """Midpoint rule for the integral of ``f`` over [a, b] with n sub-intervals.

    ``f`` is called with numpy arrays of sample points.
    """
    _check_intervals(n)
    eps = (b - a) / n
    total = 0.0
    for start in range(0, n, _CHUNK):
        i = np.arange(start, min(start + _CHUNK, n), dtype=float)
        x = a + eps * (i + 0.5)
        y = np.broadcast_to(np.asarray(f(x), dtype=float), x.shape)
        total += float(np.sum(eps * y))
    return total


def midpoint_2d(
    f: Callable[[np.ndarray, np.ndarray], np.ndarray],
    a: float,
    b: float,
    c: float,
    d: float,
    n: int,
) -> float:
    """Midpoint rule over [a, b] x [c, d] with n sub-intervals in each direction.

    ``f(x, y)`` is called with broadcastable numpy arrays.
    """
    _check_intervals(n)
    eps_x = (b - a) / n
    eps_y = (d - c) / n
    ys = (c + eps_y * (np.arange(n, dtype=float) + 0.5))[np.newaxis, :]
    rows = max(1, _CHUNK // n)
    total = 0.0
    for start in range(0, n, rows):
        i = np.arange(start, min(start + rows, n), dtype=float)
        xs = (a + eps_x * (i + 0.5))[:, np.newaxis]
        values = np.broadcast_to(
            np.asarray(f(xs, ys), dtype=float), (xs.shape[0], ys.shape[1])
        )
        total += float(np.sum(eps_x * eps_y * values))
    return total


def gaussian_integral(lower: float = -100.0, upper: float = 100.0, n: int = 1000000000) -> float:
    """Midpoint-rule integral of exp(-x^2) over [lower, upper]."""
    return midpoint_1d(lambda x: np.exp(-x * x), lower, upper, n)


def _polynomial_2d(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    return x * x + y * y + (y - 1.0) ** 3 * (x - 3.0)


def main(argv: Sequence[str] | None = None) -> int:
    """Time one of the integration demonstrations and print its result."""
    parser = argparse.ArgumentParser(description="Midpoint-rule integration demos.")
    parser.add_argument(
        "problem", nargs="?", choices=["sin", "2d", "gauss"], default="gauss",
        help="which integral to compute",
    )
    parser.add_argument("--n", type=int, default=None, help="number of sub-intervals")
    args = parser.parse_args(argv)
    defaults = {"sin": 30000000, "2d": 5000, "gauss": 1000000000}
    n = defaults[args.problem] if args.n is None else args.n
    if n < 1:
        parser.error("--n must be positive")

    start = time.perf_counter()
    if args.problem == "sin":
        a, b = 1.0, 2.0
        value = midpoint_1d(np.sin, a, b, n)
        elapsed = time.perf_counter() - start
        print(f"The integral from {a:.8f} to {b:.8f} of sin(x) using {n} intervals is {value:.15f}")
        print(f"With 1 processes, this took {elapsed:.15f} seconds.")
    elif args.problem == "2d":
        value = midpoint_2d(_polynomial_2d, -1.0, 1.0, -1.0, 1.0, n)
        elapsed = time.perf_counter() - start
        print(f"The integral of the first function is {value:.15f}")
        print(f"With 1 processes, this took {elapsed:.15f} seconds.")
    else:
        lower, upper = -100.0, 100.0
        value = gaussian_integral(lower, upper, n)
        elapsed = time.perf_counter() - start
        exact = math.sqrt(math.pi)
        print(f"Time elapsed for in seconds for  Intergration {elapsed:.16f} ")
        print(
            f"integral of exp(-x*x) from x={lower:.2e} to {upper:.2e} = {value:.16f}, "
            f"error = {100 * (value - exact) / exact:e}%."
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())