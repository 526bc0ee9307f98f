"""Finite-difference derivative estimates and their errors."""

from __future__ import annotations

import argparse
import math
from typing import Callable, Sequence

Function = Callable[[float], float]


def _check_step(h: float) -> None:
    if h == 0:
        raise ValueError("the step h must be non-zero")


def forward_diff(f: Function, x: float, h: float) -> float:
    """Return (f(x + h) - f(x)) / h."""
    _check_step(h)
    return (f(x + h) - f(x)) / h


def backward_diff(f: Function, x: float, h: float) -> float:
    """Return (f(x) - f(x - h)) / h."""
    _check_step(h)
    return (f(x) - f(x - h)) / h


def central_diff(f: Function, x: float, h: float) -> float:
    """Return (f(x + h/2) - f(x - h/2)) / h."""
    _check_step(h)
    return (f(x + 0.5 * h) - f(x - 0.5 * h)) / h


def error_table(x: float = 1.0, steps: int = 17) -> list[tuple[float, float, float, float]]:
    """Absolute errors of the three estimates of d/dx sin at ``x``.

    Rows are (h, forward error, backward error, central error) for
    h = 1, 0.1, ..., 10^-(steps-1).
    """
    if steps < 1:
        raise ValueError("steps must be positive")
    exact = math.cos(x)
    rows = []
    for i in range(steps):
        h = 10.0 ** -i
        rows.append(
            (
                h,
                abs(forward_diff(math.sin, x, h) - exact),
                abs(backward_diff(math.sin, x, h) - exact),
                abs(central_diff(math.sin, x, h) - exact),
            )
        )
    return rows


def main(argv: Sequence[str] | None = None) -> int:
    """Print the finite-difference error table for sin at a point."""
    parser = argparse.ArgumentParser(description="Finite-difference errors for sin(x).")
    parser.add_argument("--x", type=float, default=1.0, help="evaluation point")
    parser.add_argument("--steps", type=int, default=17, help="number of step sizes")
    args = parser.parse_args(argv)
    try:
        rows = error_table(args.x, args.steps)
    except ValueError as exc:
        parser.error(str(exc))
    for h, fwd, bwd, cen in rows:
        print(f"{h:.15g}\t{fwd:.15g}\t{bwd:.15g}\t{cen:.15g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())