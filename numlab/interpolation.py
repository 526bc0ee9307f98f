"""Lagrange polynomial interpolation through a set of points."""

from __future__ import annotations

import argparse
import random
from typing import Sequence


def lagrange_interpolate(x: float, xs: Sequence[float], ys: Sequence[float]) -> float:
    """Evaluate at ``x`` the polynomial of lowest degree through (xs[i], ys[i])."""
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    if not xs:
        raise ValueError("at least one point is required")
    if len(set(xs)) != len(xs):
        raise ValueError("interpolation nodes must be distinct")
    total = 0.0
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        basis = 1.0
        for j, xj in enumerate(xs):
            if j != i:
                basis *= (x - xj) / (xi - xj)
        total += yi * basis
    return total


def make_noisy_quadratic(npoints: int, rng: random.Random) -> tuple[list[float], list[float]]:
    """Sample 1 + 2x + 3x^2 on [0, 10) with jittered nodes and up to 25% noise."""
    if npoints < 1:
        raise ValueError("at least one point is required")
    xs, ys = [], []
    for i in range(npoints):
        x = 10.0 * (i + 0.2 * rng.random()) / npoints
        y = (1.0 + 2.0 * x + 3.0 * x * x) * (1.0 + 0.5 * (rng.random() - 0.5))
        xs.append(x)
        ys.append(y)
    return xs, ys


def main(argv: Sequence[str] | None = None) -> int:
    """Print noisy sample points and the interpolating polynomial between them."""
    parser = argparse.ArgumentParser(description="Lagrange interpolation of noisy data.")
    parser.add_argument("--points", type=int, default=20, help="number of data points")
    parser.add_argument("--refinement", type=int, default=10, help="output points per data point")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.points < 1 or args.refinement < 1:
        parser.error("--points and --refinement must be positive")

    xs, ys = make_noisy_quadratic(args.points, random.Random(args.seed))
    for x, y in zip(xs, ys):
        print(f"   {x:g}   {y:g}")

    print()
    print("# The Fitted Form ")
    steps = args.refinement * args.points
    span = xs[-1] - xs[0]
    for i in range(steps):
        x = xs[0] + i * span / steps
        print(f"  {x:g}   {lagrange_interpolate(x, xs, ys):g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())