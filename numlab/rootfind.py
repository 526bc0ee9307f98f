"""N-th roots by Newton's method and by bisection, with a convergence comparison."""

from __future__ import annotations

import argparse
import math
import sys
import time
from dataclasses import dataclass, field
from typing import Sequence

DEFAULT_MAX_ITER = 100000


@dataclass(frozen=True)
class RootResult:
    """Outcome of an iterative root search for x = a^(1/n)."""

    root: float
    iterations: int
    error: float
    converged: bool
    history: list[tuple[float, float]] = field(default_factory=list)


def _check_problem(a: float, n: float) -> None:
    if a <= 0:
        raise ValueError("the number a must be positive")
    if n <= 0:
        raise ValueError("the root order n must be positive")


def newton_step(x: float, a: float, n: float) -> float:
    """One Newton step for f(x) = x^n - a: x (1 - 1/n) + a / (n x^(n-1))."""
    return x * (1.0 - 1.0 / n) + a / (n * math.pow(x, n - 1.0))


def bisection_step(a: float, n: float, low: float, high: float) -> tuple[float, float, float]:
    """Halve [low, high] around the root of x^n - a.

    Returns (midpoint, new low, new high).
    """
    x = (low + high) / 2.0
    if math.pow(x, n) - a < 0.0:
        return x, x, high
    return x, low, x


def fractional_error(x: float, a: float, n: float) -> float:
    """Return 0.5 |x^n / a - 1|."""
    return 0.5 * abs(math.pow(x, n) / a - 1.0)


def newton_root(
    a: float, n: float, tol: float = 1e-10, max_iter: int = DEFAULT_MAX_ITER
) -> RootResult:
    """Find a^(1/n) by Newton's method starting from a/n."""
    _check_problem(a, n)
    x = a / n
    history: list[tuple[float, float]] = []
    err = math.inf
    while True:
        x = newton_step(x, a, n)
        err = fractional_error(x, a, n)
        history.append((x, err))
        if not (err > tol and len(history) < max_iter):
            break
    return RootResult(x, len(history), err, err <= tol, history)


def bisection_root(
    a: float, n: float, tol: float = 1e-10, max_iter: int = DEFAULT_MAX_ITER
) -> RootResult:
    """Find a^(1/n) by bisection of the interval [0, a]."""
    _check_problem(a, n)
    low, high = 0.0, a
    history: list[tuple[float, float]] = []
    while True:
        x, low, high = bisection_step(a, n, low, high)
        err = fractional_error(x, a, n)
        history.append((x, err))
        if not (err > tol and len(history) < max_iter):
            break
    return RootResult(x, len(history), err, err <= tol, history)


def convergence_table(a: float, n: float, decades: int = 15) -> list[tuple[float, int, int]]:
    """Iteration counts for tolerances 10^-1 .. 10^-decades.

    Rows are (1/tolerance, bisection iterations, Newton iterations).
    """
    _check_problem(a, n)
    if decades < 0:
        raise ValueError("decades must be non-negative")
    rows = []
    tol = 1.0
    for _ in range(decades):
        tol *= 0.1
        bisect = bisection_root(a, n, tol)
        newton = newton_root(a, n, tol)
        rows.append((1.0 / tol, bisect.iterations, newton.iterations))
    return rows


def _ask(value: float | None, prompt: str) -> float:
    if value is not None:
        return value
    return float(input(prompt))


def main(argv: Sequence[str] | None = None) -> int:
    """Compare Newton's method with bisection and write a convergence table."""
    parser = argparse.ArgumentParser(description="N-th root by Newton and bisection.")
    parser.add_argument("a", nargs="?", type=float, help="number whose root is taken")
    parser.add_argument("n", nargs="?", type=float, help="root order")
    parser.add_argument("log10_tol", nargs="?", type=float, help="tolerance is 10^-log10_tol")
    parser.add_argument("--output", help="data file for the convergence table")
    args = parser.parse_args(argv)

    print(f"Number of digits accuracy in double  {sys.float_info.mant_dig}")
    a = _ask(args.a, "Give a number A: ")
    n = _ask(args.n, "Give a number N: ")
    log10_tol = _ask(
        args.log10_tol, "Give a log10 tolerance (i.e., tolerance will be 10^{-[number]}): "
    )
    tol = math.pow(10.0, -log10_tol)

    try:
        newton = newton_root(a, n, tol)
        bisect = bisection_root(a, n, tol)
        table = convergence_table(a, n)
    except ValueError as exc:
        parser.error(str(exc))

    exact = math.pow(a, 1.0 / n)
    for x, err in newton.history:
        print(f"{x:.40f}\t{err:.40f}")
    print(f"After {newton.iterations} iterations, Newton's method ")
    print(f"gave = {newton.root:.40f} vs cmath = {exact:.40f}")
    print(f" relative error   = {(newton.root - exact) / exact:.40f}")

    print(" Bisection Method starting x = A/N  with min = 0 and max = A ")
    for x, err in bisect.history:
        print(f"{x:.40f}\t{err:.40f}")
    print(f"Bisection's value  in {bisect.iterations} iterations ")
    print(f"gave = {bisect.root:.40f} vs cmath = {exact:.40f}")
    print(f" error   = {bisect.root - exact:.40f}")

    output = args.output or f"rootData_{int(time.time()) % 100000}.dat"
    with open(output, "w", encoding="utf-8") as handle:
        handle.write(f"#Data File for N =  {int(n)}-th root of A =  {a:f} \n")
        handle.write("#tolerance   Bisection Count  Newton Count \n")
        for inverse_tol, bicount, newcount in table:
            handle.write(f"  {inverse_tol:25.20e}         {bicount:10d}       {newcount:10d}  \n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())