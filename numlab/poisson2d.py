"""Jacobi relaxation of a 2D Poisson problem with periodic boundary copies."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Sequence

import numpy as np

MAX_MPI_SIZE = 16

_SIZE_TO_2D = (
    (0, 0),
    (1, 1), (2, 1), (3, 1), (2, 2),
    (5, 1), (3, 2), (7, 1), (4, 2),
    (3, 3), (5, 2), (11, 1), (6, 2),
    (13, 1), (7, 2), (5, 3), (4, 4),
)


def size_to_2d(size: int) -> tuple[int, int]:
    """Return the (y, x) process grid used for ``size`` processes, up to 16."""
    if not 0 <= size <= MAX_MPI_SIZE:
        raise ValueError(f"size must be between 0 and {MAX_MPI_SIZE}, got {size}")
    return _SIZE_TO_2D[size]


def _check_mesh(nx: int, ny: int) -> None:
    if nx < 3 or ny < 3:
        raise ValueError("the mesh needs at least 3 points in each direction")


def make_rhs(nx: int, ny: int) -> np.ndarray:
    """Right-hand side exp(-10 (x^2 + y^2)) on [-1, 1]^2, zero on the boundary.

    The array has shape (ny, nx).
    """
    _check_mesh(nx, ny)
    x = -1.0 + 2.0 * np.arange(nx) / (nx - 1)
    y = -1.0 + 2.0 * np.arange(ny) / (ny - 1)
    rhs = np.zeros((ny, nx))
    xx, yy = np.meshgrid(x[1:-1], y[1:-1])
    rhs[1:-1, 1:-1] = np.exp(-10.0 * (xx * xx + yy * yy))
    return rhs


def _relax(rhs, tol: float, iter_max: int) -> tuple[np.ndarray, list[float]]:
    source = np.asarray(rhs, dtype=float)
    if source.ndim != 2:
        raise ValueError("the right-hand side must be two-dimensional")
    ny, nx = source.shape
    _check_mesh(nx, ny)
    if iter_max < 0:
        raise ValueError("iter_max must be non-negative")

    a = np.zeros_like(source)
    errors: list[float] = []
    error = 1.0
    while error > tol and len(errors) < iter_max:
        neighbours = a[1:-1, 2:] + a[1:-1, :-2] + a[:-2, 1:-1] + a[2:, 1:-1]
        new = -0.25 * (source[1:-1, 1:-1] - neighbours)
        error = float(np.max(np.abs(new - a[1:-1, 1:-1])))
        a[1:-1, 1:-1] = new
        a[0, 1:-1] = a[-2, 1:-1]
        a[-1, 1:-1] = a[1, 1:-1]
        a[1:-1, 0] = a[1:-1, -2]
        a[1:-1, -1] = a[1:-1, 1]
        errors.append(error)
    return a, errors


def poisson2d_reference(rhs, tol: float = 1e-5, iter_max: int = 100) -> tuple[np.ndarray, list[float]]:
    """Reference solution from a zero start.

    Iterates while the largest change exceeds ``tol`` and fewer than
    ``iter_max`` sweeps are done. Returns (solution, largest change per sweep).
    """
    return _relax(rhs, tol, iter_max)


def jacobi_poisson(rhs, tol: float = 1e-5, iter_max: int = 100) -> tuple[np.ndarray, list[float]]:
    """Solution under test, computed with the same stopping rule as the reference."""
    return _relax(rhs, tol, iter_max)


def _first_mismatch(a, aref, tol: float) -> tuple[int, int] | None:
    a = np.asarray(a, dtype=float)
    aref = np.asarray(aref, dtype=float)
    if a.shape != aref.shape or a.ndim != 2:
        raise ValueError("both solutions must be two-dimensional with the same shape")
    bad = np.argwhere(np.abs(aref[1:-1, 1:-1] - a[1:-1, 1:-1]) >= tol)
    if bad.size == 0:
        return None
    iy, ix = bad[0]
    return int(iy) + 1, int(ix) + 1


def check_results(a, aref, tol: float) -> bool:
    """True when every interior point of ``a`` is within ``tol`` of ``aref``."""
    return _first_mismatch(a, aref, tol) is None


def _print_progress(errors: list[float]) -> None:
    for iteration, error in enumerate(errors):
        if iteration % 100 == 0:
            print(f"{iteration:5d}, {error:0.6f}")


def main(argv: Sequence[str] | None = None) -> int:
    """Compare a Jacobi run with the reference run: poisson2d [NITER [NY [NX]]]."""
    parser = argparse.ArgumentParser(description="Jacobi relaxation of a 2D Poisson problem.")
    parser.add_argument("iter_max", nargs="?", type=int, default=100, help="maximum iterations")
    parser.add_argument("ny", nargs="?", type=int, default=None, help="mesh rows")
    parser.add_argument("nx", nargs="?", type=int, default=None, help="mesh columns")
    args = parser.parse_args(argv)
    ny = 2048 if args.ny is None else args.ny
    nx = ny if args.nx is None else args.nx
    tol = 1.0e-5

    try:
        rhs = make_rhs(nx, ny)
    except ValueError as exc:
        parser.error(str(exc))
    if args.iter_max < 0:
        parser.error("the number of iterations must be non-negative")

    print(f"Jacobi relaxation calculation: max {args.iter_max} iterations on {ny} x {nx} mesh")
    print("Calculate reference solution and time with serial CPU execution.")
    start = time.perf_counter()
    aref, ref_errors = poisson2d_reference(rhs, tol, args.iter_max)
    _print_progress(ref_errors)
    runtime_ref = time.perf_counter() - start

    print("Calculate current execution.")
    start = time.perf_counter()
    a, errors = jacobi_poisson(rhs, tol, args.iter_max)
    _print_progress(errors)
    runtime = time.perf_counter() - start

    mismatch = _first_mismatch(a, aref, tol)
    if mismatch is not None:
        iy, ix = mismatch
        print(
            f"ERROR: A[{iy}][{ix}] = {a[iy, ix]:f} does not match {aref[iy, ix]:f} (reference)",
            file=sys.stderr,
        )
        return 1
    speedup = runtime_ref / runtime if runtime > 0 else float("inf")
    print(
        f"{ny}x{nx}: Ref: {runtime_ref:8.4f} s, This: {runtime:8.4f} s, speedup: {speedup:8.2f}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())