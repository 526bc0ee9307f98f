"""Jacobi iteration for the one-dimensional Poisson problem with a point source."""

from __future__ import annotations

import argparse
from typing import Sequence

import numpy as np

RESID_FREQ = 1000
ITER_MAX = 100000000
RESID = 1e-6


def _as_pair(x, b) -> tuple[np.ndarray, np.ndarray]:
    field = np.array(x, dtype=float)
    source = np.asarray(b, dtype=float)
    if field.ndim != 1:
        raise ValueError("the field must be one-dimensional")
    if source.shape != field.shape:
        raise ValueError("x and b must have the same shape")
    if field.size < 2:
        raise ValueError("the field needs at least the two boundary points")
    return field, source


def magnitude(x) -> float:
    """Euclidean norm of the interior points, leaving out both end points."""
    values = np.asarray(x, dtype=float)
    if values.ndim != 1:
        raise ValueError("the vector must be one-dimensional")
    interior = values[1:-1]
    return float(np.sqrt(np.sum(interior * interior)))


def jacobi_sweeps(x, b, sweeps: int = RESID_FREQ) -> np.ndarray:
    """Apply ``sweeps`` Jacobi updates x_i <- (x_{i+1} + x_{i-1}) / 2 + b_i.

    The end points are held fixed as boundary values. The input is not
    modified; the updated field is returned.
    """
    field, source = _as_pair(x, b)
    if sweeps < 0:
        raise ValueError("the number of sweeps must be non-negative")
    for _ in range(sweeps):
        field[1:-1] = 0.5 * (field[2:] + field[:-2]) + source[1:-1]
    return field


def residual_norm(x, b) -> float:
    """Norm of b_i - x_i + (x_{i+1} + x_{i-1}) / 2 over the interior points."""
    field, source = _as_pair(x, b)
    residue = source[1:-1] - field[1:-1] + 0.5 * (field[2:] + field[:-2])
    return float(np.sqrt(np.sum(residue * residue)))


def partition(n: int, parts: int) -> list[tuple[int, int]]:
    """Split range(n) into ``parts`` contiguous (start, stop) blocks.

    Every block holds n // parts points; the last one also takes the remainder.
    """
    if parts < 1:
        raise ValueError("the number of parts must be positive")
    if n < parts:
        raise ValueError("cannot split fewer points than parts")
    size = n // parts
    blocks = [(rank * size, (rank + 1) * size) for rank in range(parts)]
    start, _ = blocks[-1]
    blocks[-1] = (start, n)
    return blocks


def solve(
    n: int = 512,
    tol: float = RESID,
    check_every: int = RESID_FREQ,
    max_iter: int = ITER_MAX,
) -> tuple[np.ndarray, float, list[tuple[int, float]]]:
    """Iterate on points 0..n with zero ends and a unit source at n // 2.

    The residual is checked after every ``check_every`` sweeps until it falls
    below ``tol`` relative to the source norm or ``max_iter`` is reached.
    Returns (field, source norm, [(sweeps done, residual norm), ...]).
    """
    if n < 2:
        raise ValueError("the lattice needs at least one interior point")
    if tol <= 0:
        raise ValueError("the tolerance must be positive")
    if check_every < 1:
        raise ValueError("check_every must be positive")
    x = np.zeros(n + 1)
    b = np.zeros(n + 1)
    b[n // 2] = 1.0
    bmag = magnitude(b)

    history: list[tuple[int, float]] = []
    total = check_every
    while total < max_iter:
        x = jacobi_sweeps(x, b, check_every)
        resmag = residual_norm(x, b)
        history.append((total, resmag))
        if resmag / bmag < tol:
            break
        total += check_every
    return x, bmag, history


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Jacobi solver and print the residual after each batch of sweeps."""
    parser = argparse.ArgumentParser(description="Jacobi iteration for a 1D point source.")
    parser.add_argument("--n", type=int, default=512, help="number of lattice intervals")
    parser.add_argument("--tol", type=float, default=RESID, help="relative residual tolerance")
    parser.add_argument("--check-every", type=int, default=RESID_FREQ, help="sweeps per check")
    parser.add_argument("--max-iter", type=int, default=ITER_MAX, help="maximum sweeps")
    args = parser.parse_args(argv)
    try:
        _, bmag, history = solve(args.n, args.tol, args.check_every, args.max_iter)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"bmag: {bmag:.8e}")
    for total, resmag in history:
        print(f"{total} res {resmag:.8e} bmag {bmag:.8e} rel {resmag / bmag:.8e}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())