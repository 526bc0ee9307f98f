"""Timing of repeated element-wise vector addition."""

from __future__ import annotations

import argparse
import time
from typing import Sequence

import numpy as np


def time_vector_add(length: int = 10000000, repeats: int = 100) -> tuple[float, np.ndarray]:
    """Add a = i and b = 3.14 i element-wise ``repeats`` times.

    Returns (elapsed seconds, sum array).
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    if repeats < 1:
        raise ValueError("repeats must be positive")
    first = np.arange(length, dtype=float)
    second = 3.14 * first
    total = np.zeros(length)
    start = time.perf_counter()
    for _ in range(repeats):
        np.add(first, second, out=total)
    elapsed = time.perf_counter() - start
    return elapsed, total


def main(argv: Sequence[str] | None = None) -> int:
    """Time repeated vector addition and print the elapsed seconds."""
    parser = argparse.ArgumentParser(description="Time repeated vector addition.")
    parser.add_argument("--length", type=int, default=10000000, help="total vector length")
    parser.add_argument("--repeats", type=int, default=100, help="number of additions")
    parser.add_argument("--parts", type=int, default=1, help="split the length into this many parts")
    args = parser.parse_args(argv)
    if args.parts < 1:
        parser.error("--parts must be positive")
    try:
        elapsed, _ = time_vector_add(args.length // args.parts, args.repeats)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"Simple addition took {elapsed:.10f} seconds.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())