"""Fibonacci numbers by naive recursion and iteration, and factorials."""

from __future__ import annotations

import argparse
import math
from typing import Sequence


def _check_index(n: int) -> None:
    if n < 0:
        raise ValueError("the index must be non-negative")


def fib_recursive(n: int) -> tuple[int, int]:
    """Return (F(n), number of calls) with F(0) = F(1) = 1, by naive recursion."""
    _check_index(n)
    calls = 0

    def fib(k: int) -> int:
        nonlocal calls
        calls += 1
        if k < 2:
            return 1
        return fib(k - 1) + fib(k - 2)

    value = fib(n)
    return value, calls


def fib_trace(n: int) -> tuple[int, list[str]]:
    """Return F(n) and one trace line per recursive call, in call order."""
    _check_index(n)
    lines: list[str] = []

    def fib(k: int) -> int:
        label = f"k: {len(lines)} fib n: {k}"
        if k < 2:
            lines.append(label)
            return 1
        lines.append(label + " +")
        return fib(k - 1) + fib(k - 2)

    return fib(n), lines


def fib_iterative(n: int) -> int:
    """Return F(n) with F(0) = F(1) = 1, iteratively."""
    _check_index(n)
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def factorial(n: int) -> int:
    """Return n!."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    return math.prod(range(2, n + 1))


def main(argv: Sequence[str] | None = None) -> int:
    """Greet, print 6!, and compare recursive and iterative Fibonacci numbers."""
    parser = argparse.ArgumentParser(description="Recursion demonstrations.")
    parser.add_argument("n", nargs="?", type=int, help="Fibonacci index")
    args = parser.parse_args(argv)
    n = args.n
    if n is None:
        n = int(input("Which Fibonacci number? "))
    if n < 0:
        parser.error("the Fibonacci index must be non-negative")

    print("Hello World!")
    print(f"The factorial of 6 is {factorial(6)}")

    nmax = 6
    value, lines = fib_trace(nmax)
    print("\n".join(lines))
    print(f"\n  Recursive tree for n = {nmax}  : {value}  calls {len(lines)}  ")

    print(f"\n Iterative  return: {fib_iterative(n)}  Number of calls 1 ")

    value, calls = fib_recursive(n)
    print(f"\n  Recursive return: {value}  Number of calls;   {calls}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())