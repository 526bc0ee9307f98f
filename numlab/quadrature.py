"""Gauss-Legendre quadrature nodes and weights."""

from __future__ import annotations

import argparse
import operator
from typing import Sequence

import numpy as np

from numlab.legendre import legendre_zeros
from numlab.linalg import gaussian_elimination


def gauss_legendre(order: int) -> tuple[list[float], list[float]]:
    """Return the nodes and weights of the ``order``-point rule on [-1, 1].

    The nodes are the zeros of P_order; the weights solve the moment
    equations sum_j w_j x_j^i = integral of x^i over [-1, 1], i < order.
    """
    order = operator.index(order)
    if order < 1:
        raise ValueError("the quadrature order must be a positive integer")
    nodes = legendre_zeros(order)
    moments = np.vander(np.array(nodes), order, increasing=True).T
    exact = [(1.0 + (-1.0) ** i) / (i + 1) for i in range(order)]
    weights = gaussian_elimination(moments, exact)
    return nodes, [float(w) for w in weights]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the Gauss-Legendre nodes and weights for a given order."""
    parser = argparse.ArgumentParser(description="Gauss-Legendre nodes and weights.")
    parser.add_argument("order", nargs="?", type=int, help="number of quadrature points")
    args = parser.parse_args(argv)
    order = args.order
    if order is None:
        order = int(input("What order Legendre polynomial? "))

    try:
        nodes, weights = gauss_legendre(order)
    except ValueError as exc:
        parser.error(str(exc))

    print("x_i\tw_i")
    for x, w in zip(nodes, weights):
        print(f"{x:.15g}\t{w:.15g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())