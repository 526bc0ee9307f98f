"""Dense linear solves by Gauss-Jordan elimination."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def gaussian_elimination(matrix: Sequence[Sequence[float]], rhs: Sequence[float]) -> np.ndarray:
    """Solve ``matrix @ x = rhs`` by Gauss-Jordan elimination without pivoting.

    Each row in turn is scaled so that its diagonal entry becomes one, and
    that column is then cleared from every other row. The inputs are not
    modified. Raises ValueError on a shape mismatch or a zero pivot.
    """
    a = np.array(matrix, dtype=float)
    b = np.array(rhs, dtype=float)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(f"matrix must be square, got shape {a.shape}")
    n = a.shape[0]
    if b.shape != (n,):
        raise ValueError(f"right-hand side must have length {n}, got shape {b.shape}")

    for col in range(n):
        pivot = a[col, col]
        if pivot == 0.0:
            raise ValueError(f"zero pivot in row {col}; elimination without pivoting fails")
        a[col] /= pivot
        b[col] /= pivot
        factors = a[:, col].copy()
        factors[col] = 0.0
        a -= np.outer(factors, a[col])
        b -= factors * b[col]
    return b