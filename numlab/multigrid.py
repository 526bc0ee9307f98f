"""Jacobi-smoothed multigrid V-cycles for a massive Laplacian on a periodic lattice."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Sequence

import numpy as np

_MAX_CYCLES = 1000000


@dataclass(frozen=True)
class MultigridParams:
    """Lattice sizes, spacings and Jacobi scales for each level of the hierarchy."""

    n: int
    levels: int
    mass: float
    dim: int
    sizes: tuple[int, ...]
    spacings: tuple[float, ...]
    scales: tuple[float, ...]


def build_params(
    n: int,
    levels: int = 7,
    mass: float = 0.01,
    dim: int = 1,
    scale_with_spacing: bool | None = None,
) -> MultigridParams:
    """Build the level hierarchy for an n^dim lattice halved ``levels`` times.

    The scale on level l is 1 / (2 dim + m^2 a_l^2) when the mass term
    follows the lattice spacing a_l = 2^l, else 1 / (2 dim + m^2). By
    default the spacing is followed in one dimension and not in two.
    """
    if dim not in (1, 2):
        raise ValueError("only one- and two-dimensional lattices are supported")
    if n < 1 or n & (n - 1):
        raise ValueError(f"the lattice size must be a power of two, got {n}")
    if levels < 0:
        raise ValueError("the number of levels must be non-negative")
    if n >> levels < 1:
        raise ValueError("more levels than available in the lattice")
    if mass < 0:
        raise ValueError("the mass must be non-negative")
    if scale_with_spacing is None:
        scale_with_spacing = dim == 1

    sizes = tuple(n >> level for level in range(levels + 1))
    spacings = tuple(2.0 ** level for level in range(levels + 1))
    scales = tuple(
        1.0 / (2.0 * dim + mass * mass * (a * a if scale_with_spacing else 1.0))
        for a in spacings
    )
    return MultigridParams(n, levels, mass, dim, sizes, spacings, scales)


def _as_field(values) -> np.ndarray:
    field = np.array(values, dtype=float)
    if field.ndim not in (1, 2):
        raise ValueError("fields must be one- or two-dimensional")
    return field


def _neighbour_sum(phi: np.ndarray) -> np.ndarray:
    return sum(
        np.roll(phi, 1, axis=axis) + np.roll(phi, -1, axis=axis) for axis in range(phi.ndim)
    )


def relax(phi, res, scale: float, niter: int) -> np.ndarray:
    """Apply ``niter`` damped Jacobi sweeps and return the new field.

    One sweep is phi <- w (res + scale * neighbours) + (1 - w) phi with
    w = 1/2 in one dimension and 1/4 in two.
    """
    field = _as_field(phi)
    source = np.asarray(res, dtype=float)
    if source.shape != field.shape:
        raise ValueError("phi and res must have the same shape")
    if niter < 0:
        raise ValueError("the number of sweeps must be non-negative")
    weight = 0.5 ** field.ndim
    for _ in range(niter):
        field = weight * (source + scale * _neighbour_sum(field)) + (1.0 - weight) * field
    return field


def project_residual(res_f, phi_f, scale: float) -> np.ndarray:
    """Return the fine residual averaged over 2 (or 2x2) blocks onto the coarse lattice."""
    phi = _as_field(phi_f)
    res = np.asarray(res_f, dtype=float)
    if res.shape != phi.shape:
        raise ValueError("res_f and phi_f must have the same shape")
    if any(size % 2 for size in phi.shape):
        raise ValueError("the fine lattice must have an even size")
    residual = res - phi + scale * _neighbour_sum(phi)
    if residual.ndim == 1:
        return residual.reshape(-1, 2).mean(axis=1)
    rows, cols = residual.shape
    return residual.reshape(rows // 2, 2, cols // 2, 2).mean(axis=(1, 3))


def interpolate_add(phi_f, phi_c) -> np.ndarray:
    """Return the fine field plus the coarse field copied onto each 2 (or 2x2) block."""
    fine = _as_field(phi_f)
    coarse = np.asarray(phi_c, dtype=float)
    if coarse.ndim != fine.ndim or tuple(2 * s for s in coarse.shape) != fine.shape:
        raise ValueError("the fine lattice must be twice the coarse lattice in every direction")
    expanded = coarse
    for axis in range(coarse.ndim):
        expanded = np.repeat(expanded, 2, axis=axis)
    return fine + expanded


def residual_norm(phi, res, scale: float) -> float:
    """Return the Euclidean norm of res/scale - phi/scale + neighbours(phi)."""
    field = _as_field(phi)
    source = np.asarray(res, dtype=float)
    if source.shape != field.shape:
        raise ValueError("phi and res must have the same shape")
    residue = source / scale - field / scale + _neighbour_sum(field)
    return float(np.sqrt(np.sum(residue * residue)))


def solve_point_source(
    params: MultigridParams, nlev: int = 0, tol: float = 1e-6, sweeps: int = 10
) -> tuple[np.ndarray, list[float]]:
    """Solve for a unit point source at the lattice centre with V-cycles over ``nlev`` levels.

    Returns the solution and the residual norm before the first cycle and
    after each cycle.
    """
    if not 0 <= nlev <= params.levels:
        raise ValueError("more levels than available in the lattice")
    if tol <= 0:
        raise ValueError("the tolerance must be positive")
    if sweeps < 1:
        raise ValueError("the number of sweeps must be positive")

    scales = params.scales
    shapes = [(size,) * params.dim for size in params.sizes[: nlev + 1]]
    phi = [np.zeros(shape) for shape in shapes]
    res = [np.zeros(shape) for shape in shapes]
    res[0][(params.n // 2,) * params.dim] = scales[0]

    history = [residual_norm(phi[0], res[0], scales[0])]
    while history[-1] > tol:
        if len(history) > _MAX_CYCLES:
            raise RuntimeError("the V-cycles did not converge")
        for lev in range(nlev):
            phi[lev] = relax(phi[lev], res[lev], scales[lev], sweeps)
            res[lev + 1] = project_residual(res[lev], phi[lev], scales[lev])
        for lev in range(nlev, -1, -1):
            phi[lev] = relax(phi[lev], res[lev], scales[lev], sweeps)
            if lev > 0:
                phi[lev - 1] = interpolate_add(phi[lev - 1], phi[lev])
                phi[lev] = np.zeros_like(phi[lev])
        history.append(residual_norm(phi[0], res[0], scales[0]))
    return phi[0], history


_DEFAULTS = {
    1: {"size": 1024, "mass": 0.01, "nlev": 0, "output": "MGVALUES_1D.dat"},
    2: {"size": 256, "mass": 0.1, "nlev": 7, "output": "MG2D_SOLUTION.dat"},
}


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the point-source problem and write the solution field to a file."""
    parser = argparse.ArgumentParser(description="Multigrid V-cycles for a point source.")
    parser.add_argument("--dim", type=int, choices=[1, 2], default=1, help="lattice dimension")
    parser.add_argument("--size", type=int, default=None, help="lattice side, a power of two")
    parser.add_argument("--levels", type=int, default=7, help="maximum number of coarse levels")
    parser.add_argument("--nlev", type=int, default=None, help="levels used by each V-cycle")
    parser.add_argument("--mass", type=float, default=None, help="mass term")
    parser.add_argument("--tol", type=float, default=1e-6, help="residual tolerance")
    parser.add_argument("--sweeps", type=int, default=10, help="Jacobi sweeps per level")
    parser.add_argument("--output", default=None, help="file for the solution")
    args = parser.parse_args(argv)

    defaults = _DEFAULTS[args.dim]
    size = defaults["size"] if args.size is None else args.size
    mass = defaults["mass"] if args.mass is None else args.mass
    nlev = defaults["nlev"] if args.nlev is None else args.nlev
    output = defaults["output"] if args.output is None else args.output

    try:
        params = build_params(size, args.levels, mass, args.dim)
        print(
            f"\n V cycle for {size} by {size} lattice with nlev = {nlev} "
            f"out of max  {args.levels} "
        )
        phi, history = solve_point_source(params, nlev, args.tol, args.sweeps)
    except (ValueError, RuntimeError) as exc:
        parser.error(str(exc))

    for cycle, resmag in enumerate(history[1:], start=1):
        print(f"At the {cycle} cycle the mag residue is {resmag:g} ")

    with open(output, "w", encoding="utf-8") as handle:
        if args.dim == 1:
            for i, value in enumerate(phi):
                handle.write(f"{i},    {value:.10f} \n")
        else:
            for x in range(size):
                for y in range(size):
                    handle.write(f"{x},    {y},    {phi[x, y]:.10f} \n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())