"""Lennard-Jones molecular dynamics of particles in a periodic box."""

from __future__ import annotations

import argparse
from typing import Sequence

import numpy as np

MIN_SEPARATION_SQ = 2.0 ** (1.0 / 3.0)
_MAX_ATTEMPTS = 100000


def _check_box(box: float, dim: int) -> None:
    if box <= 0:
        raise ValueError("the box length must be positive")
    if dim < 1:
        raise ValueError("the dimension must be positive")


def set_positions(n: int, box: float, dim: int, rng: np.random.Generator) -> np.ndarray:
    """Place ``n`` particles uniformly in [0, box)^dim without overlaps.

    A candidate is rejected while its squared distance to any particle
    already placed is below 2^(1/3). Returns an array of shape (n, dim).
    """
    if n < 0:
        raise ValueError("the number of particles must be non-negative")
    _check_box(box, dim)
    pos = np.empty((n, dim))
    for i in range(n):
        for _ in range(_MAX_ATTEMPTS):
            candidate = box * rng.random(dim)
            if i == 0:
                break
            dist2 = np.sum((pos[:i] - candidate) ** 2, axis=1)
            if np.min(dist2) >= MIN_SEPARATION_SQ:
                break
        else:
            raise RuntimeError(f"could not place particle {i} without overlap; the box is too crowded")
        pos[i] = candidate
    return pos


def lj_forces(pos: np.ndarray, box: float) -> np.ndarray:
    """Lennard-Jones forces (sigma = epsilon = 1) under the minimum-image convention.

    The pair force on i from j is 48 r^-6 (r^-6 - 1/2) r^-2 (r_i - r_j).
    """
    positions = np.asarray(pos, dtype=float)
    if positions.ndim != 2:
        raise ValueError("positions must have shape (particles, dimensions)")
    _check_box(box, positions.shape[1])
    diff = positions[:, np.newaxis, :] - positions[np.newaxis, :, :]
    half = box / 2.0
    diff = np.where(diff > half, diff - box, diff)
    diff = np.where(diff < -half, diff + box, diff)
    r2 = np.einsum("ijk,ijk->ij", diff, diff)
    np.fill_diagonal(r2, np.inf)
    if np.any(r2 == 0.0):
        raise ValueError("two particles occupy the same position")
    inv2 = 1.0 / r2
    inv6 = inv2 ** 3
    magnitude = 48.0 * inv6 * (inv6 - 0.5) * inv2
    return np.einsum("ij,ijk->ik", magnitude, diff)


def simulate(
    n: int = 64,
    box: float = 10.0,
    dim: int = 2,
    dt: float = 0.1,
    steps: int = 2000,
    record_every: int = 10,
    mass: float = 1.0,
    seed: int | None = None,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Run a leapfrog simulation from random positions and small random velocities.

    Returns (frames, final positions, final velocities); a frame of the
    positions is recorded after every step whose index is a multiple of
    ``record_every``. Positions are not wrapped back into the box.
    """
    if mass <= 0:
        raise ValueError("the mass must be positive")
    if steps < 0:
        raise ValueError("the number of steps must be non-negative")
    if record_every < 1:
        raise ValueError("record_every must be positive")
    rng = np.random.default_rng(seed)
    pos = set_positions(n, box, dim, rng)
    vel = 0.1 * (rng.random((n, dim)) - 0.5)

    pos += vel * dt / 2.0
    frames = []
    for step in range(steps):
        vel += lj_forces(pos, box) * dt / mass
        pos += vel * dt
        if step % record_every == 0:
            frames.append(pos.copy())
    vel += lj_forces(pos, box) * dt / mass

    return np.array(frames).reshape(len(frames), n, dim), pos, vel


def _format_frame(frame: np.ndarray) -> str:
    return "".join(",".join(f"{c:14.8f}" for c in particle) + "\t" for particle in frame) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation and write the recorded positions, one frame per line."""
    parser = argparse.ArgumentParser(description="Lennard-Jones particles on a torus.")
    parser.add_argument("--particles", type=int, default=64, help="number of particles")
    parser.add_argument("--box", type=float, default=10.0, help="box side length")
    parser.add_argument("--dim", type=int, default=2, help="number of dimensions")
    parser.add_argument("--dt", type=float, default=0.1, help="time step")
    parser.add_argument("--steps", type=int, default=2000, help="number of steps")
    parser.add_argument("--record-every", type=int, default=10, help="steps between frames")
    parser.add_argument("--mass", type=float, default=1.0, help="particle mass")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--output", default="op.out", help="file for the recorded frames")
    args = parser.parse_args(argv)
    try:
        frames, _, _ = simulate(
            args.particles, args.box, args.dim, args.dt, args.steps,
            args.record_every, args.mass, args.seed,
        )
    except (ValueError, RuntimeError) as exc:
        parser.error(str(exc))
    with open(args.output, "w", encoding="utf-8") as handle:
        handle.writelines(_format_frame(frame) for frame in frames)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())