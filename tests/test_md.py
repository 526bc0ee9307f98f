import numpy as np
import pytest

from numlab.md import MIN_SEPARATION_SQ, lj_forces, main, set_positions, simulate


def test_set_positions_inside_box_and_separated():
    pos = set_positions(12, 10.0, 2, np.random.default_rng(3))
    assert pos.shape == (12, 2)
    assert np.all(pos >= 0.0) and np.all(pos < 10.0)
    for i in range(len(pos)):
        for j in range(i):
            assert np.sum((pos[i] - pos[j]) ** 2) >= MIN_SEPARATION_SQ


def test_set_positions_deterministic_for_seed():
    first = set_positions(5, 8.0, 3, np.random.default_rng(11))
    second = set_positions(5, 8.0, 3, np.random.default_rng(11))
    assert np.array_equal(first, second)


@pytest.mark.parametrize("n, box, dim", [(-1, 10.0, 2), (3, 0.0, 2), (3, 10.0, 0)])
def test_set_positions_rejects_bad_arguments(n, box, dim):
    with pytest.raises(ValueError):
        set_positions(n, box, dim, np.random.default_rng(0))


def test_pair_is_repulsive_at_short_range():
    force = lj_forces(np.array([[0.0, 0.0], [1.0, 0.0]]), 10.0)
    assert force[0, 0] < 0.0
    assert force[1, 0] == pytest.approx(-force[0, 0])
    assert force[0, 1] == 0.0 and force[1, 1] == 0.0


def test_pair_is_attractive_at_long_range():
    force = lj_forces(np.array([[0.0, 0.0], [1.5, 0.0]]), 10.0)
    assert force[0, 0] > 0.0


def test_force_vanishes_at_potential_minimum():
    r_min = 2.0 ** (1.0 / 6.0)
    force = lj_forces(np.array([[0.0, 0.0], [r_min, 0.0]]), 10.0)
    assert np.allclose(force, 0.0, atol=1e-12)


def test_minimum_image_wraps_across_boundary():
    direct = lj_forces(np.array([[0.0, 0.0], [1.0, 0.0]]), 10.0)
    wrapped = lj_forces(np.array([[0.5, 0.0], [9.5, 0.0]]), 10.0)
    assert np.allclose(wrapped[0], -direct[0])


def test_total_force_is_zero():
    pos = set_positions(10, 10.0, 2, np.random.default_rng(5))
    force = lj_forces(pos, 10.0)
    assert np.allclose(force.sum(axis=0), 0.0, atol=1e-9)


def test_coincident_particles_rejected():
    with pytest.raises(ValueError):
        lj_forces(np.array([[1.0, 1.0], [1.0, 1.0]]), 10.0)


def test_simulate_frame_count_and_shapes():
    frames, pos, vel = simulate(n=6, box=10.0, dim=2, dt=0.01, steps=20, record_every=5, seed=2)
    assert frames.shape == (4, 6, 2)
    assert pos.shape == (6, 2) and vel.shape == (6, 2)
    assert np.array_equal(frames[-1], frames[-1])
    assert np.all(np.isfinite(frames))


def test_simulate_without_steps_records_nothing():
    frames, pos, _ = simulate(n=4, box=10.0, dim=2, dt=0.01, steps=0, record_every=3, seed=1)
    assert frames.shape == (0, 4, 2)
    assert pos.shape == (4, 2)


def test_simulate_is_reproducible():
    a = simulate(n=5, box=10.0, dim=2, dt=0.01, steps=10, record_every=2, seed=9)
    b = simulate(n=5, box=10.0, dim=2, dt=0.01, steps=10, record_every=2, seed=9)
    for x, y in zip(a, b):
        assert np.array_equal(x, y)


def test_simulate_conserves_momentum():
    _, _, vel_short = simulate(n=6, box=10.0, dim=2, dt=0.01, steps=0, record_every=1, seed=4)
    _, _, vel_long = simulate(n=6, box=10.0, dim=2, dt=0.01, steps=30, record_every=1, seed=4)
    assert np.allclose(vel_short.sum(axis=0), vel_long.sum(axis=0), atol=1e-9)


@pytest.mark.parametrize(
    "kwargs",
    [{"mass": 0.0}, {"steps": -1}, {"record_every": 0}],
)
def test_simulate_rejects_bad_arguments(kwargs):
    with pytest.raises(ValueError):
        simulate(n=3, box=10.0, dim=2, dt=0.01, seed=0, **{"steps": 5, **kwargs})


def test_main_writes_frames(tmp_path):
    out = tmp_path / "op.out"
    code = main(
        ["--particles", "4", "--steps", "6", "--record-every", "3", "--dt", "0.01",
         "--seed", "1", "--output", str(out)]
    )
    assert code == 0
    lines = out.read_text().splitlines()
    assert len(lines) == 2
    entries = [e for e in lines[0].split("\t") if e]
    assert len(entries) == 4
    assert all(len(e.split(",")) == 2 for e in entries)