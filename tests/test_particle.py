import numpy as np
import pytest
from verlet_cloth.types import Particle


def test_new_particle_is_at_rest():
    p = Particle((3.0, 4.0))
    assert np.array_equal(p.position, p.previous_position)
    assert np.array_equal(p.acceleration, np.zeros(2))
    assert np.array_equal(p.velocity, np.zeros(2))


def test_pinned_particle_never_moves():
    """Forces and integration leave a pinned particle completely unchanged."""
    p = Particle((100.0, 50.0), pinned=True)
    for _ in range(50):
        p.apply_force((0.0, 9.81))
        p.apply_force((-3.0, 2.0))
        p.integrate(0.1)

    assert np.array_equal(p.position, [100.0, 50.0])
    assert np.array_equal(p.previous_position, [100.0, 50.0])
    assert np.array_equal(p.acceleration, np.zeros(2))


def test_verlet_constant_acceleration():
    """
    Verlet under constant acceleration a from rest:
      x_n = x_0 + a dt² n(n+1)/2
    """
    g, dt, n = 9.81, 0.1, 10
    p = Particle((0.0, 0.0))
    for _ in range(n):
        p.apply_force((0.0, g))
        p.integrate(dt)

    y_exp = g * dt * dt * n * (n + 1) / 2
    assert p.position[1] == pytest.approx(y_exp)
    assert p.position[0] == 0.0
    # displacement over the last tick is n a dt²
    assert p.velocity[1] == pytest.approx(n * g * dt * dt)


def test_integrate_clears_acceleration():
    p = Particle((0.0, 0.0))
    p.apply_force((1.0, 2.0))
    p.integrate(1.0)
    assert np.array_equal(p.acceleration, np.zeros(2))
    assert np.allclose(p.position, [1.0, 2.0])

    # coasts with constant velocity once the force is gone
    p.integrate(1.0)
    assert np.allclose(p.position, [2.0, 4.0])


def test_apply_force_accumulates():
    p = Particle((0.0, 0.0))
    p.apply_force((1.0, 0.0))
    p.apply_force((0.5, -2.0))
    assert np.allclose(p.acceleration, [1.5, -2.0])


@pytest.mark.parametrize("pos", [
    (-10.0, 50.0),
    (5000.0, 50.0),
    (50.0, -1e9),
    (50.0, 1e9),
    (-1.0, 2000.0),
    (400.0, 300.0),
])
def test_clamp_to_bounds(pos):
    W, H = 800.0, 600.0
    p = Particle(pos)
    p.clamp_to_bounds(W, H)
    assert 0.0 <= p.position[0] <= W
    assert 0.0 <= p.position[1] <= H


def test_clamp_applies_to_pinned():
    p = Particle((-5.0, 700.0), pinned=True)
    p.clamp_to_bounds(800.0, 600.0)
    assert np.array_equal(p.position, [0.0, 600.0])


def test_position_is_copied():
    src = np.array([1.0, 2.0])
    p = Particle(src)
    p.position += 1.0
    assert np.array_equal(src, [1.0, 2.0])
