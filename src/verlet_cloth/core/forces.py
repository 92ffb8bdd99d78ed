# MIT License (see LICENSE)
"""
Force generators for the cloth simulation.

Forces are accumulated into each particle's acceleration before integration.
Particles have unit mass, so a force and the acceleration it causes are the
same vector. Pinned particles ignore forces.
"""
from __future__ import annotations

import numpy as np

from ..types import Particle
from ..util import f64


def gravity_vector(g: float) -> np.ndarray:
    """Gravity of magnitude g pointing down the screen (+y)."""
    return f64((0.0, g))


def apply_gravity(particle: Particle, g: np.ndarray) -> None:
    """
    Apply gravitational acceleration to a particle.

    Args:
        particle: Particle to accelerate. No effect if pinned.
        g: Gravity vector [gx, gy].
    """
    particle.apply_force(g)
