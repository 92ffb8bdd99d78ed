# MIT License (see LICENSE)
"""
Diagnostics for the cloth state.

Used for checking that the cloth settles and for spotting over-stretched
links. Velocities are the implicit Verlet displacement per tick divided by
the time step; particles have unit mass.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..constraints.solver import Constraint
from ..types import Particle
from ..util import norm, norm2


def kinetic_energy(particles: Sequence[Particle], dt: float) -> float:
    """
    Total kinetic energy estimate of the free particles.

    T = Σ 0.5 * |(x - x_prev) / dt|²
    """
    ke = 0.0
    for p in particles:
        if p.pinned:
            continue
        ke += 0.5 * norm2(p.velocity) / (dt * dt)
    return ke


def constraint_strain(particles: Sequence[Particle], constraints: Sequence[Constraint]) -> np.ndarray:
    """
    Relative stretch (current - rest) / rest of every active constraint.

    Returns:
        Array with one entry per active constraint, in list order.
    """
    strains = [
        (norm(particles[c.b].position - particles[c.a].position) - c.rest_length) / c.rest_length
        for c in constraints
        if c.active
    ]
    return np.array(strains, dtype=np.float64)


def max_strain(particles: Sequence[Particle], constraints: Sequence[Constraint]) -> float:
    """Largest absolute relative stretch among active constraints, 0 if none."""
    s = constraint_strain(particles, constraints)
    if s.size == 0:
        return 0.0
    return float(np.max(np.abs(s)))


def active_count(constraints: Sequence[Constraint]) -> int:
    """Number of constraints that have not been torn."""
    return sum(1 for c in constraints if c.active)
