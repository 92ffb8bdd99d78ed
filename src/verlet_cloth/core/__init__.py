# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force generators: Gravity.
    - Invariants: Kinetic energy, constraint strain, active link count.

Typical usage:
    from verlet_cloth.core import apply_gravity, gravity_vector

    apply_gravity(particle, gravity_vector(9.81))
"""
from .forces import apply_gravity, gravity_vector
from .invariants import active_count, constraint_strain, kinetic_energy, max_strain

__all__ = [
    # Forces
    "apply_gravity",
    "gravity_vector",
    # Invariants
    "active_count",
    "constraint_strain",
    "kinetic_energy",
    "max_strain",
]
