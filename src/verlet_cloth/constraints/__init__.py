# MIT License (see LICENSE)
"""
Constraint solvers for the cloth simulation.

This subpackage provides:
    - Constraint: Distance link between two particles of the arena.
    - relax_constraints: Gauss-Seidel relaxation over a constraint list.

Typical usage:
    from verlet_cloth.constraints import Constraint, relax_constraints

    link = Constraint.between(particles, 0, 1)
    relax_constraints(particles, [link], iters=5)
"""
from .solver import Constraint, relax_constraints

__all__ = [
    "Constraint",
    "relax_constraints",
]
