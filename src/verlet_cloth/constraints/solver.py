# MIT License (see LICENSE)
"""
Distance constraints and the relaxation solver.

Constraints are position-based: each satisfy() call moves the two endpoints
directly instead of applying impulses. A single call is one relaxation step,
not an exact solve. Running the step over every constraint, several passes
per tick, is a Gauss-Seidel iteration that converges toward a configuration
where all links sit at their rest length.

Key concepts:
- Particle arena: constraints store integer indices into the particle list
  rather than references to Particle objects.
- Soft delete: a torn constraint is flagged inactive and stays in the list,
  keeping indices and iteration order stable.
- Order sensitivity: Gauss-Seidel results depend on iteration order, so the
  solver always sweeps constraints in insertion order.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from ..constants import EPS
from ..types import Particle
from ..util import norm


@dataclass
class Constraint:
    """
    Keeps two particles at a fixed distance.

    Attributes:
        a: Index of the first particle.
        b: Index of the second particle.
        rest_length: Target distance, captured at construction.
        active: False once the constraint has been torn.
    """
    a: int
    b: int
    rest_length: float
    active: bool = True

    def __post_init__(self) -> None:
        if self.a == self.b:
            raise ValueError(f"Constraint links particle {self.a} to itself")
        if not self.rest_length > 0.0:
            raise ValueError(
                f"Constraint {self.a}-{self.b} has non-positive rest length {self.rest_length}"
            )
        self.rest_length = float(self.rest_length)

    @classmethod
    def between(cls, particles: Sequence[Particle], a: int, b: int) -> "Constraint":
        """
        Link particles a and b at their current distance.

        Raises:
            ValueError: If a == b or the two particles coincide.
        """
        return cls(a=a, b=b, rest_length=norm(particles[b].position - particles[a].position))

    def satisfy(self, particles: Sequence[Particle]) -> None:
        """
        Run one relaxation step on this constraint.

        Each non-pinned endpoint moves by half the length error along the
        link. With both endpoints free the link ends exactly at rest length;
        with one pinned the error halves. Coincident endpoints are left alone.
        """
        if not self.active:
            return

        pa = particles[self.a]
        pb = particles[self.b]
        delta = pb.position - pa.position
        current = norm(delta)
        if current < EPS:
            return

        difference = (current - self.rest_length) / current
        correction = delta * 0.5 * difference

        if not pa.pinned:
            pa.position += correction
        if not pb.pinned:
            pb.position -= correction

    def deactivate(self) -> None:
        """Tear the constraint. Idempotent."""
        self.active = False


def relax_constraints(
    particles: Sequence[Particle],
    constraints: Sequence[Constraint],
    iters: int,
) -> None:
    """
    Run Gauss-Seidel relaxation passes over all constraints.

    Args:
        particles: Particle arena the constraint indices refer to.
        constraints: Constraints, swept in list order.
        iters: Number of full passes. Higher = stiffer cloth, linear cost.
    """
    for _ in range(iters):
        for c in constraints:
            c.satisfy(particles)
