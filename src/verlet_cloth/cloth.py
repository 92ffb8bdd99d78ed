# MIT License (see LICENSE)
"""
The cloth simulation context and its tick.

The Cloth class owns the particle arena, the constraint list and the
configuration of a run. Each step performs, in order:
    1. Gravity, Verlet integration and bounds clamping for every particle.
    2. solver_iters Gauss-Seidel relaxation passes over all constraints.

Tearing is not part of the step: the input handler calls tear() between
steps with the cursor position.

Structure:
    - User creates a Cloth (usually via Cloth.from_config()).
    - User calls cloth.step() once per frame.
    - The renderer reads cloth.positions() and cloth.segments().
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .config import ClothConfig
from .constraints.solver import Constraint, relax_constraints
from .constants import DEFAULT_SOLVER_ITERS
from .core.forces import apply_gravity, gravity_vector
from .grid import build_grid
from .profiler import Profiler
from .query import find_nearest_constraint
from .types import Particle
from .util import f64

logger = logging.getLogger(__name__)


def _integrate_particles(
    particles: Sequence[Particle],
    g: np.ndarray,
    dt: float,
    bounds: tuple[float, float],
) -> None:
    width, height = bounds
    for p in particles:
        apply_gravity(p, g)
        p.integrate(dt)
        p.clamp_to_bounds(width, height)


def tick(
    particles: Sequence[Particle],
    constraints: Sequence[Constraint],
    gravity: float,
    dt: float,
    bounds: tuple[float, float],
    iters: int = DEFAULT_SOLVER_ITERS,
) -> None:
    """
    Advance the cloth by one fixed step, in place.

    Relaxation only starts once every particle has been integrated, and
    sweeps constraints in list order so runs are reproducible.

    Args:
        particles: Particle arena.
        constraints: Constraints over the arena.
        gravity: Gravity magnitude along +y.
        dt: Time step.
        bounds: Viewport (width, height).
        iters: Relaxation passes.
    """
    _integrate_particles(particles, gravity_vector(gravity), dt, bounds)
    relax_constraints(particles, constraints, iters)


@dataclass
class Cloth:
    """
    Cloth simulation world.

    Attributes:
        particles: Particle arena. Constraints refer to particles by index.
        constraints: Distance constraints, including torn ones.
        config: Simulation parameters.
        profiler: Optional Profiler timing the "integrate" and "relax" phases.
        ticks: Number of steps taken so far.
    """
    particles: list[Particle]
    constraints: list[Constraint]
    config: ClothConfig = field(default_factory=ClothConfig)
    profiler: Profiler | None = None
    ticks: int = 0

    def __post_init__(self) -> None:
        n = len(self.particles)
        for c in self.constraints:
            if not (0 <= c.a < n and 0 <= c.b < n):
                raise ValueError(f"Constraint {c.a}-{c.b} refers outside {n} particles")
        self._g = gravity_vector(self.config.gravity)

    @classmethod
    def from_config(cls, config: ClothConfig | None = None, profiler: Profiler | None = None) -> "Cloth":
        """Build the cloth lattice described by a config."""
        config = config or ClothConfig()
        particles, constraints = build_grid(config.rows, config.cols, config.spacing, config.origin)
        return cls(particles=particles, constraints=constraints, config=config, profiler=profiler)

    def step(self) -> None:
        """Advance the simulation by one tick of config.dt."""
        cfg = self.config
        prof = self.profiler

        if prof:
            with prof.section("integrate"):
                _integrate_particles(self.particles, self._g, cfg.dt, cfg.bounds)
            with prof.section("relax"):
                relax_constraints(self.particles, self.constraints, cfg.solver_iters)
            logger.debug(
                "Tick %d: integrate %.3fms, relax %.3fms",
                self.ticks,
                1e3 * prof.stats.last("integrate"),
                1e3 * prof.stats.last("relax"),
            )
        else:
            _integrate_particles(self.particles, self._g, cfg.dt, cfg.bounds)
            relax_constraints(self.particles, self.constraints, cfg.solver_iters)

        self.ticks += 1

    def find_nearest_constraint(self, point, tolerance: float | None = None) -> Constraint | None:
        """
        Active constraint nearest to a point, within tolerance.

        Args:
            point: Query point [x, y].
            tolerance: Defaults to config.click_tolerance.
        """
        if tolerance is None:
            tolerance = self.config.click_tolerance
        return find_nearest_constraint(self.particles, self.constraints, point, tolerance)

    def tear(self, point, tolerance: float | None = None) -> Constraint | None:
        """
        Deactivate the constraint nearest to a point.

        Returns:
            The torn constraint, or None if nothing was within tolerance.
        """
        nearest = self.find_nearest_constraint(point, tolerance)
        if nearest is None:
            logger.debug("No constraint near (%.1f, %.1f)", point[0], point[1])
            return None
        nearest.deactivate()
        logger.debug("Tore constraint %d-%d at tick %d", nearest.a, nearest.b, self.ticks)
        return nearest

    def positions(self) -> np.ndarray:
        """Current particle positions as an (N, 2) array (a copy)."""
        if not self.particles:
            return np.zeros((0, 2), dtype=np.float64)
        return f64([p.position for p in self.particles])

    def active_constraints(self) -> list[Constraint]:
        """Constraints that have not been torn, in list order."""
        return [c for c in self.constraints if c.active]

    def segments(self) -> list[tuple[np.ndarray, np.ndarray]]:
        """Endpoint positions (a, b) of every active constraint, for drawing."""
        return [
            (self.particles[c.a].position.copy(), self.particles[c.b].position.copy())
            for c in self.constraints
            if c.active
        ]
