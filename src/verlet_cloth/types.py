# MIT License (see LICENSE)
"""
Core type definitions for the cloth simulation.

Defines Particle, the point mass the cloth is built from. Particles carry no
explicit velocity: Verlet integration derives it from the difference between
the current and the previous position,

    x(t+dt) = x(t) + (x(t) - x(t-dt)) + a(t) dt²
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .util import f64


@dataclass
class Particle:
    """
    A point mass with position history.

    Attributes:
        position: Current position [x, y].
        pinned: Pinned particles are anchors. Forces and integration leave
                them untouched.
        previous_position: Position at the previous tick. Defaults to
                           `position` (zero initial velocity).
        acceleration: Accumulated acceleration [ax, ay], cleared by integrate().
    """
    position: np.ndarray | tuple[float, float]
    pinned: bool = False
    previous_position: np.ndarray | tuple[float, float] | None = None
    acceleration: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float64))

    def __post_init__(self) -> None:
        """Convert vectors to float64 arrays."""
        self.position = f64(self.position)
        if self.previous_position is None:
            self.previous_position = self.position.copy()
        else:
            self.previous_position = f64(self.previous_position)
        self.acceleration = f64(self.acceleration)

    @property
    def velocity(self) -> np.ndarray:
        """Implicit displacement over the last tick (position - previous_position)."""
        return self.position - self.previous_position

    def apply_force(self, force: np.ndarray | tuple[float, float]) -> None:
        """Accumulate a force (unit mass, so force == acceleration). No-op when pinned."""
        if not self.pinned:
            self.acceleration += f64(force)

    def integrate(self, dt: float) -> None:
        """
        Advance one Verlet step and clear the accumulated acceleration.

        Pinned particles keep position, previous position and acceleration.
        """
        if self.pinned:
            return
        velocity = self.position - self.previous_position
        self.previous_position = self.position.copy()
        self.position = self.position + velocity + self.acceleration * (dt * dt)
        self.acceleration = np.zeros(2, dtype=np.float64)

    def clamp_to_bounds(self, width: float, height: float) -> None:
        """Clamp position into [0, width] x [0, height]. Applies to pinned particles too."""
        self.position[0] = min(max(self.position[0], 0.0), width)
        self.position[1] = min(max(self.position[1], 0.0), height)
