# MIT License (see LICENSE)
"""
Configuration for the cloth simulation.

ClothConfig gathers every tunable of a run: viewport bounds, gravity, time
step, lattice shape and the solver pass count. Values are validated on
creation so a bad config fails before the first tick.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

from .constants import (
    DEFAULT_CLICK_TOLERANCE,
    DEFAULT_COLS,
    DEFAULT_DT,
    DEFAULT_GRAVITY,
    DEFAULT_HEIGHT,
    DEFAULT_ROWS,
    DEFAULT_SOLVER_ITERS,
    DEFAULT_SPACING,
    DEFAULT_WIDTH,
)


def _positive(x: float) -> bool:
    """True for finite x > 0. NaN and inf fail."""
    return math.isfinite(x) and x > 0


@dataclass
class ClothConfig:
    """
    Simulation parameters.

    Attributes:
        width: Viewport width; particles are clamped to [0, width].
        height: Viewport height; particles are clamped to [0, height].
        gravity: Gravity magnitude along +y (screen down).
        dt: Fixed time step per tick.
        rows: Number of particle rows. Row 0 is pinned.
        cols: Number of particle columns.
        spacing: Rest distance between neighboring particles.
        origin: Position of particle (0, 0). Defaults to (width/3, height/4).
        click_tolerance: Maximum click-to-segment distance for a tear.
        solver_iters: Relaxation passes per tick. Higher = stiffer but slower.
    """
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    gravity: float = DEFAULT_GRAVITY
    dt: float = DEFAULT_DT
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    spacing: float = DEFAULT_SPACING
    origin: tuple[float, float] | None = None
    click_tolerance: float = DEFAULT_CLICK_TOLERANCE
    solver_iters: int = DEFAULT_SOLVER_ITERS

    def __post_init__(self) -> None:
        if not (_positive(self.width) and _positive(self.height)):
            raise ValueError(f"Viewport must be positive, got {self.width}x{self.height}")
        if not _positive(self.dt):
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Grid must have at least one row and column, got {self.rows}x{self.cols}")
        if not _positive(self.spacing):
            raise ValueError(f"spacing must be positive, got {self.spacing}")
        if not _positive(self.click_tolerance):
            raise ValueError(f"click_tolerance must be positive, got {self.click_tolerance}")
        if self.solver_iters < 1:
            raise ValueError(f"solver_iters must be at least 1, got {self.solver_iters}")
        if not math.isfinite(self.gravity):
            raise ValueError(f"gravity must be finite, got {self.gravity}")

        if self.origin is None:
            self.origin = (self.width / 3.0, self.height / 4.0)
        else:
            self.origin = (float(self.origin[0]), float(self.origin[1]))
            if not all(math.isfinite(v) for v in self.origin):
                raise ValueError(f"origin must be finite, got {self.origin}")

    @property
    def bounds(self) -> tuple[float, float]:
        """Viewport (width, height)."""
        return (float(self.width), float(self.height))
