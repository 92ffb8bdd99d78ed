# MIT License (see LICENSE)
"""
Default simulation parameters.

Units are screen pixels and simulation ticks; y grows downward, so a positive
gravity pulls the cloth toward the bottom of the viewport.
"""
from __future__ import annotations

# Viewport bounds particles are clamped to.
DEFAULT_WIDTH: float = 1920.0
DEFAULT_HEIGHT: float = 1080.0

# Gravity magnitude, applied along +y.
DEFAULT_GRAVITY: float = 9.81

# Fixed time step per tick.
DEFAULT_DT: float = 0.1

# Cloth lattice.
DEFAULT_ROWS: int = 20
DEFAULT_COLS: int = 20
DEFAULT_SPACING: float = 30.0

# Maximum distance from a click to a constraint segment for a tear.
DEFAULT_CLICK_TOLERANCE: float = 30.0

# Gauss-Seidel relaxation passes per tick. More passes give a stiffer cloth
# at a linear cost in CPU time.
DEFAULT_SOLVER_ITERS: int = 5

# Lengths below this are treated as zero (constraint correction is skipped,
# degenerate segments collapse to a point).
EPS: float = 1e-12
