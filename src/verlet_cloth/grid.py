# MIT License (see LICENSE)
"""
Cloth lattice construction.

Builds an R x C grid of particles hanging from its top row, linked to their
right and lower neighbors. Particle (r, c) lives at index r * C + c and is
placed at (c * spacing, r * spacing) offset by the origin.
"""
from __future__ import annotations
import logging
import math

from .constraints.solver import Constraint
from .types import Particle

logger = logging.getLogger(__name__)


def grid_index(row: int, col: int, cols: int) -> int:
    """Arena index of particle (row, col) in a grid with `cols` columns."""
    return row * cols + col


def build_grid(
    rows: int,
    cols: int,
    spacing: float,
    origin: tuple[float, float] = (0.0, 0.0),
) -> tuple[list[Particle], list[Constraint]]:
    """
    Create the particles and constraints of a rectangular cloth.

    Constraints are emitted in row-major order; for each particle the
    horizontal link (to the right) comes before the vertical one (below).
    The solver sweeps them in this order.

    Args:
        rows: Number of particle rows. Row 0 is pinned.
        cols: Number of particle columns.
        spacing: Distance between neighbors.
        origin: Position of particle (0, 0).

    Returns:
        Tuple (particles, constraints).

    Raises:
        ValueError: If rows or cols is below 1, or spacing is not finite and positive.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"Grid must have at least one row and column, got {rows}x{cols}")
    if not (math.isfinite(spacing) and spacing > 0):
        raise ValueError(f"spacing must be positive, got {spacing}")

    ox, oy = origin
    particles = [
        Particle(position=(col * spacing + ox, row * spacing + oy), pinned=(row == 0))
        for row in range(rows)
        for col in range(cols)
    ]

    constraints: list[Constraint] = []
    for row in range(rows):
        for col in range(cols):
            i = grid_index(row, col, cols)
            if col < cols - 1:
                constraints.append(Constraint.between(particles, i, grid_index(row, col + 1, cols)))
            if row < rows - 1:
                constraints.append(Constraint.between(particles, i, grid_index(row + 1, col, cols)))

    logger.info(
        "Built %dx%d cloth: %d particles, %d constraints",
        rows, cols, len(particles), len(constraints),
    )
    return particles, constraints
