# MIT License (see LICENSE)
"""
Point queries against the cloth.

Used for mouse picking: a click tears the link drawn closest to the cursor.
"""
from __future__ import annotations
from typing import Sequence

from .constants import DEFAULT_CLICK_TOLERANCE
from .constraints.solver import Constraint
from .types import Particle
from .util import point_segment_distance


def constraint_distance(particles: Sequence[Particle], constraint: Constraint, point) -> float:
    """Distance from point to the segment currently spanned by a constraint."""
    return point_segment_distance(
        point,
        particles[constraint.a].position,
        particles[constraint.b].position,
    )


def find_nearest_constraint(
    particles: Sequence[Particle],
    constraints: Sequence[Constraint],
    point,
    tolerance: float = DEFAULT_CLICK_TOLERANCE,
) -> Constraint | None:
    """
    Find the active constraint whose segment is closest to a point.

    Brute force over all constraints; inactive ones are skipped. Ties keep
    the constraint encountered first.

    Args:
        particles: Particle arena.
        constraints: Constraints to search, in list order.
        point: Query point [x, y].
        tolerance: Only segments strictly closer than this are candidates.

    Returns:
        The nearest constraint, or None if none lies within tolerance.
        Positions are not modified; the caller decides whether to deactivate.
    """
    nearest = None
    min_distance = tolerance

    for c in constraints:
        if not c.active:
            continue
        d = constraint_distance(particles, c, point)
        if d < min_distance:
            min_distance = d
            nearest = c

    return nearest
