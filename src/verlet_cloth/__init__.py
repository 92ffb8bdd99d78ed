# MIT License (see LICENSE)
"""
verlet_cloth - A 2D tearable cloth simulation.

A grid of point masses linked by distance constraints, integrated with
Verlet under gravity and relaxed with Gauss-Seidel passes. Links can be torn
interactively by deactivating the one nearest to a point.

Main entry points:
    - Cloth: The simulation context (particles, constraints, config).
    - ClothConfig: All tunables of a run.
    - build_grid: Lattice construction.
    - tick: One simulation step over raw particle/constraint lists.
    - find_nearest_constraint: Point query used for tearing.

Submodules:
    - constraints: Distance constraint and relaxation solver.
    - core: Forces and diagnostics.
    - io: JSON config load/save.
    - renderer: Optional visualization adapters.

Example:
    from verlet_cloth import Cloth, ClothConfig

    cloth = Cloth.from_config(ClothConfig(rows=10, cols=10))
    cloth.step()
    cloth.tear((700.0, 300.0))
"""
from .cloth import Cloth, tick
from .config import ClothConfig
from .constraints import Constraint, relax_constraints
from .grid import build_grid
from .query import find_nearest_constraint
from .types import Particle

__all__ = [
    # Simulation
    "Cloth",
    "ClothConfig",
    "tick",
    # Model
    "Particle",
    "Constraint",
    "build_grid",
    # Solver and queries
    "relax_constraints",
    "find_nearest_constraint",
]
