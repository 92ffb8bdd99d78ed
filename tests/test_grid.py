import numpy as np
import pytest
from verlet_cloth.grid import build_grid, grid_index


def test_grid_counts():
    """R x C grid: R*C particles, R(C-1) horizontal + (R-1)C vertical links."""
    rows, cols = 4, 3
    particles, constraints = build_grid(rows, cols, spacing=10.0)
    assert len(particles) == rows * cols
    assert len(constraints) == rows * (cols - 1) + (rows - 1) * cols


def test_top_row_pinned():
    particles, _ = build_grid(3, 4, spacing=10.0)
    for row in range(3):
        for col in range(4):
            assert particles[grid_index(row, col, 4)].pinned == (row == 0)


def test_positions_and_rest_lengths():
    particles, constraints = build_grid(3, 3, spacing=25.0, origin=(100.0, 50.0))
    assert np.array_equal(particles[grid_index(0, 0, 3)].position, [100.0, 50.0])
    assert np.array_equal(particles[grid_index(2, 1, 3)].position, [125.0, 100.0])
    for p in particles:
        assert np.array_equal(p.position, p.previous_position)
    for c in constraints:
        assert c.active
        assert c.rest_length == pytest.approx(25.0)


def test_constraint_order():
    """Row-major; for each particle the right link precedes the lower link."""
    _, constraints = build_grid(2, 2, spacing=1.0)
    assert [(c.a, c.b) for c in constraints] == [(0, 1), (0, 2), (1, 3), (2, 3)]


def test_single_particle_grid():
    particles, constraints = build_grid(1, 1, spacing=1.0)
    assert len(particles) == 1
    assert particles[0].pinned
    assert constraints == []


@pytest.mark.parametrize("rows,cols,spacing", [(0, 3, 1.0), (3, 0, 1.0), (2, 2, 0.0), (2, 2, -5.0), (2, 2, float("nan")), (2, 2, float("inf"))])
def test_invalid_grid(rows, cols, spacing):
    with pytest.raises(ValueError):
        build_grid(rows, cols, spacing)
