# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

All functions operate on 2D vectors represented as numpy arrays of shape (2,).
Tuples and lists are accepted wherever a point is expected.
"""
from __future__ import annotations

import numpy as np

from .constants import EPS


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Copies the input so callers never alias the caller's buffer.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def point_segment_distance(p, a, b) -> float:
    """
    Euclidean distance from point p to the segment [a, b].

    Projects p onto the infinite line through a and b, clamps the projection
    parameter t to [0, 1] and measures the distance to the clamped point:

        t = ((p - a) . (b - a)) / |b - a|²
        d = |p - (a + clamp(t, 0, 1) (b - a))|

    A zero-length segment measures the distance to a.

    Args:
        p: Query point [x, y].
        a: Segment start [x, y].
        b: Segment end [x, y].
    """
    p, a, b = f64(p), f64(a), f64(b)
    ab = b - a
    ap = p - a

    ab_ab = norm2(ab)
    if ab_ab < EPS:
        return norm(ap)

    t = float(np.dot(ap, ab)) / ab_ab
    t = min(1.0, max(0.0, t))
    return norm(p - (a + t * ab))
