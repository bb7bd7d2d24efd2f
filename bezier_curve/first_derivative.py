"""
First derivatives of fixed-degree Bézier curves, dB/dt.
"""

from .utils import as_point


def linear(p0, p1, t):
    """Constant tangent of a segment; t is accepted for a uniform signature."""
    return as_point(p1) - as_point(p0)


def quadratic(p0, p1, p2, t):
    """B'(t) = 2(1-t)(P1-P0) + 2t(P2-P1)"""
    p0, p1, p2 = as_point(p0), as_point(p1), as_point(p2)
    return 2 * (1 - t) * (p1 - p0) + 2 * t * (p2 - p1)


def cubic(p0, p1, p2, p3, t):
    """B'(t) = 3(1-t)^2(P1-P0) + 6(1-t)t(P2-P1) + 3t^2(P3-P2)"""
    p0, p1, p2, p3 = as_point(p0), as_point(p1), as_point(p2), as_point(p3)
    return 3 * (1 - t) * (1 - t) * (p1 - p0) + 6 * (1 - t) * t * (p2 - p1) + 3 * t * t * (p3 - p2)
