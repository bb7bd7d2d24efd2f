"""
Second derivatives of fixed-degree Bézier curves, d²B/dt².

A linear curve has no second derivative function; see derivative.linear().
"""

from .utils import as_point


def quadratic(p0, p1, p2, t):
    """B''(t) = 2(P2 - 2P1 + P0), independent of t."""
    p0, p1, p2 = as_point(p0), as_point(p1), as_point(p2)
    return 2 * (p2 - 2 * p1 + p0)


def cubic(p0, p1, p2, p3, t):
    """B''(t) = 6(1-t)(P2 - 2P1 + P0) + 6t(P3 - 2P2 + P1)"""
    p0, p1, p2, p3 = as_point(p0), as_point(p1), as_point(p2), as_point(p3)
    return 6 * (1 - t) * (p2 - 2 * p1 + p0) + 6 * t * (p3 - 2 * p2 + p1)
