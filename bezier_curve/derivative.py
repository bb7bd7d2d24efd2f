"""
Derivatives of fixed-degree Bézier curves with the order as a parameter.

Supported orders are 1 for linear, 1-2 for quadratic and 1-3 for cubic
curves. Any other order, including 0 and negative values, returns the
zero vector instead of raising.
"""

from . import first_derivative, second_derivative
from .utils import as_point, zero_vector


def linear(p0, p1, t, order):
    if order == 1:
        return first_derivative.linear(p0, p1, t)
    return zero_vector(p0)


def quadratic(p0, p1, p2, t, order):
    if order == 2:
        return second_derivative.quadratic(p0, p1, p2, t)
    if order == 1:
        return first_derivative.quadratic(p0, p1, p2, t)
    return zero_vector(p0)


def cubic(p0, p1, p2, p3, t, order):
    if order == 3:
        p0, p1, p2, p3 = as_point(p0), as_point(p1), as_point(p2), as_point(p3)
        return 6 * (p3 - 3 * p2 + 3 * p1 - p0)
    if order == 2:
        return second_derivative.cubic(p0, p1, p2, p3, t)
    if order == 1:
        return first_derivative.cubic(p0, p1, p2, p3, t)
    return zero_vector(p0)
