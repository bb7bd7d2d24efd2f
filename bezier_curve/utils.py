"""
Array conversion and formatting helpers shared by the evaluators.
"""

import numpy as np

from .constants import MAX_DEGREE
from .exceptions import BezierOverflowError, InvalidArgumentError


def as_point(p):
    """Convert an array-like point to a float vector."""
    return np.asarray(p, dtype=float)


def as_control_points(points, name="points"):
    """
    Convert a control point sequence to an (N+1, D) float array.

    A 1D input is treated as a sequence of scalar control points.
    The caller's data is never written to; np.asarray may return a view.

    Raises:
        InvalidArgumentError: If the sequence is empty or not 2D
    """
    P = np.asarray(points, dtype=float)
    if P.ndim == 1:
        P = P.reshape(-1, 1)
    if P.ndim != 2:
        raise InvalidArgumentError(f"{name} must be (N+1, dim), got shape {P.shape}")
    if P.shape[0] == 0:
        raise InvalidArgumentError(f"{name} must contain at least one control point")
    return P


def check_degree(degree):
    """Raise BezierOverflowError if factorial weights of this degree overflow a float."""
    if degree > MAX_DEGREE:
        raise BezierOverflowError(
            f"degree {degree} exceeds MAX_DEGREE={MAX_DEGREE}; factorial weights overflow float64"
        )


def zero_vector(like):
    """Zero vector with the shape of `like`."""
    return np.zeros(np.shape(like), dtype=float)


def format_number(value, format_spec='.3f'):
    """
    Format a number with a proper Unicode minus sign.

    Args:
        value: Numeric value to format
        format_spec: Format specification (e.g., '.1f', '.2f')

    Returns:
        str: Formatted string
    """
    if isinstance(value, (int, float, np.floating, np.integer)):
        if value < 0:
            return '−' + format(abs(value), format_spec)
        return format(value, format_spec)
    return str(value)


def format_point(point, format_spec='.3f'):
    """Format a point as '(x, y, ...)' using format_number for each component."""
    return '(' + ', '.join(format_number(float(v), format_spec) for v in np.ravel(point)) + ')'
