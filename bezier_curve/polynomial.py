"""
Power-basis (polynomial) form of a Bézier curve.

B(t) = sum_j c_j t^j, with c_j computed once by polynomial_coefficients()
and then reused by polynomial() for O(N) evaluation per parameter value.
"""

import warnings

import numpy as np

from .combinatorics import factorial, power
from .constants import HIGH_DEGREE_WARNING
from .exceptions import BezierPrecisionWarning, MismatchedCoefficientsError
from .utils import as_control_points, check_degree


def polynomial_coefficients(points):
    """
    Convert control points to power-basis coefficients.

    c_j = n(n-1)...(n-j+1) * sum_{i=0}^{j} (-1)^(i+j) P_i / (i! (j-i)!)

    The falling factorial divided by i!(j-i)! is the integer C(n,j)C(j,i),
    so the weights are formed exactly before being applied to the points.

    Args:
        points: Control points (N+1) x D

    Returns:
        np.ndarray: Coefficients (N+1) x D, c[0] is the constant term

    Raises:
        InvalidArgumentError: If points is empty
        BezierOverflowError: If the degree exceeds MAX_DEGREE
    """
    P = as_control_points(points)
    n = P.shape[0] - 1
    check_degree(n)
    if n > HIGH_DEGREE_WARNING:
        warnings.warn(
            f"power-basis coefficients of a degree {n} curve are ill-conditioned",
            BezierPrecisionWarning,
            stacklevel=2,
        )

    C = np.zeros_like(P)
    for j in range(n + 1):
        # Pi part
        pi = 1
        for m in range(j):
            pi *= n - m

        # Sigma part
        sigma = np.zeros(P.shape[1])
        for i in range(j + 1):
            weight = power(-1, i + j) * pi // (factorial(i) * factorial(j - i))
            sigma += float(weight) * P[i]

        C[j] = sigma
    return C


def polynomial(points, t, coefficients):
    """
    Evaluate a curve from its precomputed power-basis coefficients.

    Args:
        points: Control points the coefficients were computed from
        t: Curve parameter (not range-checked)
        coefficients: Output of polynomial_coefficients(points)

    Returns:
        np.ndarray: Point on the curve, shape (D,)

    Raises:
        InvalidArgumentError: If points or coefficients is empty
        MismatchedCoefficientsError: If the coefficient array does not
            have the same shape as the control points
    """
    P = as_control_points(points)
    c = as_control_points(coefficients, name="coefficients")
    if c.shape != P.shape:
        raise MismatchedCoefficientsError(
            f"coefficients shape {c.shape} does not match control points shape {P.shape}"
        )

    # Horner scheme
    bt = np.zeros(c.shape[1])
    for cj in c[::-1]:
        bt = bt * t + cj
    return bt
