"""
Closed-form Bézier curve evaluation.

Fixed-degree evaluators use the nested de Casteljau (polynomial) form,
general() uses the explicit Bernstein sum, and BezierCurve caches the
power-basis coefficients of one control polygon for repeated evaluation.
"""

import numpy as np
from scipy.special import comb
from typing import Union

from .combinatorics import combination, power
from .exceptions import InvalidArgumentError
from .polynomial import polynomial_coefficients
from .utils import as_control_points, as_point, check_degree


def linear(p0, p1, t):
    """Point on the segment p0-p1 at parameter t."""
    p0, p1 = as_point(p0), as_point(p1)
    return p0 + t * (p1 - p0)


def quadratic(p0, p1, p2, t):
    """
    Point on a quadratic Bézier curve.

    Evaluated as (1-t) * linear(p0, p1) + t * linear(p1, p2), expanded inline.
    """
    p0, p1, p2 = as_point(p0), as_point(p1), as_point(p2)
    return (1 - t) * (p0 + t * (p1 - p0)) + t * (p1 + t * (p2 - p1))


def cubic(p0, p1, p2, p3, t):
    """
    Point on a cubic Bézier curve.

    Evaluated as (1-t) * quadratic(p0, p1, p2) + t * quadratic(p1, p2, p3),
    expanded inline.
    """
    p0, p1, p2, p3 = as_point(p0), as_point(p1), as_point(p2), as_point(p3)
    return ((1 - t) * ((1 - t) * (p0 + t * (p1 - p0)) + t * (p1 + t * (p2 - p1)))
            + t * ((1 - t) * (p1 + t * (p2 - p1)) + t * (p2 + t * (p3 - p2))))


def general(points, t):
    """
    Evaluate a Bézier curve of any degree with the explicit Bernstein sum.

    B(t) = sum_{i=0}^{N} C(N,i) (1-t)^(N-i) t^i P_i

    Args:
        points: Control points (N+1) x D
        t: Curve parameter (not range-checked)

    Returns:
        np.ndarray: Point on the curve, shape (D,)

    Raises:
        InvalidArgumentError: If points is empty
        BezierOverflowError: If N exceeds MAX_DEGREE
    """
    P = as_control_points(points)
    n = P.shape[0] - 1
    check_degree(n)

    bt = np.zeros(P.shape[1])
    for i in range(n + 1):
        bt += float(combination(n, i)) * power(1 - t, n - i) * power(t, i) * P[i]
    return bt


def _horner(C, t):
    """Evaluate power-basis coefficients C at scalar or array t."""
    t = np.asarray(t, dtype=float)
    out = np.zeros(t.shape + (C.shape[1],))
    tt = t[..., np.newaxis]
    for c in C[::-1]:
        out = out * tt + c
    return out


class BezierCurve:
    """
    Bézier curve of degree N with precomputed power-basis coefficients.

    The coefficients are computed once in the constructor, so evaluate()
    and derivative() cost O(N) per parameter value.
    """

    def __init__(self, control_points):
        """
        Args:
            control_points: Control point array (N+1) x D
                            A 1D array is treated as scalar control points.
        """
        self.control_points = as_control_points(control_points, name="control_points").copy()
        self.degree = self.control_points.shape[0] - 1
        self.dimension = self.control_points.shape[1]
        self._coefficients = polynomial_coefficients(self.control_points)

    @property
    def coefficients(self) -> np.ndarray:
        """Power-basis coefficients (N+1) x D, c[0] is the constant term."""
        return self._coefficients.copy()

    def evaluate(self, t: Union[float, np.ndarray]) -> np.ndarray:
        """
        Evaluate the curve.

        Args:
            t: Scalar or 1D array of parameters; values outside [0, 1] extrapolate

        Returns:
            (D,) for scalar t, (len(t), D) for array t
        """
        return _horner(self._coefficients, t)

    def evaluate_basis(self, t: Union[float, np.ndarray]) -> np.ndarray:
        """
        Bernstein basis values B_{i,N}(t) = C(N,i) t^i (1-t)^(N-i).

        Returns:
            (num_points, N+1) array
        """
        t = np.atleast_1d(np.asarray(t, dtype=float))
        N = self.degree
        basis_values = np.zeros((len(t), N + 1))
        for i in range(N + 1):
            basis_values[:, i] = comb(N, i) * (t ** i) * ((1 - t) ** (N - i))
        return basis_values

    def derivative(self, t: Union[float, np.ndarray], order: int = 1) -> np.ndarray:
        """
        Evaluate the derivative of the given order.

        order == 0 evaluates the curve itself. Negative orders and orders
        above the degree give zero vectors.
        """
        if order == 0:
            return self.evaluate(t)
        if order < 0 or order > self.degree:
            return np.zeros(np.shape(t) + (self.dimension,))

        # d/dt sum c_j t^j = sum j c_j t^(j-1)
        D = self._coefficients
        for _ in range(order):
            D = D[1:] * np.arange(1, D.shape[0])[:, np.newaxis]
        return _horner(D, t)

    def elevate_degree(self) -> 'BezierCurve':
        """
        Elevate the degree by one without changing the curve shape.

        Q_0 = P_0, Q_{N+1} = P_N,
        Q_j = (j/(N+1)) P_{j-1} + ((N+1-j)/(N+1)) P_j
        """
        N = self.degree
        E = np.zeros((N + 2, N + 1))
        E[0, 0] = 1
        E[N + 1, N] = 1
        for j in range(1, N + 1):
            E[j, j - 1] = j / (N + 1)
            E[j, j] = (N + 1 - j) / (N + 1)
        return BezierCurve(E @ self.control_points)

    def elevate_degree_by(self, steps: int) -> 'BezierCurve':
        """Elevate the degree `steps` times."""
        if steps < 0:
            raise InvalidArgumentError(f"steps must be non-negative, got {steps}")

        result = self
        for _ in range(steps):
            result = result.elevate_degree()
        return result

    def get_control_points(self) -> np.ndarray:
        return self.control_points.copy()

    def get_degree(self) -> int:
        return self.degree

    def get_dimension(self) -> int:
        return self.dimension

    def __repr__(self) -> str:
        return f"BezierCurve(degree={self.degree}, dimension={self.dimension}, control_points={self.control_points.shape})"
