"""
De Casteljau evaluation of arbitrary-degree Bézier curves.
"""

from .utils import as_control_points


def _recursive(P, t):
    if P.shape[0] == 1:
        return P[0].copy()
    # Slices are views; P is only read
    return (1 - t) * _recursive(P[:-1], t) + t * _recursive(P[1:], t)


def recursive(points, t):
    """
    Evaluate a Bézier curve by the recursive de Casteljau definition.

    B(P_0..P_n; t) = (1-t) B(P_0..P_{n-1}; t) + t B(P_1..P_n; t)

    The number of calls grows as 2^N; use de_casteljau() for high degrees.

    Args:
        points: Control points (N+1) x D, N+1 >= 1
        t: Curve parameter (not range-checked)

    Returns:
        np.ndarray: Point on the curve, shape (D,)

    Raises:
        InvalidArgumentError: If points is empty
    """
    return _recursive(as_control_points(points), t)


def de_casteljau(points, t):
    """
    Evaluate a Bézier curve with the iterative de Casteljau scheme, O(N^2).
    """
    W = as_control_points(points)
    for _ in range(W.shape[0] - 1):
        W = (1 - t) * W[:-1] + t * W[1:]
    return W[0].copy()
