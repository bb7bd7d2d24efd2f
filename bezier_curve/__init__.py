"""
Bézier Curve Evaluation

Pointwise evaluation of Bézier curves of any degree and of their
derivatives, from control points and a curve parameter t. Includes the
combinatorial helpers used by the Bernstein form and the power-basis
conversion used for fast repeated evaluation.

Example:
    >>> from bezier_curve import cubic, first_derivative
    >>> cubic((0, 0), (0, 1), (1, 1), (1, 0), 0.5)
    array([0.5 , 0.75])
    >>> first_derivative.cubic((0, 0), (0, 1), (1, 1), (1, 0), 0.5)
    array([1.5, 0. ])
"""

from .bezier import BezierCurve, linear, quadratic, cubic, general
from .de_casteljau import recursive, de_casteljau
from .polynomial import polynomial, polynomial_coefficients
from .combinatorics import combination, factorial, power
from .exceptions import (
    BezierError,
    InvalidArgumentError,
    MismatchedCoefficientsError,
    BezierOverflowError,
    BezierPrecisionWarning
)
from . import first_derivative, second_derivative, derivative
from . import constants

__all__ = [
    # Core class
    'BezierCurve',

    # Evaluators
    'linear',
    'quadratic',
    'cubic',
    'general',
    'recursive',
    'de_casteljau',
    'polynomial',
    'polynomial_coefficients',

    # Derivative namespaces
    'first_derivative',
    'second_derivative',
    'derivative',

    # Combinatorial helpers
    'combination',
    'factorial',
    'power',

    # Errors
    'BezierError',
    'InvalidArgumentError',
    'MismatchedCoefficientsError',
    'BezierOverflowError',
    'BezierPrecisionWarning',

    # Constants module
    'constants',
]

__version__ = "1.0.0"
