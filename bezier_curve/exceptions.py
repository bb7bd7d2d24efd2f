"""
Exception and warning types raised by the evaluators.
"""


class BezierError(Exception):
    """Base class for all Bézier evaluation errors."""


class InvalidArgumentError(BezierError, ValueError):
    """Raised for empty control point sequences and out-of-domain integers."""


class MismatchedCoefficientsError(InvalidArgumentError):
    """Raised when a coefficient sequence does not match its control points."""


class BezierOverflowError(BezierError, OverflowError):
    """Raised when the curve degree exceeds MAX_DEGREE."""


class BezierPrecisionWarning(RuntimeWarning):
    """Emitted when the power-basis form is likely to be ill-conditioned."""
