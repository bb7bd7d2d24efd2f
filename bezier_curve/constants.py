"""
Numeric limits for Bézier curve evaluation.
"""

# Largest n for which float(n!) is finite (171! overflows a double)
MAX_DEGREE = 170

# Power-basis coefficients lose precision quickly beyond this degree
HIGH_DEGREE_WARNING = 20
