#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Bézier curve evaluation examples

Run:
    python examples/basic_usage.py
"""

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from bezier_curve import (
    BezierCurve,
    cubic,
    derivative,
    first_derivative,
    general,
    polynomial,
    polynomial_coefficients,
    recursive,
)
from bezier_curve.utils import format_point


def evaluator_comparison_example():
    """Evaluate one cubic with every evaluator and print the results."""
    print("=== Evaluator comparison ===")

    control_points = np.array([
        [0, 0],    # P0 (start)
        [0, 1],    # P1
        [1, 1],    # P2
        [1, 0]     # P3 (end)
    ], dtype=float)
    coefficients = polynomial_coefficients(control_points)

    for t in (0.0, 0.25, 0.5, 0.75, 1.0):
        print(f"t={t:.2f}  cubic={format_point(cubic(*control_points, t))}"
              f"  general={format_point(general(control_points, t))}"
              f"  recursive={format_point(recursive(control_points, t))}"
              f"  polynomial={format_point(polynomial(control_points, t, coefficients))}")

    print(f"tangent at t=0.5: {format_point(first_derivative.cubic(*control_points, 0.5))}")
    print(f"order 0 fallback: {format_point(derivative.cubic(*control_points, 0.5, 0))}")


def derivative_example():
    """Plot a quartic curve and its first and second derivatives."""
    print("\n=== Derivative example ===")

    control_points = np.array([
        [0, 0],
        [1, 2],
        [3, 2],
        [4, 0],
        [5, 2]
    ], dtype=float)

    curve = BezierCurve(control_points)
    print(curve)
    t = np.linspace(0, 1, 100)

    original = curve.evaluate(t)
    first_deriv = curve.derivative(t, order=1)
    second_deriv = curve.derivative(t, order=2)

    fig = make_subplots(
        rows=1, cols=3,
        subplot_titles=('Curve (x-y)', 'First derivative', 'Second derivative')
    )

    fig.add_trace(go.Scatter(
        x=original[:, 0], y=original[:, 1],
        mode='lines', name='curve',
        line=dict(color='blue', width=3)
    ), row=1, col=1)

    fig.add_trace(go.Scatter(
        x=control_points[:, 0], y=control_points[:, 1],
        mode='markers+lines', name='control points',
        line=dict(color='red', dash='dash'),
        marker=dict(color='red', size=8)
    ), row=1, col=1)

    for deriv, col in ((first_deriv, 2), (second_deriv, 3)):
        fig.add_trace(go.Scatter(x=t, y=deriv[:, 0], mode='lines', name=f'd{col - 1}x/dt',
                                 line=dict(color='green', width=2)), row=1, col=col)
        fig.add_trace(go.Scatter(x=t, y=deriv[:, 1], mode='lines', name=f'd{col - 1}y/dt',
                                 line=dict(color='orange', width=2)), row=1, col=col)

    fig.update_layout(title="Quartic Bézier curve and derivatives", width=1200, height=450)
    fig.show()


if __name__ == "__main__":
    evaluator_comparison_example()
    derivative_example()
