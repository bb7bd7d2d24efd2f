"""Tests for the BezierCurve class."""

import warnings

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from bezier_curve import (
    BezierCurve,
    BezierPrecisionWarning,
    InvalidArgumentError,
    constants,
    general,
    polynomial_coefficients,
)


class TestBezierCurve:

    def test_attributes(self, cubic_points):
        curve = BezierCurve(cubic_points)
        assert curve.get_degree() == 3
        assert curve.get_dimension() == 2
        assert_array_equal(curve.get_control_points(), cubic_points)

    def test_control_points_copied(self, cubic_points):
        curve = BezierCurve(cubic_points)
        cubic_points[0] = [9.0, 9.0]
        assert_array_equal(curve.get_control_points()[0], [0.0, 0.0])

    def test_coefficients_precomputed(self, cubic_points):
        curve = BezierCurve(cubic_points)
        assert_allclose(curve.coefficients, polynomial_coefficients(cubic_points))
        curve.coefficients[0] = 100.0
        assert_allclose(curve.coefficients, polynomial_coefficients(cubic_points))

    def test_evaluate_scalar(self, cubic_points):
        result = BezierCurve(cubic_points).evaluate(0.5)
        assert result.shape == (2,)
        assert_allclose(result, [0.5, 0.75])

    def test_evaluate_array(self, high_degree_points):
        curve = BezierCurve(high_degree_points)
        t = np.linspace(-0.25, 1.25, 13)
        result = curve.evaluate(t)
        assert result.shape == (13, 2)
        for k, tk in enumerate(t):
            assert_allclose(result[k], general(high_degree_points, tk), atol=1e-9)

    def test_derivative_order_zero_is_evaluate(self, cubic_points):
        curve = BezierCurve(cubic_points)
        assert_array_equal(curve.derivative(0.3, order=0), curve.evaluate(0.3))

    def test_derivative_above_degree_is_zero(self, cubic_points):
        curve = BezierCurve(cubic_points)
        assert_array_equal(curve.derivative(0.3, order=4), np.zeros(2))
        assert curve.derivative(np.array([0.1, 0.2]), order=5).shape == (2, 2)

    def test_negative_derivative_order_is_zero(self, cubic_points):
        assert_array_equal(BezierCurve(cubic_points).derivative(0.3, order=-1), np.zeros(2))

    def test_evaluate_basis_partition_of_unity(self, high_degree_points):
        basis = BezierCurve(high_degree_points).evaluate_basis(np.linspace(0.0, 1.0, 7))
        assert basis.shape == (7, 9)
        assert_allclose(basis.sum(axis=1), np.ones(7))

    def test_elevate_degree_preserves_shape(self, cubic_points):
        curve = BezierCurve(cubic_points)
        elevated = curve.elevate_degree_by(2)
        assert elevated.get_degree() == 5
        t = np.linspace(0.0, 1.0, 9)
        assert_allclose(elevated.evaluate(t), curve.evaluate(t), atol=1e-12)

    def test_elevate_negative_steps_raises(self, cubic_points):
        with pytest.raises(InvalidArgumentError):
            BezierCurve(cubic_points).elevate_degree_by(-1)

    def test_scalar_control_points(self):
        curve = BezierCurve([0.0, 1.0, 0.0])
        assert curve.get_dimension() == 1
        assert_allclose(curve.evaluate(0.5), [0.5])

    def test_empty_raises(self):
        with pytest.raises(InvalidArgumentError):
            BezierCurve([])

    def test_bad_shape_raises(self):
        with pytest.raises(InvalidArgumentError):
            BezierCurve(np.zeros((2, 2, 2)))

    def test_high_degree_warns(self):
        with pytest.warns(BezierPrecisionWarning):
            BezierCurve(np.zeros((constants.HIGH_DEGREE_WARNING + 2, 2)))

    def test_low_degree_silent(self, cubic_points):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            BezierCurve(cubic_points)

    def test_repr(self, cubic_points):
        assert repr(BezierCurve(cubic_points)) == "BezierCurve(degree=3, dimension=2, control_points=(4, 2))"
