"""
Unit tests for the August-Roche-Magnus step.

Covers the JIT kernels in dewcalc.dewpoint._jit_equations and the
MagnusDewpointEquation class:
- Known values
- Vectorised vs scalar agreement
- Physical constraints
- Edge cases
"""

import math
import warnings

import numpy as np
import pytest
from numpy.testing import assert_allclose

from dewcalc.dewpoint import DewPointEquationName, MagnusDewpointEquation
from dewcalc.dewpoint._jit_equations import (
    _magnus_equation_scalar,
    _magnus_equation_vectorised,
)
from dewcalc.shared import ValidationMode

# Constants
MAGNUS_A = 17.271
MAGNUS_B = 237.7


# ==============================================================================
# Helper Functions
# ==============================================================================

def reference_magnus(temp_c, rh):
    """Plain Python Magnus inversion."""
    gamma = MAGNUS_A * temp_c / (MAGNUS_B + temp_c) + math.log(rh)
    return MAGNUS_B * gamma / (MAGNUS_A - gamma)


# ==============================================================================
# Test Class: Scalar Kernel
# ==============================================================================

class TestMagnusScalar:
    """Scalar JIT kernel."""

    @pytest.mark.parametrize("temp_c, rh, expected", [
        (20.0, 0.6, 11.99),
        (10.0, 0.6, 2.59),
        (25.0, 0.5, 13.85),
        (30.0, 0.8, 26.16),
    ])
    def test_known_values(self, temp_c, rh, expected):
        td = _magnus_equation_scalar(temp_c, rh, MAGNUS_A, MAGNUS_B)

        assert_allclose(td, expected, atol=0.02)

    def test_matches_python(self):
        td = _magnus_equation_scalar(20.0, 0.6, MAGNUS_A, MAGNUS_B)

        assert_allclose(td, reference_magnus(20.0, 0.6), rtol=1e-14)

    def test_saturation_returns_temperature(self):
        td = _magnus_equation_scalar(15.0, 1.0, MAGNUS_A, MAGNUS_B)

        assert_allclose(td, 15.0, rtol=1e-14)

    def test_zero_rh_does_not_raise(self):
        td = _magnus_equation_scalar(20.0, 0.0, MAGNUS_A, MAGNUS_B)

        assert np.isnan(td)

    def test_negative_rh_gives_nan(self):
        td = _magnus_equation_scalar(20.0, -0.5, MAGNUS_A, MAGNUS_B)

        assert np.isnan(td)

    def test_gamma_equal_to_a_gives_infinity(self):
        """At T=0 gamma = ln(RH); RH = exp(A) makes the denominator zero."""
        rh = math.exp(MAGNUS_A)

        td = _magnus_equation_scalar(0.0, rh, MAGNUS_A, MAGNUS_B)

        # ln(exp(A)) may land one ulp away from A
        assert np.isinf(td) or abs(td) > 1e10


# ==============================================================================
# Test Class: Vectorised Kernel
# ==============================================================================

class TestMagnusVectorised:
    """Vectorised JIT kernel."""

    def test_matches_scalar(self):
        temps = np.array([0.0, 10.0, 20.0, 30.0, 40.0, 50.0])
        rhs = np.array([0.3, 0.5, 0.6, 0.8, 0.9, 0.95])

        result_vec = _magnus_equation_vectorised(temps, rhs, MAGNUS_A, MAGNUS_B)

        result_scalar = np.array([
            _magnus_equation_scalar(t, r, MAGNUS_A, MAGNUS_B)
            for t, r in zip(temps, rhs)
        ])

        assert_allclose(result_vec, result_scalar, rtol=1e-12)

    def test_returns_float64_array(self):
        result = _magnus_equation_vectorised(
            np.array([20.0, 25.0]), np.array([0.5, 0.6]), MAGNUS_A, MAGNUS_B
        )

        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        assert result.shape == (2,)

    def test_preserves_order(self):
        temps = np.array([20.0, 20.0, 20.0])
        rhs = np.array([0.4, 0.6, 0.8])

        result = _magnus_equation_vectorised(temps, rhs, MAGNUS_A, MAGNUS_B)

        assert result[0] < result[1] < result[2]


# ==============================================================================
# Test Class: Equation Class
# ==============================================================================

class TestMagnusDewpointEquation:
    """MagnusDewpointEquation interface."""

    def test_name(self):
        assert MagnusDewpointEquation.name == DewPointEquationName.MAGNUS

    def test_default_validation(self):
        assert MagnusDewpointEquation().validation == ValidationMode.NONE

    def test_scalar(self):
        td = MagnusDewpointEquation().calculate(temp_c=20.0, rh=0.6)

        assert isinstance(td, float)
        assert_allclose(td, reference_magnus(20.0, 0.6), rtol=1e-14)

    def test_rh_broadcast(self):
        temps = np.array([10.0, 20.0, 30.0])

        td = MagnusDewpointEquation().calculate(temp_c=temps, rh=0.6)

        expected = [reference_magnus(t, 0.6) for t in temps]
        assert_allclose(td, expected, rtol=1e-12)

    def test_dewpoint_below_temperature(self):
        temps = np.linspace(1.0, 59.0, 30)
        rhs = np.linspace(0.05, 0.99, 30)

        td = MagnusDewpointEquation().calculate(temp_c=temps, rh=rhs)

        assert np.all(td < temps)

    def test_strict_rejects_zero_rh(self):
        with pytest.raises(ValueError, match="Relative humidity must be positive"):
            MagnusDewpointEquation(validation="strict").calculate(temp_c=20.0, rh=0.0)

    def test_warn_for_rh_above_one(self):
        with pytest.warns(UserWarning, match="Relative humidity outside valid range"):
            MagnusDewpointEquation(validation="warn").calculate(temp_c=20.0, rh=1.2)

    def test_no_warning_inside_envelope(self):
        equation = MagnusDewpointEquation(validation="warn")

        with warnings.catch_warnings():
            warnings.simplefilter("error", UserWarning)
            equation.calculate(temp_c=20.0, rh=0.6)
