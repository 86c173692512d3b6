"""
Unit tests for humidity conversions.

Tests mole fraction, partial pressure and relative humidity against the
plain formula, plus the degenerate and validation behaviour.
"""

import inspect
import math

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from dewcalc.humidity import (
    Humidity,
    HumidityEquationName,
    MoleFractionEquation,
    PartialPressureEquation,
    RelativeHumidityEquation,
)
from dewcalc.humidity._jit_equations import (
    _relative_humidity_scalar,
    _relative_humidity_vectorised,
)
from dewcalc.shared import ValidationMode
from dewcalc.vapor import Vapor

STANDARD_PRESSURE = 101325.0
MOLAR_MASS_RATIO = 28.97 / 18.015


# ==============================================================================
# Test Class: Mole Fraction
# ==============================================================================

class TestMoleFraction:

    def test_scalar(self):
        assert Humidity.get_mole_fraction(0.01) == 0.01 * MOLAR_MASS_RATIO

    def test_zero(self):
        assert Humidity.get_mole_fraction(0.0) == 0.0

    def test_array(self):
        q = np.array([0.001, 0.01, 0.02])

        assert_array_equal(Humidity.get_mole_fraction(q), q * MOLAR_MASS_RATIO)

    def test_strict_rejects_negative(self):
        with pytest.raises(ValueError, match="Specific humidity must be positive"):
            Humidity.get_mole_fraction(-0.01, validation="strict")

    def test_equation_name(self):
        assert MoleFractionEquation.name == HumidityEquationName.MOLE_FRACTION


# ==============================================================================
# Test Class: Partial Pressure
# ==============================================================================

class TestPartialPressure:

    def test_scalar(self):
        pp = Humidity.get_partial_pressure(0.01, STANDARD_PRESSURE)

        assert pp == (0.01 * MOLAR_MASS_RATIO) * STANDARD_PRESSURE
        assert_allclose(pp, 1629.41, atol=0.01)

    def test_pressure_array(self):
        p = np.array([80000.0, 90000.0, 100000.0])

        pp = Humidity.get_partial_pressure(0.01, p)

        assert_array_equal(pp, (0.01 * MOLAR_MASS_RATIO) * p)

    def test_proportional_to_pressure(self):
        pp_low = Humidity.get_partial_pressure(0.01, 50000.0)
        pp_high = Humidity.get_partial_pressure(0.01, 100000.0)

        assert_allclose(pp_high, 2 * pp_low, rtol=1e-15)

    def test_strict_rejects_zero_pressure(self):
        with pytest.raises(ValueError, match="Pressure must be positive"):
            PartialPressureEquation(validation="strict").calculate(0.01, 0.0)

    def test_warn_for_negative_pressure(self):
        with pytest.warns(UserWarning, match="Pressure must be positive"):
            Humidity.get_partial_pressure(0.01, -5.0, validation="warn")

    def test_warning_points_at_caller(self):
        with pytest.warns(UserWarning, match="Pressure must be positive") as record:
            Humidity.get_partial_pressure(0.01, -5.0, validation="warn")

        user_warnings = [w for w in record if w.category is UserWarning]

        assert all(w.filename == __file__ for w in user_warnings)


# ==============================================================================
# Test Class: Interface Defaults
# ==============================================================================

class TestInterfaceDefaults:

    @pytest.mark.parametrize("method", [
        Humidity.get_mole_fraction,
        Humidity.get_partial_pressure,
        Humidity.get_relative_humidity,
    ])
    def test_validation_defaults_to_none_mode(self, method):
        default = inspect.signature(method).parameters["validation"].default

        assert default is ValidationMode.NONE


# ==============================================================================
# Test Class: Relative Humidity
# ==============================================================================

class TestRelativeHumidity:

    def test_golden_value(self):
        rh = Humidity.get_relative_humidity(0.01, STANDARD_PRESSURE, 20.0)

        assert_allclose(rh, 0.6983, atol=1e-3)

    def test_matches_python(self):
        rh = Humidity.get_relative_humidity(0.01, STANDARD_PRESSURE, 20.0)

        expected = (0.01 * (28.97 / 18.015)) * STANDARD_PRESSURE / (611 * math.exp(0.067 * 20.0))
        assert_allclose(rh, expected, rtol=1e-14)

    def test_is_partial_over_saturation(self):
        q = np.array([0.004, 0.008, 0.012])
        t = np.array([10.0, 20.0, 30.0])

        rh = Humidity.get_relative_humidity(q, STANDARD_PRESSURE, t)

        expected = (
            Humidity.get_partial_pressure(q, STANDARD_PRESSURE)
            / Vapor.get_saturation_vapor_pressure(t)
        )
        assert_allclose(rh, expected, rtol=1e-14)

    def test_is_fraction_not_percentage(self):
        q = np.linspace(0.001, 0.01, 10)

        rh = Humidity.get_relative_humidity(q, STANDARD_PRESSURE, 25.0)

        assert np.all(rh < 1.0)

    def test_zero_humidity_is_exactly_zero(self):
        assert Humidity.get_relative_humidity(0.0, STANDARD_PRESSURE, 20.0) == 0.0

    def test_vectorised_matches_scalar(self):
        q = np.array([0.002, 0.01, 0.02])
        p = np.array([90000.0, 101325.0, 100000.0])
        t = np.array([5.0, 20.0, 35.0])
        constants = (28.97, 18.015, 611.0, 0.067)

        result = _relative_humidity_vectorised(q, p, t, *constants)

        expected = [
            _relative_humidity_scalar(qi, pi, ti, *constants)
            for qi, pi, ti in zip(q, p, t)
        ]
        assert_allclose(result, expected, rtol=1e-14)

    def test_warn_for_temperature(self):
        with pytest.warns(UserWarning, match="Temperature outside valid range"):
            RelativeHumidityEquation(validation="warn").calculate(
                0.01, STANDARD_PRESSURE, -5.0
            )

    def test_warn_for_supersaturation(self):
        with pytest.warns(UserWarning, match="Relative humidity outside valid range"):
            Humidity.get_relative_humidity(0.05, STANDARD_PRESSURE, 10.0, validation="warn")
