"""
Classes for humidity conversions. It implements:
- Mole fraction
- Partial pressure
- Relative humidity
"""

from typing import Tuple, Union

import numpy.typing as npt

from dewcalc.humidity._enums import HumidityEquationName
from dewcalc.humidity._humidity_constants import MOLAR_MASS
from dewcalc.humidity._jit_equations import (
    _mole_fraction_scalar,
    _mole_fraction_vectorised,
    _partial_pressure_scalar,
    _partial_pressure_vectorised,
    _relative_humidity_scalar,
    _relative_humidity_vectorised,
)
from dewcalc.shared._equation_base import ElementwiseEquation
from dewcalc.shared._shared_constants import RELATIVE_HUMIDITY_RANGE, TEMPERATURE_RANGE
from dewcalc.shared._shared_enums import ValidationMode
from dewcalc.vapor._vapor_constants import CLAUSIUS_CLAPEYRON_WATER


class MoleFractionEquation(ElementwiseEquation):
    """
    Mole-fraction-equivalent ratio from specific humidity.

    x = q · (M_air / M_water), with M_air = 28.97 g/mol and M_water = 18.015 g/mol.
    """

    name: HumidityEquationName = HumidityEquationName.MOLE_FRACTION
    input_names: Tuple[str, ...] = ("specific_humidity",)

    def calculate(
        self, specific_humidity: Union[float, npt.ArrayLike]
    ) -> Union[float, npt.NDArray]:
        (specific_humidity,) = self._validate_input(specific_humidity)

        self._check_positive(specific_humidity, label="Specific humidity")

        return self._dispatch_scalar_or_vector(
            inputs=(specific_humidity,),
            scalar_func=_mole_fraction_scalar,
            vector_func=_mole_fraction_vectorised,
            equation_constants=(MOLAR_MASS,),
        )


class PartialPressureEquation(ElementwiseEquation):
    """
    Water vapor partial pressure in Pa.

    e = x · p, where x is the mole fraction from MoleFractionEquation.
    """

    name: HumidityEquationName = HumidityEquationName.PARTIAL_PRESSURE
    input_names: Tuple[str, ...] = ("specific_humidity", "pressure")

    def calculate(
        self,
        specific_humidity: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        specific_humidity, pressure = self._validate_input(specific_humidity, pressure)

        self._check_positive(specific_humidity, label="Specific humidity")
        self._check_positive(pressure, label="Pressure")

        return self._dispatch_scalar_or_vector(
            inputs=(specific_humidity, pressure),
            scalar_func=_partial_pressure_scalar,
            vector_func=_partial_pressure_vectorised,
            equation_constants=(MOLAR_MASS,),
        )


class RelativeHumidityEquation(ElementwiseEquation):
    """
    Relative humidity from specific humidity, pressure and temperature.

    Returns the ratio of partial pressure to the simplified
    Clausius-Clapeyron saturation pressure as a fraction. It is not
    multiplied by 100.

    Parameters
    ----------
    validation : str or ValidationMode, default 'none'
        'warn' warns for non-positive humidity or pressure, for temperature
        outside 0-60 °C and for results outside 1-100 %. 'strict' raises
        ValueError for non-positive humidity or pressure and warns for the
        ranges.

    Examples
    --------
    >>> RelativeHumidityEquation().calculate(0.01, 101325.0, 20.0)
    0.6982...
    """

    name: HumidityEquationName = HumidityEquationName.RELATIVE_HUMIDITY
    input_names: Tuple[str, ...] = ("specific_humidity", "pressure", "temp_c")

    def calculate(
        self,
        specific_humidity: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
        temp_c: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        specific_humidity, pressure, temp_c = self._validate_input(
            specific_humidity, pressure, temp_c
        )

        self._check_positive(specific_humidity, label="Specific humidity")
        self._check_positive(pressure, label="Pressure")

        if self.validation != ValidationMode.NONE:
            self._check_bounds(temp_c, TEMPERATURE_RANGE, label="Temperature", unit="°C")

        rh = self._dispatch_scalar_or_vector(
            inputs=(specific_humidity, pressure, temp_c),
            scalar_func=_relative_humidity_scalar,
            vector_func=_relative_humidity_vectorised,
            equation_constants=(MOLAR_MASS, CLAUSIUS_CLAPEYRON_WATER),
        )

        if self.validation != ValidationMode.NONE:
            self._check_bounds(rh, RELATIVE_HUMIDITY_RANGE, label="Relative humidity")

        return rh
