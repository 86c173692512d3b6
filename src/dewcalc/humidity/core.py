"""
Core interface for humidity conversions.
"""

from typing import Union

import numpy.typing as npt

from dewcalc.humidity._humidity_equations import (
    MoleFractionEquation,
    PartialPressureEquation,
    RelativeHumidityEquation,
)
from dewcalc.shared._shared_enums import ValidationMode


class Humidity:
    """
    Conversions from specific humidity to vapor quantities.

    Each method is one step of the chain used by the dewpoint calculation,
    so the values returned here are identical to the ones used internally.

    Methods
    -------
    get_mole_fraction(specific_humidity)
        q · (28.97 / 18.015)
    get_partial_pressure(specific_humidity, pressure)
        Water vapor partial pressure in Pa
    get_relative_humidity(specific_humidity, pressure, temp_c)
        Partial pressure over saturation vapor pressure (fraction)

    Examples
    --------
    >>> Humidity.get_partial_pressure(0.01, 101325.0)
    1629.41...
    >>> Humidity.get_relative_humidity(0.01, 101325.0, 20.0)
    0.6982...
    """

    @staticmethod
    def get_mole_fraction(
        specific_humidity: Union[float, npt.ArrayLike],
        validation: Union[str, ValidationMode] = ValidationMode.NONE,
    ) -> Union[float, npt.NDArray]:
        """
        Convert specific humidity (g/g) to a mole-fraction-equivalent ratio.

        Parameters
        ----------
        specific_humidity : float or array
            Specific humidity in g/g
        validation : str or ValidationMode, default 'none'
            Domain checking mode ('none', 'warn' or 'strict')

        Returns
        -------
        float or ndarray
            Mole fraction (dimensionless)
        """
        return MoleFractionEquation(validation=validation, wrapper_depth=1).calculate(
            specific_humidity=specific_humidity
        )

    @staticmethod
    def get_partial_pressure(
        specific_humidity: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
        validation: Union[str, ValidationMode] = ValidationMode.NONE,
    ) -> Union[float, npt.NDArray]:
        """
        Calculate water vapor partial pressure.

        Parameters
        ----------
        specific_humidity : float or array
            Specific humidity in g/g
        pressure : float or array
            Air pressure in Pa
        validation : str or ValidationMode, default 'none'
            Domain checking mode ('none', 'warn' or 'strict')

        Returns
        -------
        float or ndarray
            Partial pressure in Pa

        Raises
        ------
        ValueError
            If array shapes differ, or in 'strict' mode when humidity or
            pressure is not positive.
        """
        return PartialPressureEquation(validation=validation, wrapper_depth=1).calculate(
            specific_humidity=specific_humidity, pressure=pressure
        )

    @staticmethod
    def get_relative_humidity(
        specific_humidity: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
        temp_c: Union[float, npt.ArrayLike],
        validation: Union[str, ValidationMode] = ValidationMode.NONE,
    ) -> Union[float, npt.NDArray]:
        """
        Calculate relative humidity as a fraction (0-1, not percentage).

        Parameters
        ----------
        specific_humidity : float or array
            Specific humidity in g/g
        pressure : float or array
            Air pressure in Pa
        temp_c : float or array
            Air temperature in °C
        validation : str or ValidationMode, default 'none'
            Domain checking mode ('none', 'warn' or 'strict')

        Returns
        -------
        float or ndarray
            Relative humidity fraction. Zero humidity gives exactly 0.0.

        Raises
        ------
        ValueError
            If array shapes differ, or in 'strict' mode when humidity or
            pressure is not positive.

        Warns
        -----
        UserWarning
            In 'warn' or 'strict' mode when temperature or the result is
            outside the documented range.
        """
        return RelativeHumidityEquation(validation=validation, wrapper_depth=1).calculate(
            specific_humidity=specific_humidity, pressure=pressure, temp_c=temp_c
        )
