"""
Core interface for calculating dewpoint.
"""

from typing import Dict, List, Union

import numpy.typing as npt

from dewcalc.dewpoint._dewpoint_equations import DewPointEquation
from dewcalc.dewpoint._enums import DewPointEquationName
from dewcalc.dewpoint._types import DEWPOINT_REGISTRY
from dewcalc.shared._enum_tools import parse_enum
from dewcalc.shared._shared_constants import (
    DEWPOINT_RANGE,
    RELATIVE_HUMIDITY_RANGE,
    TEMPERATURE_RANGE,
    ValidRange,
)
from dewcalc.shared._shared_enums import ValidationMode


class Dewpoint:
    """
    Unified interface for dew point calculations.

    Dew points are computed with the August-Roche-Magnus approximation,
    either from specific humidity, pressure and temperature (the full
    chain) or directly from temperature and relative humidity.

    Methods
    -------
    **Calculations:**
        get_dewpoint_from_specific_humidity(specific_humidity, pressure, temp_c, validation='none')
            Dew point from specific humidity (g/g), pressure (Pa) and temperature (°C)

        get_dewpoint_from_relative_humidity(temp_c, rh, validation='none')
            Dew point from temperature (°C) and relative humidity fraction

    **Utility:**
        get_equation(equation_name, validation='none')
            Equation instance by name
        get_equations_available()
            List of all available equation names
        get_validation_modes()
            List of accepted validation modes
        get_valid_ranges()
            Documented validity envelope

    Examples
    --------
    >>> td = Dewpoint.get_dewpoint_from_specific_humidity(
    ...     specific_humidity=0.01, pressure=101325.0, temp_c=20.0
    ... )
    >>> print(f"{td:.2f}°C")
    14.32°C

    >>> # Arrays of the same shape, or scalars mixed with arrays
    >>> import numpy as np
    >>> q = np.array([0.005, 0.010, 0.015])
    >>> np.round(Dewpoint.get_dewpoint_from_specific_humidity(q, 101325.0, 25.0), 1)
    array([ 3.6, 13.8, 20.2])

    >>> # Degenerate inputs propagate instead of raising
    >>> Dewpoint.get_dewpoint_from_specific_humidity(0.0, 101325.0, 20.0)
    nan

    >>> # Opt in to domain checks
    >>> Dewpoint.get_dewpoint_from_specific_humidity(0.01, 0.0, 20.0, validation='strict')
    ValueError: Pressure must be positive for specific_humidity equation. Got minimum 0.0

    See Also
    --------
    dewcalc.humidity : Humidity conversions used by the chain
    dewcalc.vapor : Saturation vapor pressure
    """

    @staticmethod
    def get_equations_available() -> List[str]:
        """
        Get list of all available dew point equation names.

        Returns
        -------
        list[str]
            List of equation names (lowercase strings)

        Examples
        --------
        >>> Dewpoint.get_equations_available()
        ['magnus', 'specific_humidity']
        """
        return [equation.value for equation in DewPointEquationName]

    @staticmethod
    def get_validation_modes() -> List[str]:
        """
        Get list of accepted values for the ``validation`` parameter.

        Examples
        --------
        >>> Dewpoint.get_validation_modes()
        ['none', 'warn', 'strict']
        """
        return [mode.value for mode in ValidationMode]

    @staticmethod
    def get_valid_ranges() -> Dict[str, ValidRange]:
        """
        Get the documented validity envelope of the approximation.

        Inside these ranges the approximation is accurate. Outside them
        results are still computed but not guaranteed to be meaningful.

        Returns
        -------
        dict[str, ValidRange]
            'temp_c' in °C, 'relative_humidity' as a fraction and
            'dewpoint_c' in °C.

        Examples
        --------
        >>> Dewpoint.get_valid_ranges()['temp_c']
        ValidRange(min=0.0, max=60.0)
        """
        return {
            "temp_c": TEMPERATURE_RANGE,
            "relative_humidity": RELATIVE_HUMIDITY_RANGE,
            "dewpoint_c": DEWPOINT_RANGE,
        }

    @staticmethod
    def get_equation(
        equation_name: Union[str, DewPointEquationName],
        validation: Union[str, ValidationMode] = ValidationMode.NONE,
    ) -> DewPointEquation:
        """
        Get a dew point equation instance by name.

        Parameters
        ----------
        equation_name : str or DewPointEquationName
            'magnus' or 'specific_humidity'
        validation : str or ValidationMode, default 'none'
            Domain checking mode of the returned equation

        Returns
        -------
        DewPointEquation
            Equation instance with a ``calculate`` method

        Raises
        ------
        ValueError
            If the name is not a known equation.
        """
        equation_name = parse_enum(value=equation_name, enum_class=DewPointEquationName)
        equation_class = DEWPOINT_REGISTRY[equation_name]

        return equation_class(validation=validation)

    @staticmethod
    def get_dewpoint_from_specific_humidity(
        specific_humidity: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
        temp_c: Union[float, npt.ArrayLike],
        validation: Union[str, ValidationMode] = ValidationMode.NONE,
    ) -> Union[float, npt.NDArray]:
        """
        Calculate dew point from specific humidity, pressure and temperature.

        Valid for 0 °C < T < 60 °C, 1 % < RH < 100 % and 0 °C < Td < 50 °C.

        Parameters
        ----------
        specific_humidity : float or array
            Specific humidity in g H2O / g air
        pressure : float or array
            Air pressure in Pa
        temp_c : float or array
            Air temperature in °C
        validation : str or ValidationMode, default 'none'
            - 'none': no checks, degenerate inputs give nan or inf
            - 'warn': UserWarning for non-physical or out-of-envelope inputs
            - 'strict': ValueError for non-positive humidity or pressure

        Returns
        -------
        float or ndarray
            Dew point temperature(s) in °C
            - Returns float if inputs are scalar
            - Returns ndarray with the input shape if any input is an array

        Raises
        ------
        ValueError
            If array inputs have different shapes, or in 'strict' mode when
            humidity or pressure is not positive.

        Examples
        --------
        >>> Dewpoint.get_dewpoint_from_specific_humidity(0.01, 101325.0, 20.0)
        14.31...

        >>> import numpy as np
        >>> q = np.array([[0.005, 0.01], [0.012, 0.015]])
        >>> Dewpoint.get_dewpoint_from_specific_humidity(q, 101325.0, 25.0).shape
        (2, 2)
        """
        equation_class = DEWPOINT_REGISTRY[DewPointEquationName.SPECIFIC_HUMIDITY]
        equation = equation_class(validation=validation, wrapper_depth=1)

        return equation.calculate(
            specific_humidity=specific_humidity, pressure=pressure, temp_c=temp_c
        )

    @staticmethod
    def get_dewpoint_from_relative_humidity(
        temp_c: Union[float, npt.ArrayLike],
        rh: Union[float, npt.ArrayLike],
        validation: Union[str, ValidationMode] = ValidationMode.NONE,
    ) -> Union[float, npt.NDArray]:
        """
        Calculate dew point from temperature and relative humidity.

        Applies the Magnus step of the chain on its own.

        Parameters
        ----------
        temp_c : float or array
            Air temperature(s) in °C
        rh : float or array
            Relative humidity(ies) as fraction (0-1, not percentage)
        validation : str or ValidationMode, default 'none'
            Domain checking mode

        Returns
        -------
        float or ndarray
            Dew point temperature(s) in °C

        Examples
        --------
        >>> Dewpoint.get_dewpoint_from_relative_humidity(temp_c=20.0, rh=0.6)
        11.99...
        """
        equation_class = DEWPOINT_REGISTRY[DewPointEquationName.MAGNUS]
        equation = equation_class(validation=validation, wrapper_depth=1)

        return equation.calculate(temp_c=temp_c, rh=rh)
