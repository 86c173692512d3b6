"""
Classes for calculating the dewpoints. It implements:
- Magnus (temperature and relative humidity)
- Specific humidity chain (specific humidity, pressure and temperature)
"""

from abc import abstractmethod
from typing import Tuple, Union

import numpy.typing as npt

from dewcalc.dewpoint._dewpoint_constants import MAGNUS_WATER
from dewcalc.dewpoint._enums import DewPointEquationName
from dewcalc.dewpoint._jit_equations import (
    _magnus_equation_scalar,
    _magnus_equation_vectorised,
    _specific_humidity_dewpoint_scalar,
    _specific_humidity_dewpoint_vectorised,
)
from dewcalc.humidity._humidity_constants import MOLAR_MASS
from dewcalc.humidity._jit_equations import (
    _relative_humidity_scalar,
    _relative_humidity_vectorised,
)
from dewcalc.shared._equation_base import ElementwiseEquation
from dewcalc.shared._shared_constants import (
    DEWPOINT_RANGE,
    RELATIVE_HUMIDITY_RANGE,
    TEMPERATURE_RANGE,
)
from dewcalc.shared._shared_enums import ValidationMode
from dewcalc.vapor._vapor_constants import CLAUSIUS_CLAPEYRON_WATER


class DewPointEquation(ElementwiseEquation):
    """
    Abstract base class for dew point calculation methods.

    Attributes
    ----------
    name : DewPointEquationName
        Identifier for the specific equation (must be set by subclass)
    validation : ValidationMode
        Domain checking mode
    temp_bounds : tuple[float, float]
        Valid temperature range (min, max) in °C for this equation

    Methods
    -------
    calculate(*inputs)
        Calculate dew point temperature (abstract, must implement)
    get_temp_bounds()
        Return the valid temperature range
    _check_envelope(temp_c, rh, dewpoint)
        Warn when inputs or result leave the documented envelope

    See Also
    --------
    MagnusDewpointEquation : Magnus inversion from relative humidity
    SpecificHumidityDewpointEquation : Full chain from specific humidity
    Dewpoint : High-level unified interface
    """

    name: DewPointEquationName
    temp_bounds: Tuple[float, float]

    def __init__(
        self,
        validation: Union[str, ValidationMode] = ValidationMode.NONE,
        wrapper_depth: int = 0,
    ):
        super().__init__(validation=validation, wrapper_depth=wrapper_depth)
        self._update_temp_bounds()

    def get_temp_bounds(self) -> Tuple[float, float]:
        """
        Returns the (min, max) air temperature range in °C the Magnus
        approximation is documented for.
        """
        return self.temp_bounds

    def _update_temp_bounds(self) -> None:
        """
        Sets the temperature bounds of the equation
        """
        self.temp_bounds = tuple(TEMPERATURE_RANGE)

    def _check_envelope(
        self,
        temp_c: npt.NDArray,
        rh: Union[float, npt.NDArray],
        dewpoint: Union[float, npt.NDArray],
    ) -> None:
        """
        Warn when temperature, relative humidity or dew point leave the
        range the Magnus approximation is documented for.

        Only called when ``validation`` is not NONE.
        """
        self._check_bounds(
            temp_c, self.temp_bounds, label="Temperature", unit="°C", stacklevel=4
        )
        self._check_bounds(
            rh, RELATIVE_HUMIDITY_RANGE, label="Relative humidity", stacklevel=4
        )
        self._check_bounds(
            dewpoint, DEWPOINT_RANGE, label="Dew point", unit="°C", stacklevel=4
        )

    @abstractmethod
    def calculate(
        self, *inputs: Union[float, npt.ArrayLike]
    ) -> Union[float, npt.NDArray]:
        """
        Calculate dew point temperature in °C.

        Returns
        -------
        float or ndarray
            Python float if inputs are scalar, ndarray with the input
            shape otherwise.

        Raises
        ------
        ValueError
            If array shapes differ, or in STRICT mode when a physical
            quantity is not positive.

        Warns
        -----
        UserWarning
            In WARN or STRICT mode when the documented envelope is left.
        """
        pass


class MagnusDewpointEquation(DewPointEquation):
    """
    Dew point from temperature and relative humidity.

    gamma = A·T / (B + T) + ln(RH)
    Td    = B·gamma / (A - gamma)

    with A = 17.271 and B = 237.7 °C. RH is a fraction, not a percentage.

    Parameters
    ----------
    validation : str or ValidationMode, default 'none'
        Domain checking mode

    Examples
    --------
    >>> magnus = MagnusDewpointEquation()
    >>> magnus.calculate(temp_c=20.0, rh=0.6)
    11.99...
    >>> import numpy as np
    >>> magnus.calculate(temp_c=np.array([10.0, 20.0]), rh=0.6)
    array([ 2.59...,  11.99...])
    """

    name: DewPointEquationName = DewPointEquationName.MAGNUS
    input_names: Tuple[str, ...] = ("temp_c", "rh")

    def calculate(
        self, temp_c: Union[float, npt.ArrayLike], rh: Union[float, npt.ArrayLike]
    ) -> Union[float, npt.NDArray]:
        temp_c, rh = self._validate_input(temp_c, rh)

        self._check_positive(rh, label="Relative humidity")

        dewpoint = self._dispatch_scalar_or_vector(
            inputs=(temp_c, rh),
            scalar_func=_magnus_equation_scalar,
            vector_func=_magnus_equation_vectorised,
            equation_constants=(MAGNUS_WATER,),
        )

        if self.validation != ValidationMode.NONE:
            self._check_envelope(temp_c, rh, dewpoint)

        return dewpoint


class SpecificHumidityDewpointEquation(DewPointEquation):
    """
    Dew point from specific humidity, pressure and temperature.

    The chain is evaluated per element in one compiled kernel:

    1. x  = q · (28.97 / 18.015)
    2. e  = x · p
    3. es = 611 · exp(0.067 · T)
    4. RH = e / es                      (fraction, no x100)
    5. gamma = 17.271·T / (237.7 + T) + ln(RH)
    6. Td = 237.7·gamma / (17.271 - gamma)

    Out-of-domain inputs are not trapped in the default mode: zero humidity
    gives ln(0) = -inf and a nan dew point, negative humidity gives nan.

    Parameters
    ----------
    validation : str or ValidationMode, default 'none'
        Domain checking mode:
        - 'none': reference behaviour, no checks
        - 'warn': UserWarning for non-positive humidity/pressure and for
          temperature, RH or dew point outside the documented envelope
        - 'strict': ValueError for non-positive humidity/pressure, warnings
          for the envelope

    Examples
    --------
    >>> equation = SpecificHumidityDewpointEquation()
    >>> equation.calculate(specific_humidity=0.01, pressure=101325.0, temp_c=20.0)
    14.31...

    >>> import numpy as np
    >>> equation.calculate(
    ...     specific_humidity=np.array([0.005, 0.01]),
    ...     pressure=101325.0,
    ...     temp_c=20.0,
    ... )
    array([ 4.03...,  14.31...])
    """

    name: DewPointEquationName = DewPointEquationName.SPECIFIC_HUMIDITY
    input_names: Tuple[str, ...] = ("specific_humidity", "pressure", "temp_c")

    def calculate(
        self,
        specific_humidity: Union[float, npt.ArrayLike],
        pressure: Union[float, npt.ArrayLike],
        temp_c: Union[float, npt.ArrayLike],
    ) -> Union[float, npt.NDArray]:
        inputs = self._validate_input(specific_humidity, pressure, temp_c)
        specific_humidity, pressure, temp_c = inputs

        self._check_positive(specific_humidity, label="Specific humidity")
        self._check_positive(pressure, label="Pressure")

        dewpoint = self._dispatch_scalar_or_vector(
            inputs=inputs,
            scalar_func=_specific_humidity_dewpoint_scalar,
            vector_func=_specific_humidity_dewpoint_vectorised,
            equation_constants=(MOLAR_MASS, CLAUSIUS_CLAPEYRON_WATER, MAGNUS_WATER),
        )

        if self.validation != ValidationMode.NONE:
            rh = self._dispatch_scalar_or_vector(
                inputs=inputs,
                scalar_func=_relative_humidity_scalar,
                vector_func=_relative_humidity_vectorised,
                equation_constants=(MOLAR_MASS, CLAUSIUS_CLAPEYRON_WATER),
            )
            self._check_envelope(temp_c, rh, dewpoint)

        return dewpoint
