"""
An equation interface for using the jit and constants.

Implements:
- Simplified Clausius-Clapeyron
"""

from abc import abstractmethod
from typing import Tuple, Union

import numpy.typing as npt

from dewcalc.shared._equation_base import ElementwiseEquation
from dewcalc.shared._shared_constants import TEMPERATURE_RANGE
from dewcalc.shared._shared_enums import ValidationMode
from dewcalc.vapor._enums import VaporEquationName
from dewcalc.vapor._jit_equations import (
    _clausius_clapeyron_scalar,
    _clausius_clapeyron_vectorised,
)
from dewcalc.vapor._vapor_constants import CLAUSIUS_CLAPEYRON_WATER


class VaporEquation(ElementwiseEquation):
    """
    Abstract Base class for saturation vapor pressure equations.

    Attributes:
        - temp_bounds (Tuple[float, float]) = Temperature range (min, max) in °C for the equation
        - validation (ValidationMode) = Warn when temperatures fall outside temp_bounds unless NONE
        - wrapper_depth (int) = Facade frames between user code and calculate, for warning stacklevels
        - name (VaporEquationName) = Class variable for identifying the equation name.
    """
    temp_bounds: Tuple[float, float]
    name: VaporEquationName
    input_names: Tuple[str, ...] = ("temp_c",)

    def __init__(
        self,
        validation: Union[str, ValidationMode] = ValidationMode.NONE,
        wrapper_depth: int = 0,
    ):
        super().__init__(validation=validation, wrapper_depth=wrapper_depth)
        self._update_temp_bounds()

    def get_temp_bounds(self) -> Tuple[float, float]:
        """
        Returns the (min, max) temperature range in °C the equation is valid for.
        """
        return self.temp_bounds

    @abstractmethod
    def _update_temp_bounds(self) -> None:
        """
        Sets the temperature bounds of the equation
        """
        pass


class ClausiusClapeyronEquation(VaporEquation):
    """
    Calculates saturation vapor pressure using the simplified Clausius-Clapeyron relation.

    es = 611 · exp(0.067 · T), with T in °C and es in Pa.

    Notes:
        - Only over water. The exponential fit is tuned for 0 to 60 °C.
    """
    name: VaporEquationName = VaporEquationName.CLAUSIUS_CLAPEYRON

    def _update_temp_bounds(self) -> None:
        self.temp_bounds = tuple(TEMPERATURE_RANGE)

    def calculate(self, temp_c: Union[npt.ArrayLike, float]) -> Union[npt.NDArray, float]:
        (temp_c,) = self._validate_input(temp_c)

        if self.validation != ValidationMode.NONE:
            self._check_bounds(temp_c, self.temp_bounds, label="Temperature", unit="°C")

        return self._dispatch_scalar_or_vector(
            inputs=(temp_c,),
            scalar_func=_clausius_clapeyron_scalar,
            vector_func=_clausius_clapeyron_vectorised,
            equation_constants=(CLAUSIUS_CLAPEYRON_WATER,),
        )
