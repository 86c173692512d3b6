"""
This is the main py file for vapor commands for the user to use.

Commands:
 - list_equations
 - get_equation
 - get_saturation_vapor_pressure
"""

from typing import List, Union

import numpy.typing as npt

from dewcalc.shared._enum_tools import parse_enum
from dewcalc.shared._shared_enums import ValidationMode
from dewcalc.vapor._enums import VaporEquationName
from dewcalc.vapor._types import EQUATION_REGISTRY
from dewcalc.vapor._vapor_equations import VaporEquation


class Vapor:
    """
    Saturation vapor pressure interface.

    Examples
    --------
    >>> Vapor.get_saturation_vapor_pressure(20.0)
    2333.43...

    >>> Vapor.list_equations()
    ['clausius_clapeyron']
    """

    @staticmethod
    def list_equations() -> List[str]:
        """
        lists the available equations
        """
        return [equation.value for equation in VaporEquationName]

    @staticmethod
    def get_equation(
        equation: Union[str, VaporEquationName] = VaporEquationName.CLAUSIUS_CLAPEYRON,
        validation: Union[str, ValidationMode] = ValidationMode.NONE,
    ) -> VaporEquation:
        """
        gets the specific saturation vapor equation.

        Args:
            - equation (Union[str, VaporEquationName]) = Equation name or enum the user requires
            - validation (Union[str, ValidationMode]) = "warn" or "strict" warn when temperatures
              are outside the equation's range

        Returns:
            Returns the equation instance needed by the user
        """
        equation_enum = parse_enum(equation, VaporEquationName)

        return EQUATION_REGISTRY[equation_enum](validation=validation)

    @staticmethod
    def get_saturation_vapor_pressure(
        temp_c: Union[npt.ArrayLike, float],
        equation: Union[str, VaporEquationName] = VaporEquationName.CLAUSIUS_CLAPEYRON,
        validation: Union[str, ValidationMode] = ValidationMode.NONE,
    ) -> Union[npt.NDArray, float]:
        """
        gets the saturation vapor pressure using the selected equation at a given temperature in Pa.

        Args:
            - temp_c (Union[npt.ArrayLike, float]) = a scalar or array of temperature in °C.
            - equation (Union[str, VaporEquationName]) = Equation used to get the vapor saturation.
            - validation (Union[str, ValidationMode]) = "warn" or "strict" warn when temperature
              is outside the equation's range, "none" skips the check.

        Returns:
            - scalar or an array of pressure in Pa
        """
        equation_enum = parse_enum(equation, VaporEquationName)
        equation_selected = EQUATION_REGISTRY[equation_enum](
            validation=validation, wrapper_depth=1
        )
        return equation_selected.calculate(temp_c=temp_c)
