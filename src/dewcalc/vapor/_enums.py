"""
Enums to use for saturation vapor pressure equations.

Implements:
 -Vapor Equation Name
"""

from enum import Enum


class VaporEquationName(Enum):
    """
    Equation names for the saturation vapor pressure equations.

    Attributes
    ----------
    CLAUSIUS_CLAPEYRON : str
        Simplified Clausius-Clapeyron relation, es = P_ref * exp(beta * T)
    """

    CLAUSIUS_CLAPEYRON = "clausius_clapeyron"
