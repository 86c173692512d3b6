"""
Constants for Saturation Vapor Equations.

Implements:
- Simplified Clausius-Clapeyron
"""

from typing import NamedTuple


class ClausiusClapeyronConstants(NamedTuple):
    """
    Constants for the simplified Clausius-Clapeyron relation.

    Equation:
        eₛ = P_ref · exp(beta · T)

    Attributes
    ----------
    P_ref : float
        Reference vapor pressure in Pa
    beta : float
        Exponential slope in 1/°C
    """
    P_ref: float
    beta: float


CLAUSIUS_CLAPEYRON_WATER = ClausiusClapeyronConstants(P_ref=611.0, beta=0.067)
