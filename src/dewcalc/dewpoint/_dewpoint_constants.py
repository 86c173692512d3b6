"""
Named tuple dewpoint constants.
"""


from typing import NamedTuple

class MagnusDewpointConstants(NamedTuple):
    """
    August-Roche-Magnus coefficients for dew point calculation.

    Attributes
    ----------
    A : float
        Dimensionless coefficient in Magnus formula

    B : float
        Temperature coefficient in Celsius
    """
    A: float
    B: float

MAGNUS_WATER = MagnusDewpointConstants(A=17.271, B=237.7)
