"""
Enums to use for dewpoint equations.

Implements:
 -Dewpoint Equation Name
"""

from enum import Enum


class DewPointEquationName(Enum):
    """
    Enumeration of available dew point equation names.

    Attributes
    ----------
    MAGNUS : str
        August-Roche-Magnus inversion from temperature and relative humidity

    SPECIFIC_HUMIDITY : str
        Full chain from specific humidity, pressure and temperature, ending
        in the Magnus inversion

    See Also
    --------
    Dewpoint.get_dewpoint_from_specific_humidity : Full chain
    Dewpoint.get_dewpoint_from_relative_humidity : Magnus step only
    Dewpoint.get_equations_available : List all available equations
    """

    MAGNUS = "magnus"
    SPECIFIC_HUMIDITY = "specific_humidity"
