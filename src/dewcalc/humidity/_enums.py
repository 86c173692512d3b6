"""
Enums to use for humidity conversion equations.
"""

from enum import Enum


class HumidityEquationName(Enum):
    """
    Names of the humidity conversion steps.

    Attributes
    ----------
    MOLE_FRACTION : str
        Specific humidity scaled by the dry air to water molar mass ratio
    PARTIAL_PRESSURE : str
        Water vapor partial pressure from mole fraction and pressure
    RELATIVE_HUMIDITY : str
        Partial pressure over saturation vapor pressure (fraction)
    """

    MOLE_FRACTION = "mole_fraction"
    PARTIAL_PRESSURE = "partial_pressure"
    RELATIVE_HUMIDITY = "relative_humidity"
