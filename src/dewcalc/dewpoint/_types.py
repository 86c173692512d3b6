"""
Registry of dewpoint equations by name.
"""

from dewcalc.dewpoint._dewpoint_equations import (
    MagnusDewpointEquation,
    SpecificHumidityDewpointEquation,
)
from dewcalc.dewpoint._enums import DewPointEquationName

DEWPOINT_REGISTRY = {
    DewPointEquationName.MAGNUS: MagnusDewpointEquation,
    DewPointEquationName.SPECIFIC_HUMIDITY: SpecificHumidityDewpointEquation,
}
