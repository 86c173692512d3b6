from .core import Dewpoint

from ._enums import DewPointEquationName

from ._dewpoint_equations import (
    DewPointEquation,
    MagnusDewpointEquation,
    SpecificHumidityDewpointEquation,
)


__all__ = [
    'Dewpoint',

    'DewPointEquationName',

    'DewPointEquation',
    'MagnusDewpointEquation',
    'SpecificHumidityDewpointEquation',
]
