from .core import Humidity

from ._enums import HumidityEquationName

from ._humidity_equations import (
    MoleFractionEquation,
    PartialPressureEquation,
    RelativeHumidityEquation,
)


__all__ = [
    'Humidity',

    'HumidityEquationName',

    'MoleFractionEquation',
    'PartialPressureEquation',
    'RelativeHumidityEquation',
]
