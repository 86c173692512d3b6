"""
Dew point from specific humidity, pressure and temperature using the
August-Roche-Magnus approximation.
"""

from .dewpoint import Dewpoint
from .humidity import Humidity
from .vapor import Vapor
from .shared import ValidationMode

dewpoint_from_specific_humidity = Dewpoint.get_dewpoint_from_specific_humidity


__all__ = [
    'Dewpoint',
    'Humidity',
    'Vapor',
    'ValidationMode',
    'dewpoint_from_specific_humidity',
]

__version__ = '0.1.0'
