"""
Documented validity envelope of the Magnus dewpoint approximation.
"""

from typing import NamedTuple


class ValidRange(NamedTuple):
    """
    Inclusive (min, max) range a quantity is documented to be valid in.

    Attributes
    ----------
    min : float
        Lower bound
    max : float
        Upper bound
    """
    min: float
    max: float


TEMPERATURE_RANGE = ValidRange(min=0.0, max=60.0)
RELATIVE_HUMIDITY_RANGE = ValidRange(min=0.01, max=1.0)
DEWPOINT_RANGE = ValidRange(min=0.0, max=50.0)
