"""
Shared enums for different modules
"""

from enum import Enum


class ValidationMode(Enum):
    """
    How strictly inputs are checked against their physical domain.

    Attributes
    ----------
    NONE : str
        No checks. Out-of-domain inputs propagate as nan or inf.
    WARN : str
        Emit UserWarning for out-of-range or non-physical inputs.
    STRICT : str
        Raise ValueError for non-positive pressure or humidity, warn for
        the remaining range checks.
    """

    NONE = "none"
    WARN = "warn"
    STRICT = "strict"
