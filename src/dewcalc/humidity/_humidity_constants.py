"""
Named tuple humidity constants.
"""

from typing import NamedTuple


class MolarMassConstants(NamedTuple):
    """
    Molar masses used to turn a mass ratio into a mole ratio.

    Attributes
    ----------
    dry_air : float
        Molar mass of dry air in g/mol
    water : float
        Molar mass of water in g/mol
    """
    dry_air: float
    water: float


MOLAR_MASS = MolarMassConstants(dry_air=28.97, water=18.015)
