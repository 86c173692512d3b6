"""
Store the vapor registries.
"""

from dewcalc.vapor._enums import VaporEquationName
from dewcalc.vapor._vapor_equations import ClausiusClapeyronEquation

EQUATION_REGISTRY = {
    VaporEquationName.CLAUSIUS_CLAPEYRON: ClausiusClapeyronEquation,
}
