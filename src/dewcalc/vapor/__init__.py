from .core import Vapor

from ._enums import VaporEquationName

from ._vapor_equations import (
    VaporEquation,
    ClausiusClapeyronEquation,
)


__all__ = [
    'Vapor',

    'VaporEquationName',

    'VaporEquation',
    'ClausiusClapeyronEquation',
]
