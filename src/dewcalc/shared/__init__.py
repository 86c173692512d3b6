from ._enum_tools import parse_enum
from ._equation_base import ElementwiseEquation
from ._shared_enums import ValidationMode

__all__ = [
    'parse_enum',
    'ElementwiseEquation',
    'ValidationMode',
]
