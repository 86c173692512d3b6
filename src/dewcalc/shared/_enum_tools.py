"""
Reusable tools for validating and checking enums.
"""

from enum import Enum
from typing import Type, TypeVar, Union

E = TypeVar("E", bound=Enum)


def parse_enum(value: Union[str, E], enum_class: Type[E]) -> E:
    """Parse and validate enum from string or enum instance.

    String values are matched case-insensitively against the enum values.
    Enum instances are passed through after checking their class.

    Parameters
    ----------
    value : str or E
        Either a string matching an enum value or an instance of
        ``enum_class``.
    enum_class : Type[E]
        The enum class to parse into.

    Returns
    -------
    E
        Valid instance of the specified enum class.

    Raises
    ------
    ValueError
        If the string value doesn't match any enum member.
    TypeError
        If value is neither a string nor an instance of the enum class.

    Examples
    --------
    >>> from dewcalc.shared._shared_enums import ValidationMode
    >>> parse_enum("WARN", ValidationMode)
    <ValidationMode.WARN: 'warn'>

    >>> parse_enum(ValidationMode.STRICT, ValidationMode)
    <ValidationMode.STRICT: 'strict'>

    >>> parse_enum("loud", ValidationMode)
    ValueError: Invalid enum 'loud'. Available are the following: [none, warn, strict]

    >>> parse_enum(3, ValidationMode)
    TypeError: value must be str or ValidationMode, got int
    """
    if isinstance(value, enum_class):
        return value

    if isinstance(value, str):
        try:
            return enum_class(value.lower())

        except ValueError as err:
            valid_enums = ", ".join([e.value for e in enum_class])
            raise ValueError(
                f"Invalid enum '{value}'. Available are the following: [{valid_enums}]"
            ) from err

    raise TypeError(
        f"value must be str or {enum_class.__name__}, got {type(value).__name__}"
    )
