"""
Unit tests for dewcalc.shared._enum_tools.parse_enum
"""

import pytest

from dewcalc.dewpoint import DewPointEquationName
from dewcalc.shared import ValidationMode, parse_enum


class TestParseEnum:

    @pytest.mark.parametrize("value", ["warn", "WARN", "Warn"])
    def test_string_is_case_insensitive(self, value):
        assert parse_enum(value, ValidationMode) is ValidationMode.WARN

    def test_enum_passes_through(self):
        assert parse_enum(ValidationMode.STRICT, ValidationMode) is ValidationMode.STRICT

    def test_unknown_string_lists_available(self):
        with pytest.raises(ValueError, match=r"\[none, warn, strict\]"):
            parse_enum("loud", ValidationMode)

    def test_wrong_enum_class_raises_type_error(self):
        with pytest.raises(TypeError, match="must be str or ValidationMode, got DewPointEquationName"):
            parse_enum(DewPointEquationName.MAGNUS, ValidationMode)

    def test_non_string_raises_type_error(self):
        with pytest.raises(TypeError, match="got int"):
            parse_enum(3, ValidationMode)
