"""
FormatRules - character-class and number-format checks on scalar values.

Only strings are inspected as text. The numeric family also accepts integers
and floats through their string form. Booleans, null, arrays and other
objects fail every rule here instead of raising.
"""

import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from strictval.core.errors import ConfigurationError
from strictval.core.rulesets.base_rule_set import BaseRuleSet, param_check
from strictval.core.rulesets.classifier import ValueKind, classify, to_text

_ALPHA = re.compile(r"^[a-zA-Z]+$")
_ALPHA_SPACE = re.compile(r"^[a-zA-Z ]+$")
_ALPHA_DASH = re.compile(r"^[a-zA-Z0-9_-]+$")
_ALPHA_NUMERIC = re.compile(r"^[a-zA-Z0-9]+$")
_ALPHA_NUMERIC_SPACE = re.compile(r"^[a-zA-Z0-9 ]+$")
_NUMERIC = re.compile(r"^[-+]?[0-9]*\.?[0-9]+$")
_INTEGER = re.compile(r"^[-+]?[0-9]+$")
_DECIMAL = re.compile(r"^[-+]?[0-9]{0,}\.?[0-9]+$")
_NATURAL = re.compile(r"^[0-9]+$")
_HEX = re.compile(r"^[0-9a-fA-F]+$")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}


@lru_cache(maxsize=256)
def compile_pattern(param: str | None) -> re.Pattern:
    """
    Compile a ``regex_match`` parameter, honouring ``/pattern/flags`` delimiters.

    Raises:
        ConfigurationError: If the pattern is missing or invalid
    """
    if not param:
        raise ConfigurationError("regex_match", "A pattern is required")

    pattern, flags = param, 0
    delimited = re.fullmatch(r"/(.*)/([imsx]*)", param, re.DOTALL)
    if delimited:
        pattern = delimited.group(1)
        for flag in delimited.group(2):
            flags |= _FLAGS[flag]

    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise ConfigurationError("regex_match", f"Invalid regex pattern: {e}")


def _string(value: Any) -> str | None:
    return value if classify(value) is ValueKind.STRING else None


def _full(pattern: re.Pattern, text: str | None) -> bool:
    return text is not None and pattern.fullmatch(text) is not None


class FormatRules(BaseRuleSet):
    """Format checks shared by the strict and loose registries."""

    @property
    def name(self) -> str:
        return "format"

    def string(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return classify(value) is ValueKind.STRING

    def alpha(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _full(_ALPHA, _string(value))

    def alpha_space(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _full(_ALPHA_SPACE, _string(value))

    def alpha_dash(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _full(_ALPHA_DASH, _string(value))

    def alpha_numeric(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _full(_ALPHA_NUMERIC, to_text(value))

    def alpha_numeric_space(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _full(_ALPHA_NUMERIC_SPACE, to_text(value))

    def numeric(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _full(_NUMERIC, to_text(value))

    def integer(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        if classify(value) is ValueKind.INT:
            return True
        return _full(_INTEGER, _string(value))

    def decimal(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _full(_DECIMAL, to_text(value))

    def is_natural(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _full(_NATURAL, to_text(value))

    def is_natural_no_zero(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        text = to_text(value)
        return _full(_NATURAL, text) and int(text) != 0

    def hex(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _full(_HEX, _string(value))

    def valid_email(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _full(_EMAIL, _string(value))

    @param_check(compile_pattern)
    def regex_match(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        """Match against ``param``; ``/pattern/flags`` delimiters are stripped when present."""
        text = _string(value)
        return text is not None and compile_pattern(param).search(text) is not None
