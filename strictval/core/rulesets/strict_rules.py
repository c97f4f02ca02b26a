"""
StrictRules - comparison rules with no implicit type coercion.

Booleans never take part in numeric ordering, ``1`` does not match ``1.0``,
and a comparison against a field that is absent from the input always fails.
"""

import operator
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any

from strictval.core.errors import ConfigurationError
from strictval.core.rulesets.base_rule_set import BaseRuleSet, int_param, split_param
from strictval.core.rulesets.classifier import (
    ValueKind,
    classify,
    is_empty_strict,
    strict_equal,
    to_number,
    to_text,
)
from strictval.utils.dot_array import dot_array_search, has_key


def _order(
    value: Any,
    param: str | None,
    compare: Callable[[Decimal, Decimal], bool],
    unbounded: bool,
) -> bool:
    if classify(value) is ValueKind.BOOL:
        return False

    number = to_number(value)
    if number is None:
        return False

    bound = to_number(param)
    if bound is None:
        return unbounded

    return compare(number, bound)


class StrictRules(BaseRuleSet):
    """
    Strict comparison rule set.

    Rules:
    - matches / differs: cross-field strict equality, absent operands fail
    - greater_than[_equal_to] / less_than[_equal_to]: decimal ordering,
      booleans always fail, an unparseable bound passes only the less_than pair
    - permit_empty / if_exist: markers handled by the rule engine
    - required, required_with, required_without, in_list, not_in_list,
      min_length, max_length, exact_length
    """

    @property
    def name(self) -> str:
        return "strict"

    # -- markers ---------------------------------------------------------

    def permit_empty(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return True

    def if_exist(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return True

    # -- cross-field equality --------------------------------------------

    def matches(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        """True iff both fields exist and hold the same type and value."""
        if param is None or not has_key(data, field) or not has_key(data, param):
            return False
        return strict_equal(value, dot_array_search(param, data))

    def differs(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        """True iff both fields exist and are not strictly equal."""
        if param is None or not has_key(data, field) or not has_key(data, param):
            return False
        return not strict_equal(value, dot_array_search(param, data))

    # -- numeric ordering ------------------------------------------------

    def greater_than(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _order(value, param, operator.gt, unbounded=False)

    def greater_than_equal_to(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _order(value, param, operator.ge, unbounded=False)

    def less_than(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _order(value, param, operator.lt, unbounded=True)

    def less_than_equal_to(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _order(value, param, operator.le, unbounded=True)

    # -- presence ----------------------------------------------------------

    def required(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return not is_empty_strict(value, has_key(data, field))

    def required_with(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        """Required when any of the listed fields is present and not empty."""
        if self.required(value, param, data, field):
            return True
        for other in split_param(param):
            if not is_empty_strict(dot_array_search(other, data), has_key(data, other)):
                return False
        return True

    def required_without(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        """Required when any of the listed fields is absent or empty."""
        if self.required(value, param, data, field):
            return True
        for other in split_param(param):
            if is_empty_strict(dot_array_search(other, data), has_key(data, other)):
                return False
        return True

    # -- scalar membership and length --------------------------------------

    def in_list(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        text = to_text(value)
        return text is not None and text in split_param(param)

    def not_in_list(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        text = to_text(value)
        return text is not None and text not in split_param(param)

    def min_length(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        limit = int_param("min_length", param)
        text = to_text(value)
        return text is not None and len(text) >= limit

    def max_length(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        limit = int_param("max_length", param)
        text = to_text(value)
        return text is not None and len(text) <= limit

    def exact_length(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        lengths = [int_param("exact_length", item) for item in split_param(param)]
        if not lengths:
            raise ConfigurationError("exact_length", "At least one length is required")
        text = to_text(value)
        return text is not None and len(text) in lengths
