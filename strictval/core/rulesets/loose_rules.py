"""
LooseRules - the coercive counterpart of StrictRules.

Same rule names, independent implementation. Scalars are coerced before
comparison: booleans order as 0/1, numeric strings compare by value, and an
absent comparison field is read as null.
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
    is_empty_loose,
    loose_equal,
    to_number,
    to_text,
)
from strictval.utils.dot_array import dot_array_search, has_key


def _loose_text(value: Any) -> str | None:
    kind = classify(value)
    if kind is ValueKind.NULL:
        return ""
    if kind is ValueKind.BOOL:
        return "1" if value else ""
    return to_text(value)


def _loose_number(value: Any) -> Decimal | None:
    if classify(value) is ValueKind.BOOL:
        return Decimal(int(value))
    return to_number(value)


def _order(value: Any, param: str | None, compare: Callable[[Decimal, Decimal], bool]) -> bool:
    number = _loose_number(value)
    bound = to_number(param)
    if number is None or bound is None:
        return False
    return compare(number, bound)


class LooseRules(BaseRuleSet):
    """
    Loose comparison rule set.

    Emptiness follows ``is_empty_loose``: ``0``, ``"0"`` and ``False`` are
    empty, so ``permit_empty`` skips them and ``required`` rejects them.
    """

    @property
    def name(self) -> str:
        return "loose"

    def permit_empty(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return True

    def if_exist(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return True

    def matches(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        if param is None:
            return False
        return loose_equal(value, dot_array_search(param, data))

    def differs(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        if param is None:
            return False
        return not loose_equal(value, dot_array_search(param, data))

    def greater_than(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _order(value, param, operator.gt)

    def greater_than_equal_to(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _order(value, param, operator.ge)

    def less_than(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _order(value, param, operator.lt)

    def less_than_equal_to(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return _order(value, param, operator.le)

    def required(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        return not is_empty_loose(value, has_key(data, field))

    def required_with(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        if self.required(value, param, data, field):
            return True
        return all(
            is_empty_loose(dot_array_search(other, data), has_key(data, other))
            for other in split_param(param)
        )

    def required_without(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        if self.required(value, param, data, field):
            return True
        return all(
            not is_empty_loose(dot_array_search(other, data), has_key(data, other))
            for other in split_param(param)
        )

    def in_list(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        text = _loose_text(value)
        return text is not None and text in split_param(param)

    def not_in_list(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        text = _loose_text(value)
        return text is not None and text not in split_param(param)

    def min_length(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        limit = int_param("min_length", param)
        text = _loose_text(value)
        return text is not None and len(text) >= limit

    def max_length(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        limit = int_param("max_length", param)
        text = _loose_text(value)
        return text is not None and len(text) <= limit

    def exact_length(self, value: Any, param: str | None, data: Mapping[str, Any], field: str) -> bool:
        lengths = [int_param("exact_length", item) for item in split_param(param)]
        if not lengths:
            raise ConfigurationError("exact_length", "At least one length is required")
        text = _loose_text(value)
        return text is not None and len(text) in lengths
