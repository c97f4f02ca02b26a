"""
Unit tests for the loose comparison rule set and loose-mode engines.
"""

import pytest

from strictval.core.rules import RuleEngine
from strictval.core.rulesets import LooseRules

rules = LooseRules()


@pytest.fixture
def run_loose(loose_registry):
    def _run(field_rules, data):
        return RuleEngine(registry=loose_registry).set_rules(field_rules).run(data).passed

    return _run


class TestOrderingLoose:
    """Booleans order as 0/1 and unparseable bounds fail"""

    def test_booleans_are_coerced(self):
        assert rules.greater_than(True, "0", {}, "foo") is True
        assert rules.less_than(False, "1", {}, "foo") is True

    def test_numeric_strings(self):
        assert rules.greater_than_equal_to("10", "10.0", {}, "foo") is True

    def test_unparseable_bound_fails_all(self):
        assert rules.less_than(10, "a", {}, "foo") is False
        assert rules.less_than_equal_to(10, "a", {}, "foo") is False
        assert rules.greater_than(10, "a", {}, "foo") is False

    def test_arrays_fail(self):
        assert rules.greater_than([5], "1", {}, "foo") is False


class TestMatchesLoose:
    """Coercive equality with no absence policy"""

    def test_int_matches_numeric_string(self):
        data = {"foo": 1, "bar": "1"}
        assert rules.matches(1, "bar", data, "foo") is True

    def test_bool_matches_truthy(self):
        data = {"foo": True, "bar": "yes"}
        assert rules.matches(True, "bar", data, "foo") is True

    def test_absent_fields_read_as_null(self):
        assert rules.matches(None, "bar", {}, "foo") is True
        assert rules.differs(None, "bar", {}, "foo") is False

    def test_differs(self):
        data = {"foo": "a", "bar": "b"}
        assert rules.differs("a", "bar", data, "foo") is True


class TestPresenceLoose:
    """Loose emptiness treats 0, "0" and False as empty"""

    @pytest.mark.parametrize("value", [0, 0.0, "0", False, None, "", []])
    def test_required_rejects_loose_empty(self, value):
        assert rules.required(value, None, {"foo": value}, "foo") is False

    def test_required_with(self):
        assert rules.required_with("", "bar", {"foo": "", "bar": 0}, "foo") is True
        assert rules.required_with("", "bar", {"foo": "", "bar": 1}, "foo") is False

    def test_required_without(self):
        assert rules.required_without("", "bar", {"foo": "", "bar": "0"}, "foo") is False
        assert rules.required_without("", "bar", {"foo": "", "bar": "x"}, "foo") is True


class TestScalarRulesLoose:
    def test_in_list_uses_string_form(self):
        assert rules.in_list(True, "1,2", {}, "foo") is True
        assert rules.in_list(None, "a,b", {}, "foo") is False

    def test_lengths_use_string_form(self):
        assert rules.exact_length(None, "0", {}, "foo") is True
        assert rules.min_length(["abc"], "1", {}, "foo") is False


class TestLooseEngine:
    """permit_empty follows loose emptiness in a loose registry"""

    @pytest.mark.parametrize("value", [0, 0.0, "0", False])
    def test_zero_like_values_are_skipped(self, run_loose, value):
        assert run_loose({"foo": "permit_empty|greater_than[5]"}, {"foo": value}) is True

    def test_same_rule_names_as_strict(self, run_loose, run_rules):
        field_rules = {"foo": "greater_than_equal_to[0]"}
        data = {"foo": True}

        assert run_loose(field_rules, data) is True
        assert run_rules(field_rules, data) is False
