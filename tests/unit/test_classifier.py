"""
Unit tests for value classification, emptiness and equality.

Includes property-based testing with hypothesis.
"""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from strictval.core.rulesets.classifier import (
    ValueKind,
    classify,
    is_empty_loose,
    is_empty_strict,
    is_scalar,
    loose_equal,
    strict_equal,
    to_number,
    to_text,
)


class TestClassify:
    @pytest.mark.parametrize(
        "value,kind",
        [
            (None, ValueKind.NULL),
            (True, ValueKind.BOOL),
            (False, ValueKind.BOOL),
            (0, ValueKind.INT),
            (1.5, ValueKind.FLOAT),
            (Decimal("1.5"), ValueKind.FLOAT),
            ("", ValueKind.STRING),
            ([], ValueKind.ARRAY),
            ((1, 2), ValueKind.ARRAY),
            ({"a": 1}, ValueKind.ARRAY),
            ({1, 2}, ValueKind.ARRAY),
            (b"bytes", ValueKind.OBJECT),
            (object(), ValueKind.OBJECT),
        ],
    )
    def test_classify(self, value, kind):
        assert classify(value) is kind

    def test_booleans_are_not_scalars(self):
        assert is_scalar(True) is False
        assert is_scalar(1) is True
        assert is_scalar("x") is True
        assert is_scalar([1]) is False


class TestEmptiness:
    @pytest.mark.parametrize("value", [None, "", [], {}])
    def test_strict_empty(self, value):
        assert is_empty_strict(value) is True

    def test_absent_is_empty(self):
        assert is_empty_strict("value", present=False) is True
        assert is_empty_loose("value", present=False) is True

    @pytest.mark.parametrize("value", [0, 0.0, "0", False, " ", [None]])
    def test_strict_not_empty(self, value):
        assert is_empty_strict(value) is False

    @pytest.mark.parametrize("value", [0, 0.0, "0", False, None, "", []])
    def test_loose_empty(self, value):
        assert is_empty_loose(value) is True

    @pytest.mark.parametrize("value", [1, "00", True, " ", [0]])
    def test_loose_not_empty(self, value):
        assert is_empty_loose(value) is False

    @given(st.text(min_size=1))
    def test_property_nonempty_text_never_strict_empty(self, value):
        """Property test: any non-empty string is present under strict rules"""
        assert is_empty_strict(value) is False


class TestToNumber:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (10, Decimal(10)),
            (1.1, Decimal("1.1")),
            ("10.50", Decimal("10.50")),
            (" 12 ", Decimal(12)),
            ("-1e3", Decimal(-1000)),
            (".5", Decimal("0.5")),
            (float("inf"), Decimal("Infinity")),
        ],
    )
    def test_parses(self, value, expected):
        assert to_number(value) == expected

    @pytest.mark.parametrize(
        "value",
        [True, False, None, "", ".", "abc", "1,000", "0x10", float("nan"), [1], "١٢", "１２", "1e٣"],
    )
    def test_rejects(self, value):
        assert to_number(value) is None

    @given(st.integers())
    def test_property_integer_strings(self, value):
        """Property test: integer strings parse to the same value"""
        assert to_number(str(value)) == value


class TestStrictEqual:
    @pytest.mark.parametrize(
        "left,right",
        [
            (None, None),
            (True, True),
            (1.2, 1.2),
            ("match", "match"),
            ([1, "a"], [1, "a"]),
            ({"a": {"b": None}}, {"a": {"b": None}}),
        ],
    )
    def test_equal(self, left, right):
        assert strict_equal(left, right) is True

    @pytest.mark.parametrize(
        "left,right",
        [
            (None, ""),
            (1, 1.0),
            (1, True),
            ("1", 1),
            ("a", "A"),
            ([1], [1, 2]),
            ({"a": 1}, {"a": True}),
            ({"a": 1}, [1]),
        ],
    )
    def test_not_equal(self, left, right):
        assert strict_equal(left, right) is False

    @given(st.one_of(st.none(), st.booleans(), st.integers(), st.text()))
    def test_property_reflexive(self, value):
        """Property test: every scalar strictly equals itself"""
        assert strict_equal(value, value) is True


class TestLooseEqual:
    @pytest.mark.parametrize(
        "left,right,expected",
        [
            (1, "1", True),
            (1, 1.0, True),
            ("1e1", 10, True),
            (True, "1", True),
            (False, "0", True),
            (None, "", True),
            (None, 0, True),
            ("abc", "ABC", False),
            ([1], [1], True),
            ([1], "1", False),
        ],
    )
    def test_loose_equal(self, left, right, expected):
        assert loose_equal(left, right) is expected


class TestToText:
    @pytest.mark.parametrize(
        "value,expected",
        [("x", "x"), (7, "7"), (10.0, "10"), (10.5, "10.5"), (float("inf"), "inf")],
    )
    def test_to_text(self, value, expected):
        assert to_text(value) == expected

    @pytest.mark.parametrize("value", [True, None, [1], {}])
    def test_non_scalar_has_no_text(self, value):
        assert to_text(value) is None
