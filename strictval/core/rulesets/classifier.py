"""
Value classification for rule evaluation.

Rules never compare raw Python values directly. They ask this module what
kind of value they were given, whether it counts as empty, and what its
numeric value is, so that both the strict and the loose rule sets agree on
the shape of the input even where they disagree on the semantics.
"""

import math
import re
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

_NUMERIC_RE = re.compile(r"^\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?\s*$")


class ValueKind(str, Enum):
    """Comparison type of a single field value."""

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def classify(value: Any) -> ValueKind:
    """
    Return the comparison kind of a value.

    ``bool`` is checked before ``int`` so that ``True`` is never treated as
    the integer ``1``.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, (float, Decimal)):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (Mapping, Set)):
        return ValueKind.ARRAY
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ValueKind.ARRAY
    return ValueKind.OBJECT


def is_scalar(value: Any) -> bool:
    """True for strings and numbers, false for booleans, null, arrays and objects."""
    return classify(value) in (ValueKind.INT, ValueKind.FLOAT, ValueKind.STRING)


def is_empty_strict(value: Any, present: bool = True) -> bool:
    """
    Strict emptiness: absent, ``None``, ``""`` or an empty array.

    ``0``, ``0.0``, ``"0"`` and ``False`` are present values and are not empty.
    """
    if not present or value is None:
        return True
    kind = classify(value)
    if kind is ValueKind.STRING:
        return value == ""
    if kind is ValueKind.ARRAY:
        return len(value) == 0
    return False


def is_empty_loose(value: Any, present: bool = True) -> bool:
    """Loose emptiness: everything strict emptiness covers plus ``0``, ``0.0``, ``"0"`` and ``False``."""
    if is_empty_strict(value, present):
        return True
    kind = classify(value)
    if kind is ValueKind.BOOL:
        return value is False
    if kind in (ValueKind.INT, ValueKind.FLOAT):
        return value == 0
    if kind is ValueKind.STRING:
        return value == "0"
    return False


def to_number(value: Any) -> Decimal | None:
    """
    Parse a value as an arbitrary-precision number.

    Floats go through their shortest repr so ``1.1`` becomes exactly
    ``Decimal("1.1")``. Booleans are never numbers.

    Examples:
        >>> to_number("10.50")
        Decimal('10.50')
        >>> to_number(True) is None
        True
    """
    kind = classify(value)
    if kind is ValueKind.INT:
        return Decimal(value)
    if kind is ValueKind.FLOAT:
        if isinstance(value, Decimal):
            return None if value.is_nan() else value
        if math.isnan(value):
            return None
        return Decimal(repr(value))
    if kind is ValueKind.STRING and _NUMERIC_RE.match(value):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            return None
    return None


def strict_equal(left: Any, right: Any) -> bool:
    """
    Type-and-value equality with no coercion.

    ``1`` and ``1.0`` differ, ``True`` only equals ``True``, ``None`` only
    equals ``None``. Arrays compare element by element with the same rule.
    """
    left_kind = classify(left)
    if left_kind is not classify(right):
        return False

    if left_kind is ValueKind.ARRAY:
        if isinstance(left, Mapping) or isinstance(right, Mapping):
            if not (isinstance(left, Mapping) and isinstance(right, Mapping)):
                return False
            if left.keys() != right.keys():
                return False
            return all(strict_equal(left[key], right[key]) for key in left)
        if isinstance(left, Set) or isinstance(right, Set):
            return left == right
        if len(left) != len(right):
            return False
        return all(strict_equal(a, b) for a, b in zip(left, right))

    return left == right


def loose_equal(left: Any, right: Any) -> bool:
    """Equality with scalar coercion: booleans by truthiness, numeric strings by value, ``None == ""``."""
    left_kind, right_kind = classify(left), classify(right)

    if ValueKind.BOOL in (left_kind, right_kind):
        return (not is_empty_loose(left)) == (not is_empty_loose(right))

    if ValueKind.NULL in (left_kind, right_kind):
        return is_empty_loose(left) and is_empty_loose(right)

    if ValueKind.ARRAY in (left_kind, right_kind) or ValueKind.OBJECT in (left_kind, right_kind):
        return left == right

    left_number, right_number = to_number(left), to_number(right)
    if left_number is not None and right_number is not None:
        return left_number == right_number

    return str(left) == str(right)


def to_text(value: Any) -> str | None:
    """String form of a string or non-boolean number; ``None`` for anything else."""
    kind = classify(value)
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.INT:
        return str(value)
    if kind is ValueKind.FLOAT:
        number = to_number(value)
        if number is None:
            return None
        # 10.0 renders as "10"
        if number.is_finite() and number == number.to_integral_value():
            return str(int(number))
        return repr(value) if isinstance(value, float) else str(value)
    return None
