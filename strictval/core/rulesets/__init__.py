"""
Rule set implementations.

Provides the value classifier, the strict and loose comparison rule sets,
and the scalar format rules.
"""

from .base_rule_set import BaseRuleSet, RuleFunc, param_check
from .classifier import ValueKind, classify, is_empty_loose, is_empty_strict, strict_equal, to_number
from .format_rules import FormatRules
from .loose_rules import LooseRules
from .strict_rules import StrictRules

__all__ = [
    "BaseRuleSet",
    "RuleFunc",
    "param_check",
    "ValueKind",
    "classify",
    "is_empty_strict",
    "is_empty_loose",
    "strict_equal",
    "to_number",
    "StrictRules",
    "LooseRules",
    "FormatRules",
]
