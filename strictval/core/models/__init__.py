"""
Core data models for the validation engine.

All models use Pydantic for runtime validation and type safety.
"""

from .rule_entry import NamedRule, PredicateRule, RuleEntry
from .validation_config import RuleGroup, ValidationConfig
from .validation_result import FieldResult, ValidationResult

__all__ = [
    "NamedRule",
    "PredicateRule",
    "RuleEntry",
    "RuleGroup",
    "ValidationConfig",
    "FieldResult",
    "ValidationResult",
]
