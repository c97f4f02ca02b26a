"""
strictval - strict-typed data validation.

Validates an input mapping against per-field rule pipelines using
type-aware, non-coercive comparisons.
"""

from strictval.core.errors import ConfigurationError, StrictValError
from strictval.core.models import FieldResult, NamedRule, PredicateRule, ValidationConfig, ValidationResult
from strictval.core.rules import RuleConfigBuilder, RuleConfigLoader, RuleEngine, RuleRegistry
from strictval.core.rulesets import FormatRules, LooseRules, StrictRules

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "StrictValError",
    "FieldResult",
    "NamedRule",
    "PredicateRule",
    "ValidationConfig",
    "ValidationResult",
    "RuleConfigBuilder",
    "RuleConfigLoader",
    "RuleEngine",
    "RuleRegistry",
    "FormatRules",
    "LooseRules",
    "StrictRules",
]
