"""
Rule pipeline execution, registry, parsing and configuration management.
"""

from .rule_config import RuleConfigBuilder, RuleConfigLoader
from .rule_engine import RuleEngine
from .rule_parser import parse_rule, parse_rules, split_rules
from .rule_registry import RuleRegistry

__all__ = [
    "RuleEngine",
    "RuleRegistry",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "parse_rule",
    "parse_rules",
    "split_rules",
]
