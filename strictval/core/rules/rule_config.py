"""
Rule configuration management.

Loads validation configuration from YAML files and provides a fluent
builder for field rule mappings.
"""

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from strictval.core.models import ValidationConfig
from strictval.observability.logger import get_logger

logger = get_logger(__name__)


class RuleConfigLoader:
    """
    Loads a ValidationConfig from a YAML configuration file.

    Expected YAML format:
    ```yaml
    mode: strict
    rule_sets: [rules, format]

    groups:
      signup:
        rules:
          username: "required|alpha_numeric|min_length[5]"
          age:
            - permit_empty
            - "greater_than_equal_to[18]"
        errors:
          username:
            min_length: "Shame, shame. Too short."
    ```

    A document with a top-level ``rules`` (and optional ``errors``) section
    instead of ``groups`` is loaded as a single group named ``default``.
    The ``STRICTVAL_MODE`` environment variable overrides ``mode``.
    """

    DEFAULT_GROUP = "default"

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If the file does not exist
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load(self) -> ValidationConfig:
        """
        Load and parse the configuration file.

        Returns:
            ValidationConfig

        Raises:
            ValueError: If YAML is invalid or has neither 'groups' nor 'rules'
        """
        with open(self.config_path) as f:
            try:
                raw = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(raw, dict) or ("groups" not in raw and "rules" not in raw):
            raise ValueError("Configuration file must contain a 'groups' or 'rules' section")

        document: dict[str, Any] = dict(raw)
        if "rules" in document:
            groups = dict(document.get("groups") or {})
            groups[self.DEFAULT_GROUP] = {
                "rules": document.pop("rules"),
                "errors": document.pop("errors", None) or {},
            }
            document["groups"] = groups

        env_mode = os.getenv("STRICTVAL_MODE")
        if env_mode:
            document["mode"] = env_mode.lower()

        try:
            config = ValidationConfig(**document)
        except PydanticValidationError as e:
            raise ValueError(f"Invalid configuration in {self.config_path}: {e}")

        logger.info(
            f"Loaded validation config from {self.config_path}",
            extra={"mode": config.mode, "groups": sorted(config.groups)},
        )
        return config


class RuleConfigBuilder:
    """
    Programmatically build a field -> rule list mapping (for tests or dynamic rules).

    Usage:
        rules = RuleConfigBuilder() \\
            .add_permit_empty("age") \\
            .add_greater_than("age", 17) \\
            .add_matches("password_confirm", "password") \\
            .build()
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: dict[str, list[Any]] = {}

    def add_rule(self, field_name: str, rule_name: str, param: Any = None) -> "RuleConfigBuilder":
        """Append ``rule_name`` (with optional parameter) to a field's pipeline."""
        descriptor = rule_name if param is None else f"{rule_name}[{param}]"
        self.rules.setdefault(field_name, []).append(descriptor)
        return self

    def add_required(self, field_name: str) -> "RuleConfigBuilder":
        return self.add_rule(field_name, "required")

    def add_permit_empty(self, field_name: str) -> "RuleConfigBuilder":
        return self.add_rule(field_name, "permit_empty")

    def add_if_exist(self, field_name: str) -> "RuleConfigBuilder":
        return self.add_rule(field_name, "if_exist")

    def add_matches(self, field_name: str, other_field: str) -> "RuleConfigBuilder":
        return self.add_rule(field_name, "matches", other_field)

    def add_differs(self, field_name: str, other_field: str) -> "RuleConfigBuilder":
        return self.add_rule(field_name, "differs", other_field)

    def add_greater_than(self, field_name: str, bound: Any, inclusive: bool = False) -> "RuleConfigBuilder":
        """Add greater_than, or greater_than_equal_to when inclusive."""
        return self.add_rule(field_name, "greater_than_equal_to" if inclusive else "greater_than", bound)

    def add_less_than(self, field_name: str, bound: Any, inclusive: bool = False) -> "RuleConfigBuilder":
        """Add less_than, or less_than_equal_to when inclusive."""
        return self.add_rule(field_name, "less_than_equal_to" if inclusive else "less_than", bound)

    def add_closure(self, field_name: str, func: Callable[[Any], bool]) -> "RuleConfigBuilder":
        """Add a caller-supplied predicate receiving the field value."""
        self.rules.setdefault(field_name, []).append(func)
        return self

    def build(self) -> dict[str, list[Any]]:
        """Build and return the rule configuration."""
        return {field: list(entries) for field, entries in self.rules.items()}
