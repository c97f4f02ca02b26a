"""
Rule engine for running field rule pipelines over an input set.

The engine parses and resolves every rule when rules are set, then applies
each field's pipeline to the input and produces a ValidationResult.
"""

import time
from collections.abc import Mapping
from typing import Any

from strictval.core.errors import ConfigurationError
from strictval.core.models import (
    FieldResult,
    NamedRule,
    PredicateRule,
    RuleEntry,
    ValidationConfig,
    ValidationResult,
)
from strictval.core.rules.rule_parser import parse_rules
from strictval.core.rules.rule_registry import RuleRegistry
from strictval.core.rulesets import RuleFunc
from strictval.observability import metrics
from strictval.observability.logger import get_logger, log_operation
from strictval.utils.dot_array import dot_array_search, has_key

logger = get_logger(__name__)

# Rules evaluated while deciding whether permit_empty may skip an empty field
PRESENCE_RULES = ("required_with", "required_without")

# Metric label for every failed closure; only registered rule names get their own label
CLOSURE_LABEL = "closure"


class RuleEngine:
    """
    Runs rule pipelines on input sets.

    Every rule of a field is evaluated and every failure is recorded. The
    only short-circuits are ``if_exist`` (absent field) and ``permit_empty``
    (empty field), and closures still run under ``permit_empty``.
    """

    def __init__(self, registry: RuleRegistry | None = None, config: ValidationConfig | None = None):
        """
        Initialize the rule engine.

        Args:
            registry: Shared rule registry; built from ``config`` (or strict defaults) when omitted
            config: Optional configuration providing named rule groups
        """
        self.config = config or ValidationConfig()
        self.registry = registry or RuleRegistry.from_config(self.config)
        self.rules: dict[str, list[RuleEntry]] = {}
        self.custom_errors: dict[str, dict[str, str]] = {}
        self._pipelines: dict[str, list[tuple[RuleEntry, RuleFunc | None]]] = {}

    def set_rules(
        self,
        rules: Mapping[str, Any],
        errors: Mapping[str, Mapping[str, str]] | None = None,
    ) -> "RuleEngine":
        """
        Parse and resolve field rules.

        Args:
            rules: Field name -> "rule|rule[param]" string, or a list of
                   descriptors, (name, params) pairs and callables
            errors: Field name -> rule name -> custom message

        Raises:
            ConfigurationError: If a rule is malformed, not registered, or its parameter fails the rule's check
        """
        parsed: dict[str, list[RuleEntry]] = {}
        pipelines: dict[str, list[tuple[RuleEntry, RuleFunc | None]]] = {}

        for field, field_rules in rules.items():
            entries = parse_rules(field_rules)
            parsed[field] = entries
            pipelines[field] = [(entry, self._resolve(entry)) for entry in entries]

        self.rules = parsed
        self._pipelines = pipelines
        self.custom_errors = {field: dict(messages) for field, messages in (errors or {}).items()}
        return self

    def set_rule_group(self, name: str) -> "RuleEngine":
        """
        Load rules and custom errors from a configured group.

        Raises:
            ConfigurationError: If the group is not configured
        """
        group = self.config.groups.get(name)
        if group is None:
            raise ConfigurationError(name, f"Unknown rule group '{name}'")
        return self.set_rules(group.rules, group.errors)

    def _resolve(self, entry: RuleEntry) -> RuleFunc | None:
        """Look up a named rule and validate its parameter; closures resolve to None."""
        if not isinstance(entry, NamedRule):
            return None
        func = self.registry.resolve(entry.name)
        check = getattr(func, "check_param", None)
        if check is not None:
            check(entry.param)
        return func

    def run(self, data: Mapping[str, Any], group: str | None = None) -> ValidationResult:
        """
        Validate an input set against the current rules.

        Args:
            data: Field name -> value; read, never modified
            group: Optional rule group to load first

        Returns:
            ValidationResult with overall status and per-field detail
        """
        if group is not None:
            self.set_rule_group(group)

        start = time.perf_counter()
        fields = {
            field: self._run_field(field, pipeline, data)
            for field, pipeline in self._pipelines.items()
        }
        passed = all(result.passed for result in fields.values())

        metrics.record_run(
            passed,
            time.perf_counter() - start,
            [self._metric_label(rule) for result in fields.values() for rule in result.failed_rules],
        )

        return ValidationResult(passed=passed, fields=fields)

    def validate_batch(self, inputs: list[Mapping[str, Any]]) -> list[ValidationResult]:
        """
        Validate a batch of input sets.

        Args:
            inputs: List of input mappings

        Returns:
            List of ValidationResult objects, one per input
        """
        with log_operation("Validating batch", logger=logger, batch_size=len(inputs)):
            return [self.run(data) for data in inputs]

    def _run_field(
        self,
        field: str,
        pipeline: list[tuple[RuleEntry, RuleFunc | None]],
        data: Mapping[str, Any],
    ) -> FieldResult:
        present = has_key(data, field)
        value = dot_array_search(field, data) if present else None
        names = {entry.name for entry, func in pipeline if func is not None}

        if "if_exist" in names:
            if not present:
                return FieldResult(field=field, passed=True, skipped=True)
            pipeline = [step for step in pipeline if not self._is_marker(step, "if_exist")]

        if "permit_empty" in names:
            if "required" not in names and self.registry.is_empty(value, present):
                presence = [step for step in pipeline if step[1] is not None and step[0].name in PRESENCE_RULES]
                if all(self._evaluate(step, field, value, data) for step in presence):
                    closures = [step for step in pipeline if step[1] is None]
                    return self._collect(field, closures, value, data, skipped=True)
            pipeline = [step for step in pipeline if not self._is_marker(step, "permit_empty")]

        return self._collect(field, pipeline, value, data)

    @staticmethod
    def _is_marker(step: tuple[RuleEntry, RuleFunc | None], name: str) -> bool:
        return step[1] is not None and step[0].name == name

    def _collect(
        self,
        field: str,
        pipeline: list[tuple[RuleEntry, RuleFunc | None]],
        value: Any,
        data: Mapping[str, Any],
        skipped: bool = False,
    ) -> FieldResult:
        failed_rules: list[str] = []
        errors: dict[str, str] = {}

        for step in pipeline:
            if self._evaluate(step, field, value, data):
                continue
            rule_name = step[0].name
            failed_rules.append(rule_name)
            errors.setdefault(rule_name, self._message(field, step[0]))
            logger.debug(
                f"Rule '{step[0].descriptor}' failed for field '{field}'",
                extra={"field": field, "rule": rule_name},
            )

        return FieldResult(
            field=field,
            passed=not failed_rules,
            skipped=skipped,
            failed_rules=failed_rules,
            errors=errors,
        )

    @staticmethod
    def _evaluate(
        step: tuple[RuleEntry, RuleFunc | None],
        field: str,
        value: Any,
        data: Mapping[str, Any],
    ) -> bool:
        entry, func = step
        if isinstance(entry, PredicateRule):
            return bool(entry.func(value))
        return bool(func(value, entry.param, data, field))

    def _metric_label(self, rule_name: str) -> str:
        return rule_name if rule_name in self.registry else CLOSURE_LABEL

    def _message(self, field: str, entry: RuleEntry) -> str:
        """Custom message when configured, otherwise the message key for a templating layer."""
        custom = self.custom_errors.get(field, {}).get(entry.name)
        if custom is not None:
            return custom
        return f"Validation.{entry.name}"

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule counts per field and per rule name
        """
        return {
            "total_rules": sum(len(entries) for entries in self.rules.values()),
            "rules_by_field": {field: len(entries) for field, entries in self.rules.items()},
            "rules_by_name": self._count_by_name(),
            "mode": self.registry.mode,
        }

    def _count_by_name(self) -> dict[str, int]:
        counts: dict[str, int] = {}
        for entries in self.rules.values():
            for entry in entries:
                counts[entry.name] = counts.get(entry.name, 0) + 1
        return counts
