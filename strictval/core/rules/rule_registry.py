"""
Rule registry: maps rule names to implementations.

The registry is built once from an ordered list of rule-set sources and is
read-only afterwards, so one instance can be shared by any number of engines
and threads.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any, Literal, Union

from strictval.core.errors import ConfigurationError
from strictval.core.models import ValidationConfig
from strictval.core.rulesets import BaseRuleSet, FormatRules, LooseRules, RuleFunc, StrictRules
from strictval.core.rulesets.classifier import is_empty_loose, is_empty_strict
from strictval.observability.logger import get_logger

logger = get_logger(__name__)

RuleSource = Union[BaseRuleSet, Mapping[str, RuleFunc]]
Mode = Literal["strict", "loose"]

COMPARATORS: dict[str, type[BaseRuleSet]] = {
    "strict": StrictRules,
    "loose": LooseRules,
}


class RuleRegistry:
    """
    Immutable mapping of rule name to rule function.

    Sources are merged in order and the first registration of a name wins.
    ``overrides`` replaces names unconditionally. ``mode`` picks the
    emptiness predicate that ``permit_empty`` uses.
    """

    def __init__(
        self,
        sources: Iterable[RuleSource],
        overrides: Mapping[str, RuleFunc] | None = None,
        mode: Mode = "strict",
    ):
        """
        Initialize the registry.

        Args:
            sources: Rule sets or plain name -> function mappings, highest precedence first
            overrides: Rules that replace any same-named rule from ``sources``
            mode: "strict" or "loose" emptiness for permit_empty

        Raises:
            ConfigurationError: If mode is unknown or a rule is not callable
        """
        if mode not in COMPARATORS:
            raise ConfigurationError("mode", f"Unknown mode '{mode}'. Must be one of {list(COMPARATORS)}")

        self.mode = mode
        self.source_names: list[str] = []
        rules: dict[str, RuleFunc] = {}

        for source in sources:
            if isinstance(source, BaseRuleSet):
                source_name, source_rules = source.name, source.rules()
            else:
                source_name, source_rules = "custom", dict(source)
            self.source_names.append(source_name)

            for name, func in source_rules.items():
                self._check_callable(name, func)
                if name in rules:
                    logger.debug(f"Rule '{name}' from '{source_name}' shadowed by earlier registration")
                    continue
                rules[name] = func

        for name, func in (overrides or {}).items():
            self._check_callable(name, func)
            rules[name] = func

        self._rules = MappingProxyType(rules)

    @staticmethod
    def _check_callable(name: str, func: Any) -> None:
        if not callable(func):
            raise ConfigurationError(name, f"Rule implementation must be callable, got {type(func).__name__}")

    @classmethod
    def default(
        cls,
        mode: Mode = "strict",
        extra: Iterable[RuleSource] = (),
        overrides: Mapping[str, RuleFunc] | None = None,
    ) -> "RuleRegistry":
        """Caller sources first, then the comparator for ``mode``, then FormatRules."""
        if mode not in COMPARATORS:
            raise ConfigurationError("mode", f"Unknown mode '{mode}'. Must be one of {list(COMPARATORS)}")
        return cls([*extra, COMPARATORS[mode](), FormatRules()], overrides=overrides, mode=mode)

    @classmethod
    def from_config(
        cls,
        config: ValidationConfig,
        extra: Iterable[RuleSource] = (),
        overrides: Mapping[str, RuleFunc] | None = None,
    ) -> "RuleRegistry":
        """Build from a ValidationConfig's mode and rule_sets."""
        builtins: dict[str, BaseRuleSet] = {
            "rules": COMPARATORS[config.mode](),
            "format": FormatRules(),
        }
        sources = [*extra, *(builtins[name] for name in config.rule_sets)]
        return cls(sources, overrides=overrides, mode=config.mode)

    def is_empty(self, value: Any, present: bool = True) -> bool:
        """Emptiness test used by the permit_empty short-circuit."""
        if self.mode == "loose":
            return is_empty_loose(value, present)
        return is_empty_strict(value, present)

    def resolve(self, name: str) -> RuleFunc:
        """
        Return the implementation of a rule.

        Raises:
            ConfigurationError: If no source registered the name
        """
        try:
            return self._rules[name]
        except KeyError:
            logger.error(f"Unknown rule '{name}'", extra={"rule": name, "mode": self.mode})
            raise ConfigurationError(name, f"Unknown rule '{name}'")

    @property
    def names(self) -> list[str]:
        return sorted(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry(mode={self.mode}, sources={self.source_names}, rules={len(self._rules)})"
