"""
Base interface for rule sets.

A rule set is a named collection of rule functions. Every public method of a
``BaseRuleSet`` subclass whose name does not start with an underscore and is
not part of this base interface is a rule, registered under the method name.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

from strictval.core.errors import ConfigurationError

# (value, param, data, field) -> passed
RuleFunc = Callable[[Any, str | None, Mapping[str, Any], str], bool]


def split_param(param: str | None) -> list[str]:
    """Split a comma separated rule parameter into trimmed, non-empty items."""
    if param is None:
        return []
    return [item.strip() for item in param.split(",") if item.strip() != ""]


def param_check(check: Callable[[str | None], Any]) -> Callable[[RuleFunc], RuleFunc]:
    """
    Attach a parameter validator to a rule.

    The rule engine calls ``check(param)`` once per pipeline entry when rules
    are set, so a bad parameter raises ConfigurationError from ``set_rules``.
    """
    def decorate(func: RuleFunc) -> RuleFunc:
        func.check_param = check
        return func

    return decorate


def int_param(rule_name: str, param: str | None) -> int:
    """Parse an integer rule parameter, raising ConfigurationError when it is not one."""
    try:
        return int((param or "").strip())
    except ValueError:
        raise ConfigurationError(rule_name, f"Parameter must be an integer, got {param!r}")


class BaseRuleSet(ABC):
    """
    Abstract base class for all rule sets.

    Subclasses define rules as methods with the signature
    ``rule(value, param, data, field) -> bool`` where ``param`` is the raw
    text between the brackets of ``name[param]`` (``None`` when absent).
    """

    _INTERFACE = frozenset({"name", "rules"})

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the rule set identifier."""
        pass

    def rules(self) -> dict[str, RuleFunc]:
        """Return the mapping of rule name to bound rule method."""
        found: dict[str, RuleFunc] = {}
        for attr in dir(type(self)):
            if attr.startswith("_") or attr in self._INTERFACE:
                continue
            member = getattr(self, attr)
            if callable(member):
                found[attr] = member
        return found

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name}, rules={len(self.rules())})"
