"""
Rule descriptor parsing.

Turns ``"if_exist|greater_than_equal_to[0]"`` or a list mixing descriptors,
``(name, params)`` pairs and callables into an ordered list of rule entries.
"""

import re
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from strictval.core.errors import ConfigurationError
from strictval.core.models import NamedRule, PredicateRule, RuleEntry

_DESCRIPTOR_RE = re.compile(r"^([^\[\]|]+)(?:\[(.*)\])?$", re.DOTALL)


def split_rules(rules: str) -> list[str]:
    """
    Split a pipe separated rule string, ignoring pipes inside brackets.

    Examples:
        >>> split_rules("permit_empty|regex_match[/^(a|b)$/]")
        ['permit_empty', 'regex_match[/^(a|b)$/]']

    Raises:
        ConfigurationError: If brackets are unbalanced
    """
    parts: list[str] = []
    current: list[str] = []
    depth = 0

    for ch in rules:
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth < 0:
                raise ConfigurationError(rules, "Unbalanced ']' in rule string")
        elif ch == "|" and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)

    if depth != 0:
        raise ConfigurationError(rules, "Unclosed '[' in rule string")

    parts.append("".join(current))
    return [part.strip() for part in parts if part.strip()]


def parse_descriptor(descriptor: str) -> NamedRule:
    """
    Parse one ``name`` or ``name[param]`` descriptor.

    Raises:
        ConfigurationError: If the descriptor is malformed
    """
    match = _DESCRIPTOR_RE.match(descriptor.strip())
    if not match or not match.group(1).strip():
        raise ConfigurationError(descriptor, "Malformed rule descriptor")

    return NamedRule(name=match.group(1).strip(), param=match.group(2))


def parse_rule(entry: Any) -> RuleEntry:
    """
    Parse a single rule entry.

    Accepts a descriptor string, a ``(name, params)`` pair (params are joined
    with commas), a callable, or an already-built NamedRule / PredicateRule.
    """
    if isinstance(entry, (NamedRule, PredicateRule)):
        return entry

    if isinstance(entry, str):
        return parse_descriptor(entry)

    if isinstance(entry, tuple) and len(entry) == 2 and isinstance(entry[0], str):
        name, params = entry
        if params is None:
            param = None
        elif isinstance(params, str):
            param = params
        else:
            param = ",".join(str(p) for p in params)
        try:
            return NamedRule(name=name, param=param)
        except PydanticValidationError as e:
            raise ConfigurationError(name, f"Malformed rule: {e}")

    if callable(entry):
        return PredicateRule(func=entry)

    raise ConfigurationError(repr(entry), f"Unsupported rule entry type {type(entry).__name__}")


def parse_rules(rules: str | Sequence[Any] | Any) -> list[RuleEntry]:
    """
    Parse a field's rule pipeline.

    Examples:
        >>> [r.descriptor for r in parse_rules("if_exist|less_than[10]")]
        ['if_exist', 'less_than[10]']
    """
    if isinstance(rules, str):
        return [parse_descriptor(part) for part in split_rules(rules)]

    if isinstance(rules, (NamedRule, PredicateRule, tuple)) or callable(rules):
        return [parse_rule(rules)]

    if not isinstance(rules, Sequence):
        raise ConfigurationError(repr(rules), f"Unsupported rules type {type(rules).__name__}")

    parsed: list[RuleEntry] = []
    for entry in rules:
        if isinstance(entry, str) and "|" in entry:
            parsed.extend(parse_rules(entry))
        else:
            parsed.append(parse_rule(entry))
    return parsed
