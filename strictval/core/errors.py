"""
Exceptions raised by the validation engine.

Only configuration mistakes raise. Value-level anomalies (an array given to a
scalar rule, a boolean given to an ordering rule, a missing comparison field)
always resolve to a failing rule instead.
"""


class StrictValError(Exception):
    """Base class for all strictval errors."""


class ConfigurationError(StrictValError):
    """Raised when a rule configuration cannot be used (unknown rule, bad parameter, unknown group)."""

    def __init__(self, rule_name: str, message: str):
        self.rule_name = rule_name
        self.message = message
        super().__init__(f"[{rule_name}] {message}")
