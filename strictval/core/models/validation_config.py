"""
ValidationConfig model: engine mode, rule set selection and named rule groups.
"""

from typing import Dict, List, Literal, Union

from pydantic import BaseModel, Field, field_validator

RULE_SET_NAMES = ("rules", "format")


class RuleGroup(BaseModel):
    """
    A named, reusable set of field rules.

    Attributes:
        rules: Field name -> rule string ("required|min_length[5]") or list of rule strings
        errors: Field name -> rule name -> custom message
    """

    rules: Dict[str, Union[str, List[str]]]
    errors: Dict[str, Dict[str, str]] = Field(default_factory=dict)


class ValidationConfig(BaseModel):
    """
    Configuration for building a registry and engine.

    Attributes:
        mode: "strict" (no coercion) or "loose"
        rule_sets: Built-in rule sets to register, in precedence order
        groups: Named rule groups selectable with RuleEngine.set_rule_group()
    """

    mode: Literal["strict", "loose"] = "strict"
    rule_sets: List[str] = Field(default_factory=lambda: list(RULE_SET_NAMES))
    groups: Dict[str, RuleGroup] = Field(default_factory=dict)

    @field_validator("rule_sets")
    @classmethod
    def check_rule_sets(cls, v):
        unknown = [name for name in v if name not in RULE_SET_NAMES]
        if unknown:
            raise ValueError(f"Unknown rule sets: {unknown}. Must be one of {list(RULE_SET_NAMES)}")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "mode": "strict",
                "rule_sets": ["rules", "format"],
                "groups": {
                    "signup": {
                        "rules": {
                            "username": "required|alpha_numeric|min_length[5]",
                            "password_confirm": "matches[password]",
                        },
                        "errors": {
                            "username": {"min_length": "Shame, shame. Too short."},
                        },
                    }
                },
            }
        }
