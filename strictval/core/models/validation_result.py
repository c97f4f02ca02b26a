"""
ValidationResult model representing the outcome of one validation run (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator
from typing import Dict, List


class FieldResult(BaseModel):
    """
    Outcome of one field's rule pipeline.

    Attributes:
        field: Field name as configured (may be dotted)
        passed: Whether every evaluated rule passed
        skipped: True when if_exist or permit_empty short-circuited the named rules
        failed_rules: Names of failed rules, in pipeline order
        errors: Failed rule name -> message key or caller-supplied message
    """

    field: str
    passed: bool
    skipped: bool = False
    failed_rules: List[str] = Field(default_factory=list)
    errors: Dict[str, str] = Field(default_factory=dict)

    @field_validator('failed_rules')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies failed_rules is empty."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError("passed=True but failed_rules is not empty")
        return v


class ValidationResult(BaseModel):
    """
    Outcome of validating an input set (ephemeral, discarded after use).

    Attributes:
        passed: True only if every field passed
        fields: Per-field results keyed by field name
    """

    passed: bool
    fields: Dict[str, FieldResult] = Field(default_factory=dict)

    @property
    def failed_fields(self) -> List[str]:
        return [name for name, result in self.fields.items() if not result.passed]

    @property
    def errors(self) -> Dict[str, str]:
        """First error message of every failed field."""
        return {
            name: result.errors[result.failed_rules[0]]
            for name, result in self.fields.items()
            if result.failed_rules
        }

    def get_error(self, field: str) -> str | None:
        return self.errors.get(field)

    class Config:
        json_schema_extra = {
            "example": {
                "passed": False,
                "fields": {
                    "amount": {
                        "field": "amount",
                        "passed": False,
                        "skipped": False,
                        "failed_rules": ["greater_than_equal_to"],
                        "errors": {"greater_than_equal_to": "Validation.greater_than_equal_to"},
                    },
                    "nickname": {
                        "field": "nickname",
                        "passed": True,
                        "skipped": True,
                        "failed_rules": [],
                        "errors": {},
                    },
                },
            }
        }
