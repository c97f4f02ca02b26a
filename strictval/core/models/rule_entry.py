"""
Rule entry models: one item of a field's rule pipeline.
"""

from typing import Any, Callable, List, Union

from pydantic import BaseModel, Field, field_validator, model_validator


class NamedRule(BaseModel):
    """
    A built-in or registered rule referenced by name.

    Attributes:
        name: Rule name as registered ("greater_than_equal_to")
        param: Raw bracket text ("0" for ``greater_than_equal_to[0]``), None when absent
    """

    name: str = Field(..., min_length=1)
    param: str | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        """Reject names that still carry bracket or pipe syntax."""
        if any(ch in v for ch in "[]|") or v.strip() != v:
            raise ValueError(f"Invalid rule name '{v}'")
        return v

    @property
    def params(self) -> List[str]:
        """Comma separated parameter items."""
        if self.param is None:
            return []
        return [item.strip() for item in self.param.split(",")]

    @property
    def descriptor(self) -> str:
        return self.name if self.param is None else f"{self.name}[{self.param}]"

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "greater_than_equal_to",
                "param": "0",
            }
        }


class PredicateRule(BaseModel):
    """
    A caller-supplied closure receiving the field value and returning a bool.

    Closures still run when ``permit_empty`` skips the named rules of an
    empty field.
    """

    func: Callable[[Any], bool]
    name: str = ""

    @model_validator(mode="before")
    @classmethod
    def default_name(cls, data):
        """Name the rule after the callable; lambdas become "closure"."""
        if isinstance(data, dict) and not data.get("name"):
            func_name = getattr(data.get("func"), "__name__", "")
            data = {**data, "name": "closure" if func_name in ("", "<lambda>") else func_name}
        return data

    @property
    def descriptor(self) -> str:
        return self.name

    class Config:
        frozen = True


RuleEntry = Union[NamedRule, PredicateRule]
