from __future__ import annotations

import re
from typing import Any, Literal, Optional

from pydantic import Field, field_validator, model_validator

from .base import Constraint
from .registry import register_constraint


def _check_bounds(lower, upper) -> None:
    if lower is None and upper is None:
        raise ValueError("at least one of min or max is required")
    if lower is not None and upper is not None and lower > upper:
        raise ValueError(f"min ({lower}) must not be greater than max ({upper})")


@register_constraint
class NotBlank(Constraint):
    type: Literal["NotBlank"] = "NotBlank"
    allow_null: bool = False


@register_constraint
class NotNull(Constraint):
    type: Literal["NotNull"] = "NotNull"


@register_constraint
class Email(Constraint):
    type: Literal["Email"] = "Email"


@register_constraint
class Url(Constraint):
    type: Literal["Url"] = "Url"
    protocols: list[str] = Field(default_factory=lambda: ["http", "https"])


@register_constraint
class Length(Constraint):
    type: Literal["Length"] = "Length"
    min: Optional[int] = Field(default=None, ge=0)
    max: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def validate_bounds(self) -> "Length":
        _check_bounds(self.min, self.max)
        return self


@register_constraint
class Range(Constraint):
    type: Literal["Range"] = "Range"
    min: Optional[float] = None
    max: Optional[float] = None

    @model_validator(mode="after")
    def validate_bounds(self) -> "Range":
        _check_bounds(self.min, self.max)
        return self


@register_constraint
class Regex(Constraint):
    type: Literal["Regex"] = "Regex"
    pattern: str
    match: bool = True

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid regular expression '{v}': {e}") from e
        return v


@register_constraint
class Choice(Constraint):
    type: Literal["Choice"] = "Choice"
    choices: list[Any] = Field(default_factory=list)
    multiple: bool = False


@register_constraint
class File(Constraint):
    type: Literal["File"] = "File"
    max_size: Optional[str] = None
    mime_types: list[str] = Field(default_factory=list)

    @field_validator("max_size")
    @classmethod
    def validate_max_size(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not re.match(r"^\d+[kKmM]?$", v):
            raise ValueError(
                f"Invalid max_size '{v}'. Expected bytes or a k/M suffixed size, e.g. 512k, 2M"
            )
        return v
