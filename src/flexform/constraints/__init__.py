from __future__ import annotations

from .base import Constraint
from .registry import (
    ConstraintRegistry,
    create_constraint,
    default_registry,
    register_constraint,
)
from .builtin import (
    Choice,
    Email,
    File,
    Length,
    NotBlank,
    NotNull,
    Range,
    Regex,
    Url,
)

__all__ = [
    "Choice",
    "Constraint",
    "ConstraintRegistry",
    "Email",
    "File",
    "Length",
    "NotBlank",
    "NotNull",
    "Range",
    "Regex",
    "Url",
    "create_constraint",
    "default_registry",
    "register_constraint",
]
