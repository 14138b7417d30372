"""Widget option assembly for model fields."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..constraints import Constraint, ConstraintRegistry, NotBlank, default_registry
from ..enums import DataType
from ..models import FieldOptions, FieldSchema, LayoutEntry

logger = logging.getLogger(__name__)


def datatype_options(field: FieldSchema) -> dict[str, Any]:
    match field.datatype:
        case DataType.SET:
            return {"multiple": True}
        case _:
            return {}


def choice_options(field: FieldSchema) -> Optional[dict[str, Any]]:
    """Map option labels to values in declaration order, or None without options."""
    if field.options is None:
        return None

    choices: dict[str, Any] = {}
    for option in field.options:
        choices[option.label] = option.value
    return choices


def constraint_options(
    entry: LayoutEntry,
    required: bool,
    registry: ConstraintRegistry = default_registry,
) -> list[Constraint]:
    """Resolve the constraint list for a field.

    Validators configured on the layout entry replace the required-derived
    NotBlank constraint instead of being appended to it.
    """
    constraints: list[Constraint] = []
    if required is True:
        constraints.append(NotBlank())

    if entry.validators is not None:
        constraints = [
            registry.create(identifier, options)
            for identifier, options in entry.validators.items()
        ]
        logger.debug(
            f"Validators of field '{entry.name}' overridden by layout: "
            f"{', '.join(entry.validators) or '(none)'}"
        )

    return constraints


def build_options(
    entry: LayoutEntry,
    field: FieldSchema,
    registry: ConstraintRegistry = default_registry,
) -> FieldOptions:
    required = field.required
    return FieldOptions(
        label=field.label,
        required=required,
        constraints=constraint_options(entry, required, registry),
        choices=choice_options(field),
        **datatype_options(field),
    )
