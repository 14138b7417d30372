"""Derive form field descriptors from model definitions and form layouts."""

from .constraints import Constraint, ConstraintRegistry, register_constraint
from .enums import DataType, WidgetKind
from .errors import (
    ConfigException,
    FlexFormException,
    InvalidValidatorOptionsError,
    UnknownFieldError,
    UnknownValidatorError,
)
from .mapping import FieldMappingResolver
from .models import (
    FieldDescriptor,
    FieldOption,
    FieldOptions,
    FieldSchema,
    FormLayout,
    LayoutEntry,
    ObjectSchema,
)
from .registry import ModelRegistry, SchemaSource

__version__ = "0.1.0"

__all__ = [
    "ConfigException",
    "Constraint",
    "ConstraintRegistry",
    "DataType",
    "FieldDescriptor",
    "FieldMappingResolver",
    "FieldOption",
    "FieldOptions",
    "FieldSchema",
    "FlexFormException",
    "FormLayout",
    "InvalidValidatorOptionsError",
    "LayoutEntry",
    "ModelRegistry",
    "ObjectSchema",
    "SchemaSource",
    "UnknownFieldError",
    "UnknownValidatorError",
    "WidgetKind",
    "register_constraint",
]
