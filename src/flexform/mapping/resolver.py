"""Form layout to field descriptor resolution."""

from __future__ import annotations

import logging
from typing import Optional

from ..constraints import ConstraintRegistry, default_registry
from ..errors import UnknownFieldError
from ..models import FieldDescriptor, FieldSchema, LayoutEntry
from ..registry import SchemaSource
from .options import build_options
from .widgets import resolve_widget_kind

logger = logging.getLogger(__name__)


class FieldMappingResolver:
    """Derives form field descriptors from model definitions and form layouts.

    Resolution is a pure computation over the schema source: the same object,
    form and source always yield equal descriptor lists, in layout order.
    """

    def __init__(
        self,
        source: SchemaSource,
        registry: ConstraintRegistry = default_registry,
    ):
        self.source = source
        self.registry = registry

    def resolve_field(self, entry: LayoutEntry, field: FieldSchema) -> FieldDescriptor:
        return FieldDescriptor(
            name=field.name,
            widget_kind=resolve_widget_kind(entry, field),
            options=build_options(entry, field, self.registry),
        )

    def resolve(
        self, object_name: str, form_name: Optional[str]
    ) -> list[FieldDescriptor]:
        """Resolve all fields of a form.

        Args:
            object_name: Identifier of the model object the form belongs to
            form_name: Name of the form layout; None builds nothing

        Returns:
            Field descriptors in layout order, empty when the form is not configured

        Raises:
            UnknownFieldError: a layout entry references a field the object lacks
            UnknownValidatorError: a validator override has no registered constraint
        """
        if form_name is None:
            return []

        layout = self.source.get_form(object_name, form_name)
        if layout is None:
            logger.info(
                f"No form configuration '{form_name}' for object '{object_name}', "
                "skipping form fields"
            )
            return []

        descriptors = []
        for entry in layout.fields:
            field = self.source.get_field(object_name, entry.name)
            if field is None:
                raise UnknownFieldError(object_name, entry.name, form_name)

            descriptor = self.resolve_field(entry, field)
            logger.debug(
                f"Resolved {object_name}.{form_name}.{field.name} -> {descriptor.widget_kind}"
            )
            descriptors.append(descriptor)

        return descriptors
