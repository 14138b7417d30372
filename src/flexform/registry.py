"""Model definition lookup."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol

from .errors import ConfigException
from .models import FieldSchema, FormLayout, ObjectSchema

logger = logging.getLogger(__name__)


class SchemaSource(Protocol):
    """Read access to field definitions and form layouts of model objects.

    Both lookups return None when nothing is defined under the given names.
    """

    def get_field(self, object_name: str, field_name: str) -> Optional[FieldSchema]: ...

    def get_form(self, object_name: str, form_name: str) -> Optional[FormLayout]: ...


class ModelRegistry:
    """In-memory SchemaSource over a set of object definitions."""

    def __init__(self, objects: Iterable[ObjectSchema] = ()):
        self._objects: dict[str, ObjectSchema] = {}
        for obj in objects:
            if obj.name in self._objects:
                raise ConfigException(f"Duplicate object definition: '{obj.name}'")
            self._objects[obj.name] = obj
        logger.debug(f"Model registry loaded with {len(self._objects)} objects")

    def __contains__(self, object_name: object) -> bool:
        return object_name in self._objects

    def objects(self) -> list[ObjectSchema]:
        return list(self._objects.values())

    def get_object(self, object_name: str) -> Optional[ObjectSchema]:
        return self._objects.get(object_name)

    def get_field(self, object_name: str, field_name: str) -> Optional[FieldSchema]:
        obj = self._objects.get(object_name)
        if obj is None:
            return None
        return obj.get_field(field_name)

    def get_form(self, object_name: str, form_name: str) -> Optional[FormLayout]:
        obj = self._objects.get(object_name)
        if obj is None:
            return None
        return obj.get_form(form_name)
