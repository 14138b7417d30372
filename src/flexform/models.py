"""Model definitions, form layouts and resolved field descriptors."""

from __future__ import annotations

from collections import Counter
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializeAsAny,
    StrictBool,
    TypeAdapter,
    model_validator,
)

from .constraints import Constraint


_choices_adapter = TypeAdapter(dict[str, Any])


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class FieldOption(_Frozen):
    label: str
    value: Any


class FieldSchema(_Frozen):
    """A field as declared by the model definition."""

    name: str
    datatype: str
    label: Optional[str] = None
    required: StrictBool = False
    options: Optional[list[FieldOption]] = None


class LayoutEntry(_Frozen):
    """A field reference inside a form layout, with per-form overrides."""

    name: str
    fieldtype: Optional[str] = None
    validators: Optional[dict[str, Optional[dict[str, Any]]]] = None


class FormLayout(_Frozen):
    name: str
    fields: list[LayoutEntry] = Field(default_factory=list)


class ObjectSchema(_Frozen):
    name: str
    fields: list[FieldSchema] = Field(default_factory=list)
    forms: list[FormLayout] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_names(self) -> "ObjectSchema":
        for kind, names in (
            ("field", [f.name for f in self.fields]),
            ("form", [f.name for f in self.forms]),
        ):
            duplicates = sorted(n for n, count in Counter(names).items() if count > 1)
            if duplicates:
                raise ValueError(
                    f"Duplicate {kind} names in object '{self.name}': {', '.join(duplicates)}"
                )
        return self

    def get_field(self, name: str) -> Optional[FieldSchema]:
        return next((f for f in self.fields if f.name == name), None)

    def get_form(self, name: str) -> Optional[FormLayout]:
        return next((f for f in self.forms if f.name == name), None)


class FieldOptions(_Frozen):
    """Widget options assembled for a single field."""

    label: Optional[str] = None
    required: bool = False
    constraints: list[SerializeAsAny[Constraint]] = Field(default_factory=list)
    multiple: Optional[bool] = None
    choices: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "label": self.label,
            "required": self.required,
            "constraints": [c.to_dict() for c in self.constraints],
        }
        if self.multiple is not None:
            data["multiple"] = self.multiple
        if self.choices is not None:
            data["choices"] = _choices_adapter.dump_python(self.choices, mode="json")
        return data


class FieldDescriptor(_Frozen):
    name: str
    widget_kind: str
    options: FieldOptions

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "widget_kind": self.widget_kind,
            "options": self.options.to_dict(),
        }
