"""Form resolution tests"""

import pytest

from flexform.constraints import Constraint, Email, NotBlank, default_registry
from flexform.errors import UnknownFieldError, UnknownValidatorError
from flexform.mapping import FieldMappingResolver
from flexform.models import (
    FieldDescriptor,
    FieldOptions,
    FieldSchema,
    FormLayout,
    LayoutEntry,
    ObjectSchema,
)
from flexform.registry import ModelRegistry


def make_resolver(fields, forms, object_name="Ticket", **kwargs):
    registry = ModelRegistry([ObjectSchema(name=object_name, fields=fields, forms=forms)])
    return FieldMappingResolver(registry, **kwargs)


@pytest.fixture
def ticket_resolver():
    fields = [
        FieldSchema(name="age", datatype="INTEGER", label="Age", required=True),
        FieldSchema(
            name="status",
            datatype="SET",
            options=[{"label": "Open", "value": "O"}, {"label": "Closed", "value": "C"}],
        ),
        FieldSchema(name="email", datatype="VARCHAR", label="E-mail", required=True),
        FieldSchema(name="notes", datatype="TEXT", label="Notes"),
        FieldSchema(name="archived", datatype="BOOLEAN", label="Archived"),
    ]
    forms = [
        FormLayout(
            name="edit",
            fields=[
                LayoutEntry(name="notes"),
                LayoutEntry(name="age"),
                LayoutEntry(name="status"),
                LayoutEntry(name="email", validators={"Email": {}}),
                LayoutEntry(name="archived"),
            ],
        ),
        FormLayout(name="age_only", fields=[LayoutEntry(name="age")]),
        FormLayout(name="status_only", fields=[LayoutEntry(name="status")]),
        FormLayout(name="stale", fields=[LayoutEntry(name="age"), LayoutEntry(name="gone")]),
    ]
    return make_resolver(fields, forms)


def test_required_integer_field(ticket_resolver):
    descriptors = ticket_resolver.resolve("Ticket", "age_only")

    assert descriptors == [
        FieldDescriptor(
            name="age",
            widget_kind="integer",
            options=FieldOptions(label="Age", required=True, constraints=[NotBlank()]),
        )
    ]


def test_set_field_with_options(ticket_resolver):
    (descriptor,) = ticket_resolver.resolve("Ticket", "status_only")

    assert descriptor.widget_kind == "choice"
    assert descriptor.options.to_dict() == {
        "label": None,
        "required": False,
        "constraints": [],
        "multiple": True,
        "choices": {"Open": "O", "Closed": "C"},
    }


def test_varchar_with_and_without_options():
    fields = [
        FieldSchema(name="plain", datatype="VARCHAR"),
        FieldSchema(name="picked", datatype="VARCHAR", options=[{"label": "A", "value": "a"}]),
    ]
    forms = [FormLayout(name="f", fields=[LayoutEntry(name="plain"), LayoutEntry(name="picked")])]

    descriptors = make_resolver(fields, forms).resolve("Ticket", "f")

    assert [d.widget_kind for d in descriptors] == ["plain-text", "choice"]


def test_validator_override_replaces_required_constraint(ticket_resolver):
    descriptors = ticket_resolver.resolve("Ticket", "edit")
    email = next(d for d in descriptors if d.name == "email")

    assert email.options.required is True
    assert email.options.constraints == [Email()]


def test_missing_form_yields_no_descriptors(ticket_resolver):
    assert ticket_resolver.resolve("Ticket", "does_not_exist") == []


def test_missing_object_yields_no_descriptors(ticket_resolver):
    assert ticket_resolver.resolve("Invoice", "edit") == []


def test_no_form_name_yields_no_descriptors(ticket_resolver):
    assert ticket_resolver.resolve("Ticket", None) == []


def test_unknown_field_aborts_resolution(ticket_resolver):
    with pytest.raises(UnknownFieldError) as exc_info:
        ticket_resolver.resolve("Ticket", "stale")

    err = exc_info.value
    assert err.object_name == "Ticket"
    assert err.field_name == "gone"
    assert err.form_name == "stale"
    assert "'gone'" in str(err) and "'stale'" in str(err)


def test_unknown_validator_aborts_resolution():
    fields = [FieldSchema(name="age", datatype="INTEGER")]
    forms = [
        FormLayout(
            name="f",
            fields=[LayoutEntry(name="age"), LayoutEntry(name="age", validators={"Nope": {}})],
        )
    ]

    with pytest.raises(UnknownValidatorError):
        make_resolver(fields, forms).resolve("Ticket", "f")


def test_descriptors_follow_layout_order(ticket_resolver):
    descriptors = ticket_resolver.resolve("Ticket", "edit")

    assert [d.name for d in descriptors] == ["notes", "age", "status", "email", "archived"]
    assert [d.widget_kind for d in descriptors] == [
        "multiline-text",
        "integer",
        "choice",
        "plain-text",
        "none",
    ]


def test_resolution_is_deterministic(ticket_resolver):
    first = ticket_resolver.resolve("Ticket", "edit")
    second = ticket_resolver.resolve("Ticket", "edit")

    assert first == second
    assert [d.to_dict() for d in first] == [d.to_dict() for d in second]


def test_same_field_can_appear_twice_with_different_overrides():
    fields = [FieldSchema(name="age", datatype="INTEGER", required=True)]
    forms = [
        FormLayout(
            name="f",
            fields=[
                LayoutEntry(name="age"),
                LayoutEntry(name="age", fieldtype="number", validators={}),
            ],
        )
    ]

    first, second = make_resolver(fields, forms).resolve("Ticket", "f")

    assert (first.widget_kind, first.options.constraints) == ("integer", [NotBlank()])
    assert (second.widget_kind, second.options.constraints) == ("number", [])


def test_resolver_uses_supplied_constraint_registry():
    class Positive(Constraint):
        type: str = "Positive"

    registry = default_registry.copy()
    registry.register("Positive", Positive)
    fields = [FieldSchema(name="age", datatype="INTEGER")]
    forms = [FormLayout(name="f", fields=[LayoutEntry(name="age", validators={"Positive": None})])]

    (descriptor,) = make_resolver(fields, forms, registry=registry).resolve("Ticket", "f")

    assert descriptor.options.constraints == [Positive()]
