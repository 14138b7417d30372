"""Widget kind resolution for model fields."""

from __future__ import annotations

import logging

from ..enums import DataType, WidgetKind
from ..models import FieldSchema, LayoutEntry

logger = logging.getLogger(__name__)

# VARCHAR is resolved separately: it depends on the presence of options.
DATATYPE_WIDGETS: dict[str, WidgetKind] = {
    DataType.BOOLEAN.value: WidgetKind.NONE,
    DataType.DATE.value: WidgetKind.DATE,
    DataType.DATEINTERVAL.value: WidgetKind.PLAIN_TEXT,
    DataType.DATETIME.value: WidgetKind.DATE_TIME,
    DataType.DECIMAL.value: WidgetKind.NUMBER,
    DataType.FILE.value: WidgetKind.FILE,
    DataType.FLOAT.value: WidgetKind.NUMBER,
    DataType.INTEGER.value: WidgetKind.INTEGER,
    DataType.SET.value: WidgetKind.CHOICE,
    DataType.TEXT.value: WidgetKind.MULTILINE_TEXT,
    DataType.HTML.value: WidgetKind.MULTILINE_TEXT,
    DataType.JSON.value: WidgetKind.MULTILINE_TEXT,
}


def widget_for_datatype(field: FieldSchema) -> WidgetKind:
    if field.datatype == DataType.VARCHAR:
        if field.options is not None:
            return WidgetKind.CHOICE
        return WidgetKind.PLAIN_TEXT

    if field.datatype == DataType.BOOLEAN:
        logger.debug(
            f"BOOLEAN field '{field.name}' has no widget mapping, "
            "leaving the widget to the framework default"
        )

    kind = DATATYPE_WIDGETS.get(field.datatype)
    if kind is None:
        logger.warning(
            f"No widget mapping for datatype '{field.datatype}' of field '{field.name}', "
            "leaving the widget to the framework default"
        )
        return WidgetKind.NONE
    return kind


def resolve_widget_kind(entry: LayoutEntry, field: FieldSchema) -> str:
    """Return the widget kind for a field.

    An explicit ``fieldtype`` on the layout entry is returned verbatim without
    checking it against the datatype. Otherwise the kind follows from the
    field's datatype; BOOLEAN and unrecognized datatypes resolve to "none".
    """
    if entry.fieldtype is not None:
        return entry.fieldtype

    return widget_for_datatype(field).value
