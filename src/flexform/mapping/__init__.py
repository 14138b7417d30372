from __future__ import annotations

from .options import build_options
from .resolver import FieldMappingResolver
from .widgets import DATATYPE_WIDGETS, resolve_widget_kind

__all__ = [
    "DATATYPE_WIDGETS",
    "FieldMappingResolver",
    "build_options",
    "resolve_widget_kind",
]
