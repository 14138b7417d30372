"""Enumeration type definitions"""

from enum import Enum


class DataType(str, Enum):
    """Declared storage types of model fields"""

    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    DATEINTERVAL = "DATEINTERVAL"
    DATETIME = "DATETIME"
    DECIMAL = "DECIMAL"
    FILE = "FILE"
    FLOAT = "FLOAT"
    INTEGER = "INTEGER"
    SET = "SET"
    TEXT = "TEXT"
    HTML = "HTML"
    JSON = "JSON"
    VARCHAR = "VARCHAR"


class WidgetKind(str, Enum):
    """Input control categories understood by the rendering framework"""

    PLAIN_TEXT = "plain-text"
    MULTILINE_TEXT = "multiline-text"
    DATE = "date"
    DATE_TIME = "date-time"
    NUMBER = "number"
    INTEGER = "integer"
    FILE = "file"
    CHOICE = "choice"
    NONE = "none"
