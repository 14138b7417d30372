"""Exception definitions for FlexForm"""


class FlexFormException(Exception):
    """Base exception for all FlexForm errors.

    All custom exceptions in FlexForm inherit from this class.
    Use this as a catch-all for FlexForm-specific errors when you don't need
    to handle specific exception types.
    """

    pass


class ConfigException(FlexFormException):
    """Raised when configuration validation or loading fails.

    Use this exception when:
    - The configuration file cannot be found
    - The TOML syntax is invalid
    - Configuration validation fails (missing required fields, invalid values)
    """

    pass


class UnknownFieldError(FlexFormException):
    """Raised when a form layout references a field the model does not define.

    This points at a stale or malformed layout, so resolution of the whole
    form is aborted rather than skipping the entry.
    """

    def __init__(self, object_name: str, field_name: str, form_name: str | None = None):
        self.object_name = object_name
        self.field_name = field_name
        self.form_name = form_name
        where = f"form '{form_name}' of " if form_name else ""
        super().__init__(
            f"Unknown field '{field_name}' referenced by {where}object '{object_name}'"
        )


class UnknownValidatorError(FlexFormException):
    """Raised when a validator identifier has no registered constraint kind."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unknown validator: '{identifier}'")


class InvalidValidatorOptionsError(ConfigException):
    def __init__(self, identifier: str, reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid options for validator '{identifier}': {reason}")
