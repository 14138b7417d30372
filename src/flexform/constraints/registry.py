"""Validator identifier to constraint factory registry."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from pydantic import ValidationError

from ..errors import InvalidValidatorOptionsError, UnknownValidatorError
from .base import Constraint

logger = logging.getLogger(__name__)

ConstraintFactory = Callable[..., Constraint]


class ConstraintRegistry:
    """Maps validator identifiers used in form layouts to constraint factories."""

    def __init__(self, factories: Optional[Mapping[str, ConstraintFactory]] = None):
        self._factories: dict[str, ConstraintFactory] = dict(factories or {})

    def register(self, identifier: str, factory: ConstraintFactory) -> None:
        if identifier in self._factories:
            logger.debug(f"Replacing constraint factory for validator '{identifier}'")
        self._factories[identifier] = factory

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._factories

    def identifiers(self) -> list[str]:
        return sorted(self._factories)

    def copy(self) -> "ConstraintRegistry":
        return ConstraintRegistry(self._factories)

    def create(
        self, identifier: str, options: Optional[Mapping[str, Any]] = None
    ) -> Constraint:
        """Instantiate the constraint registered under ``identifier``.

        Args:
            identifier: Validator identifier, e.g. "NotBlank" or "Length"
            options: Constructor options; None means the kind's defaults

        Raises:
            UnknownValidatorError: identifier is not registered
            InvalidValidatorOptionsError: options are rejected by the constraint kind
        """
        factory = self._factories.get(identifier)
        if factory is None:
            raise UnknownValidatorError(identifier)

        if options is None:
            options = {}
        if not isinstance(options, Mapping):
            raise InvalidValidatorOptionsError(
                identifier, f"expected a table of options, got {type(options).__name__}"
            )

        try:
            return factory(**options)
        except ValidationError as e:
            reason = "; ".join(
                f"{'.'.join(str(item) for item in err['loc']) or identifier}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidValidatorOptionsError(identifier, reason) from e


default_registry = ConstraintRegistry()


def register_constraint(cls: type[Constraint]) -> type[Constraint]:
    """Class decorator registering a constraint kind under its ``type`` literal."""
    identifier = cls.model_fields["type"].default
    default_registry.register(identifier, cls)
    return cls


def create_constraint(
    identifier: str, options: Optional[Mapping[str, Any]] = None
) -> Constraint:
    return default_registry.create(identifier, options)
