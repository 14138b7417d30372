"""Configuration file loading and validation."""

import logging
from pathlib import Path
from typing import List

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from .constraints import default_registry
from .consts import ENV_NESTED_DELIMITER, ENV_PREFIX, LOG_FILE_DEFAULT
from .errors import ConfigException, FlexFormException
from .models import ObjectSchema
from .registry import ModelRegistry
from .utils import format_validation_errors

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Application configuration."""

    log_file: str = Field(default=LOG_FILE_DEFAULT)
    objects: List[ObjectSchema] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter=ENV_NESTED_DELIMITER,
    )

    @field_validator("objects", mode="before")
    @classmethod
    def coerce_indexed_dict_to_list(cls, v):
        if v is None:
            return []
        if isinstance(v, dict):
            try:
                items = sorted(v.items(), key=lambda kv: int(kv[0]))
            except ValueError:
                return list(v.values())
            return [value for _key, value in items]
        return v

    @model_validator(mode="after")
    def validate_form_validators(self) -> "Config":
        for obj in self.objects:
            for form in obj.forms:
                for entry in form.fields:
                    for identifier, options in (entry.validators or {}).items():
                        try:
                            default_registry.create(identifier, options)
                        except FlexFormException as e:
                            raise ValueError(
                                f"{obj.name}.{form.name}.{entry.name}: {e}"
                            ) from e
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load_from_file(cls, config_path: str) -> "Config":
        """Load configuration from specified path."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Configuration file not found: {config_path}")

        class _Config(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix=ENV_PREFIX,
                env_nested_delimiter=ENV_NESTED_DELIMITER,
            )

        try:
            config = _Config()
        except ValidationError as e:
            raise ConfigException(
                format_validation_errors("Configuration validation failed:", e.errors())
            ) from e
        except ValueError as e:
            # malformed TOML surfaces as tomllib.TOMLDecodeError
            raise ConfigException(f"Invalid configuration file {config_path}: {e}") from e

        logger.debug(f"Loaded {len(config.objects)} object definitions from {config_path}")
        return config

    def get_registry(self) -> ModelRegistry:
        return ModelRegistry(self.objects)
