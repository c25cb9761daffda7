"""
Configuration management for rfc-uuid.

Loads and validates configuration from rfc-uuid.toml files using Pydantic.
Environment variables prefixed with RFC_UUID_ override file values.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

CONFIG_FILENAME = "rfc-uuid.toml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class _SettingsGroup(BaseSettings):
    """Settings group where environment variables win over file values."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings, dotenv_settings, file_secret_settings


class OutputConfig(_SettingsGroup):
    """CLI output configuration."""

    model_config = SettingsConfigDict(env_prefix="RFC_UUID_OUTPUT_")

    format: Literal["string", "hex"] = Field(
        default="string", description="Default output form: hyphenated string or hex"
    )
    uppercase: bool = Field(default=False, description="Print hex digits in uppercase")


class ValidationConfig(_SettingsGroup):
    """Validation configuration."""

    model_config = SettingsConfigDict(env_prefix="RFC_UUID_VALIDATION_")

    strict_mode: bool = Field(
        default=True,
        description="Reject non-RFC 4122 version/variant instead of warning",
    )


class LoggingConfig(_SettingsGroup):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="RFC_UUID_LOGGING_")

    level: LogLevel = Field(default="WARNING", description="Root log level for the CLI")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class Config(BaseSettings):
    """Main configuration for rfc-uuid."""

    model_config = SettingsConfigDict(env_prefix="RFC_UUID_")

    output: OutputConfig = Field(default_factory=OutputConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_toml(cls, path: Path | str) -> Config:
        """
        Load configuration from TOML file.

        Each section is built as its settings group, so RFC_UUID_* environment
        variables still take precedence over the file.

        Args:
            path: Path to rfc-uuid.toml file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            tomllib.TOMLDecodeError: If config file is not valid TOML
            ValueError: If config file is invalid
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        groups = {
            "output": OutputConfig(**data.pop("output", {})),
            "validation": ValidationConfig(**data.pop("validation", {})),
            "logging": LoggingConfig(**data.pop("logging", {})),
        }
        return cls(**data, **groups)

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> Config:
        """
        Find and load configuration from rfc-uuid.toml.

        Searches for rfc-uuid.toml starting from start_dir and walking up
        parent directories until found or reaching filesystem root.

        Args:
            start_dir: Directory to start search (defaults to current directory)

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If no config file found
        """
        if start_dir is None:
            start_dir = Path.cwd()

        current = Path(start_dir).resolve()

        # Walk up directory tree
        while True:
            config_path = current / CONFIG_FILENAME
            if config_path.exists():
                return cls.from_toml(config_path)

            # Check if we've reached filesystem root
            parent = current.parent
            if parent == current:
                break
            current = parent

        raise FileNotFoundError(
            f"No {CONFIG_FILENAME} found in {start_dir} or parent directories."
        )

    def to_toml(self, path: Path | str) -> None:
        """
        Write configuration to TOML file.

        Args:
            path: Path to write rfc-uuid.toml
        """
        config_path = Path(path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        toml_content = f"""# rfc-uuid configuration

[output]
format = "{self.output.format}"
uppercase = {str(self.output.uppercase).lower()}

[validation]
strict_mode = {str(self.validation.strict_mode).lower()}

[logging]
level = "{self.logging.level}"
"""

        config_path.write_text(toml_content)

