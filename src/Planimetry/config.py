# ============================================================================
# Planimetry - Configuration Management
#
# Purpose: Load and manage configuration from YAML and env vars
# Inputs: YAML files, environment variables
# Outputs: Config model with all settings
# Dependencies: pyyaml, pydantic, pathlib
# Usage: config = Config.from_default() or Config.from_yaml("path.yaml")
#
# Changelog:
#   2026-03-02: Initial configuration system
#   2026-03-06: Added DisplayConfig (area precision) and SinkConfig.console_color
#   2026-03-11: Invalid YAML or field values now raise ConfigurationError
#   2026-03-14: Env overrides no longer mutate the caller's mapping
# ============================================================================

import os
from pathlib import Path
from typing import Any, Dict, Literal

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, Field, ValidationError, field_validator

from Planimetry.errors import ConfigurationError


class LoggingConfig(BaseModel):
    """Diagnostic logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if value.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown logging level: {value}")
        return value.upper()


class SinkConfig(BaseModel):
    """Log sink configuration."""

    type: Literal["console", "file", "both"] = "both"
    file_path: str = "log.txt"
    encoding: str = "utf-8"
    console_color: bool = True  # ANSI green


class DisplayConfig(BaseModel):
    """Figure output configuration."""

    precision: int = Field(default=2, ge=0, le=12)


class Config(BaseModel):
    """Root configuration object."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    sink: SinkConfig = Field(default_factory=SinkConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """
        Load configuration from a YAML file with environment variable overrides.

        Args:
            path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If YAML or field values are invalid
        """
        yaml_path = Path(path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}", details=str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """
        Build configuration from a plain mapping, applying environment overrides.

        Raises:
            ConfigurationError: If a value fails validation
        """
        data = cls._apply_env_overrides(data)
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError("Invalid configuration", details=str(e)) from e

    @classmethod
    def from_default(cls) -> "Config":
        """
        Load configuration from default config file.

        Returns:
            Config instance
        """
        package_root = Path(__file__).parent.parent.parent
        default_config = package_root / "configs" / "default.yaml"

        if default_config.exists():
            return cls.from_yaml(str(default_config))
        else:
            # Defaults still honour env overrides
            return cls.from_dict({})

    @classmethod
    def _apply_env_overrides(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables follow the pattern:
        PLANIMETRY_<SECTION>_<KEY>=value

        Field names may contain underscores (e.g. file_path), so the section is
        matched against the known section names rather than split naively.

        Examples:
            PLANIMETRY_SINK_TYPE=console        -> data["sink"]["type"]
            PLANIMETRY_SINK_FILE_PATH=app.log   -> data["sink"]["file_path"]
            PLANIMETRY_DISPLAY_PRECISION=3      -> data["display"]["precision"]

        Args:
            data: Configuration dictionary

        Returns:
            New configuration dictionary; the input is left unchanged
        """
        data = {key: dict(value) if isinstance(value, dict) else value for key, value in data.items()}
        prefix = "PLANIMETRY_"
        sections = sorted(cls.model_fields.keys(), key=len, reverse=True)

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(prefix):
                continue

            remainder = env_key[len(prefix) :].lower()

            for section in sections:
                section_prefix = section + "_"
                if not remainder.startswith(section_prefix):
                    continue

                field = remainder[len(section_prefix) :]
                section_data = data.setdefault(section, {})
                if not isinstance(section_data, dict):
                    break
                section_data[field] = cls._parse_env_value(env_value)
                break

        return data

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        """
        Parse environment variable value to appropriate type.

        Args:
            value: String value from environment

        Returns:
            Parsed value (str, int, float, or bool)
        """
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value
