"""
Configuration loading for cmdinfra applications.

Settings come from an optional YAML file, then environment variable
overrides, and are validated with pydantic.

Environment Variable Override Format:
    CMDINFRA_<SECTION>_<KEY>=value

Examples:
    CMDINFRA_LOGGING_LEVEL=debug
    CMDINFRA_DEFAULT_COMMAND=help   (top-level keys may contain underscores)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import DEFAULT_COMMAND, ENV_PREFIX, MAX_CONFIG_SIZE_BYTES
from .errors import ConfigError
from .log import LogConstants


class LoggingSettings(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="warning", description="Log level name")
    colors: bool = Field(default=True, description="Use ANSI colors in log output")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: Any) -> Any:
        """Validate log level is a recognized level."""
        if isinstance(v, str) and v.lower() not in LogConstants.LEVEL_NAMES:
            valid = ", ".join(LogConstants.LEVEL_NAMES)
            raise ValueError(f"Invalid log level '{v}'. Must be one of: {valid}")
        return v.lower()

    model_config = ConfigDict(extra="forbid")


class CliConfig(BaseModel):
    """Configuration for a Cli dispatcher."""

    prog: str | None = Field(
        default=None, description="Program name in usage (default: argv[0] basename)"
    )
    default_command: str = Field(
        default=DEFAULT_COMMAND, description="Command run when none is given"
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = ConfigDict(extra="forbid")


# Helper functions for load_config()


def _read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping from disk."""
    if not path.is_file():
        raise ConfigError(f"config file '{path}' not found")

    file_size = path.stat().st_size
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            f"config file '{path}' is {file_size} bytes, "
            f"exceeding maximum size of {MAX_CONFIG_SIZE_BYTES} bytes"
        )

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"cannot parse '{path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"'{path}' must contain a mapping at the top level")
    return data


def _env_key_to_path(env_key: str, env_prefix: str) -> list[str]:
    """
    Convert environment variable key to configuration path.

    A key naming a top-level field (e.g. ``DEFAULT_COMMAND``) maps to that
    field; otherwise the first underscore separates section and key.
    """
    key = env_key[len(env_prefix) :].lower()
    if key in CliConfig.model_fields:
        return [key]
    return key.split("_", 1)


def _set_nested_value(data: dict[str, Any], path: list[str], value: Any) -> None:
    """Set a value in a nested dictionary, creating sections as needed."""
    current = data
    for part in path[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[path[-1]] = value


def _apply_env_overrides(data: dict[str, Any], env_prefix: str) -> dict[str, Any]:
    """Apply environment variable overrides to configuration data."""
    for env_key, env_value in os.environ.items():
        if env_key.startswith(env_prefix) and len(env_key) > len(env_prefix):
            _set_nested_value(data, _env_key_to_path(env_key, env_prefix), env_value)
    return data


def load_config(
    path: str | Path | None = None,
    enable_env_overrides: bool = True,
    env_prefix: str = ENV_PREFIX,
) -> CliConfig:
    """
    Load and validate configuration.

    Args:
        path: Optional YAML file; defaults are used when None
        enable_env_overrides: Whether to apply environment variable overrides
        env_prefix: Prefix for environment variables (default: 'CMDINFRA_')

    Returns:
        CliConfig: Validated configuration

    Raises:
        ConfigError: If the file is missing, too large, malformed, or invalid
    """
    data = _read_yaml(Path(path)) if path is not None else {}
    if enable_env_overrides:
        data = _apply_env_overrides(data, env_prefix)

    try:
        return CliConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
