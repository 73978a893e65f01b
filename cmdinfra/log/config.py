"""
Configuration for the logging system.

LogConfig is immutable so that a logger and its formatter always agree on
the settings they were created with.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


@dataclass(frozen=True)
class LogConfig:
    """Immutable logger configuration."""

    level: int | bool = logging.WARNING  # False disables logging
    colors: bool = True

    @staticmethod
    def _resolve_level(level: str | int | bool) -> int | bool:
        """Resolve level parameter to int or False."""
        if isinstance(level, bool):
            return False if not level else logging.INFO
        if isinstance(level, str):
            if level.isnumeric():
                return int(level)
            name = level.lower()
            if name in LogConstants.LEVEL_NAMES:
                return LogConstants.LEVEL_NAMES[name]
            raise InvalidLogLevelError(level)
        return level

    @classmethod
    def from_params(cls, level: str | int | bool, colors: bool = True) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable logging)
            colors: Whether to enable colored output

        Returns:
            LogConfig instance
        """
        return cls(level=cls._resolve_level(level), colors=colors)

    @classmethod
    def from_config(cls, config_dict: dict[str, Any]) -> LogConfig:
        """
        Create LogConfig from a ``logging`` configuration section.

        Args:
            config_dict: Mapping with optional ``level`` and ``colors`` keys

        Returns:
            LogConfig instance
        """
        return cls.from_params(
            level=config_dict.get("level", "warning"),
            colors=config_dict.get("colors", True),
        )
