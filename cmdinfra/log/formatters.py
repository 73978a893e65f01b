"""
Log formatter for the logging system.

Renders records as ``[time] [L] message [key:value] [logger-name]`` with
optional per-level ANSI colors.
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants

# Record attribute holding the merged extra fields (set by Logger)
EXTRA_ATTR = "_cmdinfra_extra"


def _format_extra(extra: dict[str, Any] | None) -> str:
    """Format extra fields as sorted ``[key:value]`` groups."""
    if not extra:
        return ""
    parts = []
    for key in sorted(extra):
        value = extra[key]
        if isinstance(value, Exception):
            value = value.__class__.__name__
        parts.append(f"[{key}:{value}]")
    return " " + " ".join(parts)


class LogFormatter(logging.Formatter):
    """Formatter that appends extra fields and the logger name."""

    def __init__(self, config: LogConfig) -> None:
        """
        Initialize the formatter.

        Args:
            config: Logger configuration (colors flag is read from it)
        """
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._config = config

    def format(self, record: logging.LogRecord) -> str:
        """Format a record, coloring it when enabled."""
        line = super().format(record)
        line += _format_extra(getattr(record, EXTRA_ATTR, None))

        if not self._config.colors:
            return f"{line} [{record.name}]"

        col = LogConstants.COLORS.get(record.levelno, "")
        return (
            f"{col}{line}{LogConstants.RESET} "
            f"{LogConstants.GRAY}[{record.name}]{LogConstants.RESET}"
        )
