"""
Factory for creating and configuring loggers.
"""

import logging
import sys
from typing import Any

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(config: LogConfig) -> Logger:
        """
        Create the root ("/") logger with the specified configuration.

        Args:
            config: Logger configuration

        Returns:
            Configured root logger
        """
        return LoggerFactory.create("/", config)

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        extra: dict[str, Any] | None = None,
        stream: Any = None,
    ) -> Logger:
        """
        Create a logger with the specified configuration.

        Loggers are standalone (not registered in the logging manager) and
        write to stderr unless another stream is given.

        Args:
            name: Logger name, path style (e.g. "/cmd/greet")
            config: Logger configuration
            extra: Pre-populated extra fields to include in all log records
            stream: Output stream (default: sys.stderr)

        Returns:
            Configured logger instance

        Example:
            >>> config = LogConfig.from_params(level="debug", colors=False)
            >>> lg = LoggerFactory.create("/cmd/greet", config)
            >>> lg.debug("resolved", extra={"token": "-v"})
            [12:34:56,789] [D] resolved [token:-v] [/cmd/greet]
        """
        logger = Logger(name, config, extra=extra)
        logger.propagate = False

        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(LogFormatter(config))
        logger.addHandler(handler)
        return logger

    @staticmethod
    def derive(
        parent: Logger, name: str, extra: dict[str, Any] | None = None
    ) -> Logger:
        """
        Create a child logger sharing the parent's config and handlers.

        Args:
            parent: Logger to derive from
            name: Name segment appended to the parent name
            extra: Extra fields merged over the parent's extra fields

        Returns:
            Derived logger instance
        """
        base = parent.name.rstrip("/")
        merged = parent.extra
        if extra:
            merged.update(extra)
        child = Logger(f"{base}/{name}", parent.config, extra=merged)
        child.propagate = False
        child.disabled = parent.disabled
        for handler in parent.handlers:
            child.addHandler(handler)
        return child
