"""
Constants for the logging system.

Format strings, level names and ANSI sequences used by the cmdinfra loggers.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    # Default format string (time, level initial, message)
    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"

    # Custom log levels
    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5}

    # Log level names for resolution
    LEVEL_NAMES: dict[str, int | bool] = {
        "trace": 5,
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
        "false": False,  # Special value to disable all logging
    }

    # ANSI escape sequences
    RESET: str = "\x1b[0m"
    GRAY: str = "\x1b[38;5;241m"

    # Color per level
    COLORS: dict[int, str] = {
        5: "\x1b[38;5;244m",
        logging.DEBUG: "\x1b[38;5;32m",
        logging.INFO: "\x1b[36m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[35m",
    }
