"""
Logging for cmdinfra.

Extends Python's standard logging with:
- A custom TRACE level for parser internals
- Colored console output with ANSI escape sequences
- Structured extra fields rendered as ``[key:value]``
- Path-style logger names ("/", "/cli", "/cmd/<name>")
- Complete logging disable (level=False or level="false")
"""

import logging

from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

logging.addLevelName(LogConstants.CUSTOM_LEVELS["TRACE"], "TRACE")

__all__ = [
    "InvalidLogLevelError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
]
