from importlib.metadata import PackageNotFoundError, version

from .app import Cli
from .cli import (
    ArgumentSpec,
    CommandHelper,
    CommandSchema,
    OptionSpec,
    OptionType,
    ParseResult,
    parse_tokens,
    render_usage,
)
from .commands import Command, CommandProtocol, CommandRegistry, HelpCommand
from .config import CliConfig, load_config
from .errors import (
    CliError,
    CommandRegistrationError,
    ConfigError,
    MissingArgumentError,
    OrderError,
    UnknownCommandError,
    UnknownOptionError,
)
from .output import BufferedOutput, ConsoleOutput, NullOutput, OutputWriter

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("cmdinfra")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Dispatch
    "Cli",
    "CliConfig",
    "load_config",
    # Commands
    "Command",
    "CommandProtocol",
    "CommandRegistry",
    "HelpCommand",
    # Parsing
    "ArgumentSpec",
    "CommandHelper",
    "CommandSchema",
    "OptionSpec",
    "OptionType",
    "ParseResult",
    "parse_tokens",
    "render_usage",
    # Output
    "BufferedOutput",
    "ConsoleOutput",
    "NullOutput",
    "OutputWriter",
    # Errors
    "CliError",
    "CommandRegistrationError",
    "ConfigError",
    "MissingArgumentError",
    "OrderError",
    "UnknownCommandError",
    "UnknownOptionError",
]
