"""
Error classes for the cmdinfra package.

Every failure raised by schema declaration, token parsing, configuration
loading and command dispatch derives from CliError, so a dispatcher can
catch one type and present it.
"""

from typing import Any


class CliError(Exception):
    """Base exception for cmdinfra package."""

    pass


class OrderError(CliError):
    """Raised when an option or argument is declared out of order."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Cannot declare '{name}': {reason}")


class UnknownOptionError(CliError):
    """Raised when an option-shaped token matches no declared option."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown option '{token}'")


class MissingArgumentError(CliError):
    """Raised when a required positional argument receives no token."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Argument '{name}' is required")


class UnknownCommandError(CliError):
    """Raised when a command name is not registered."""

    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(f"Unknown command '{name}'")


class CommandRegistrationError(CliError):
    """Raised when command registration fails."""

    def __init__(self, name: str, reason: str):
        self.command_name = name
        self.reason = reason
        super().__init__(f"Failed to register command '{name}': {reason}")


class ConfigError(CliError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str):
        super().__init__(f"Configuration error: {message}")
