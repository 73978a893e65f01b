"""
Command registration and lookup.

The registry is a plain mapping from command name to a factory: any callable
accepting the Command constructor keywords and returning a command, usually
the command class itself.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..constants import COMMAND_NAME_PATTERN, MAX_COMMAND_NAME_LENGTH
from ..errors import CommandRegistrationError, UnknownCommandError
from .protocol import CommandProtocol

CommandFactory = Callable[..., CommandProtocol]


def _validate_command_name(name: str) -> None:
    """Validate command name format."""
    if not name:
        raise CommandRegistrationError("", "Command must have a name")

    if len(name) > MAX_COMMAND_NAME_LENGTH:
        raise CommandRegistrationError(
            name,
            f"Command name exceeds maximum length of {MAX_COMMAND_NAME_LENGTH} characters",
        )

    if not COMMAND_NAME_PATTERN.fullmatch(name):
        raise CommandRegistrationError(
            name,
            "Command name must start with a lowercase letter and contain only "
            "lowercase letters, numbers, underscores, and hyphens (e.g., 'my-cmd', 'cmd_1')",
        )


class CommandRegistry:
    """Mapping of command names to command factories."""

    def __init__(self) -> None:
        self._factories: dict[str, CommandFactory] = {}

    def register(self, name: str, factory: CommandFactory) -> None:
        """
        Register a command factory under a name.

        Registering an existing name replaces its factory.

        Args:
            name: Command name used on the command line
            factory: Callable taking tokens, prog, command, out and lg keywords
                and returning a command instance

        Raises:
            CommandRegistrationError: If the name is invalid or factory is not callable
        """
        _validate_command_name(name)
        if not callable(factory):
            raise CommandRegistrationError(name, "Command factory must be callable")
        self._factories[name] = factory

    def get(self, name: str) -> CommandFactory | None:
        """Get a command factory by name."""
        return self._factories.get(name)

    def create(self, name: str, **kwargs: Any) -> CommandProtocol:
        """
        Instantiate a registered command.

        Args:
            name: Command name
            **kwargs: Keyword arguments passed to the factory

        Returns:
            CommandProtocol: New command instance

        Raises:
            UnknownCommandError: If no command is registered under the name
        """
        factory = self._factories.get(name)
        if factory is None:
            raise UnknownCommandError(name)
        return factory(**kwargs)

    def names(self) -> list[str]:
        """List registered command names in registration order."""
        return list(self._factories.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)
