"""
Built-in help command.

Lists registered commands with their descriptions, or prints the detailed
help of one command.
"""

from __future__ import annotations

from typing import Any

from ..errors import UnknownCommandError
from .base import Command
from .registry import CommandRegistry

_HELP_INTRO = (
    "The help command can be used to get instructions on how to run any of the "
    "configured commands."
)


class HelpCommand(Command):
    """Show the command list, or help for a single command."""

    name = "help"
    summary = "Show help"

    def __init__(self, registry: CommandRegistry, **kwargs: Any) -> None:
        """
        Initialize the help command.

        Args:
            registry: Registry to list and instantiate commands from
            **kwargs: Command constructor arguments
        """
        super().__init__(**kwargs)
        self.registry = registry

    def help(self) -> str:
        return f"{_HELP_INTRO}\n\n{self.usage()}"

    def configure(self) -> None:
        self.add_argument("command", False, "Command name to show help for")

    def execute(self) -> int:
        command_name = self.argument("command")
        if command_name:
            self._write_command_help(command_name)
        else:
            self._write_command_list()
        return 0

    def _create(self, name: str) -> Any:
        return self.registry.create(name, prog=self.prog, command=name, out=self.out)

    def _write_command_help(self, name: str) -> None:
        if name not in self.registry:
            raise UnknownCommandError(name)

        command = self._create(name)
        command.configure()
        self.lg.debug("showing command help", extra={"command": name})
        self.out.write(command.help())

    def _write_command_list(self) -> None:
        self.out.write("List of commands:")
        for name in self.registry.names():
            self.out.write(f"  {name} - {self._create(name).description()}")
        self.out.write()
        self.out.write(
            "To get detailed help for a command, "
            f"run '{self.prog} help <command name>'"
        )
