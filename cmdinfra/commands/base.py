"""
Base command class.

Subclasses set ``name`` and ``summary``, declare their options and arguments
in configure(), and read parsed values in execute().

Example:
    class CatCommand(Command):
        name = "cat"
        summary = "Print a file"

        def configure(self) -> None:
            self.add_option("number", "n", "bool", False, "Number lines")
            self.add_argument("file", True, "File to print")

        def execute(self) -> int:
            self.out.write(Path(self.argument("file")).read_text())
            return 0
"""

from __future__ import annotations

from collections.abc import Sequence

from ..cli import ArgumentSpec, CommandHelper, OptionSpec, OptionType
from ..constants import DEFAULT_PROG
from ..log import LogConfig, Logger, LoggerFactory
from ..output import ConsoleOutput, OutputWriter
from .protocol import CommandProtocol


class Command(CommandProtocol):
    """Command with a CommandHelper, an output writer and a logger."""

    name: str = ""
    summary: str = ""

    def __init__(
        self,
        tokens: Sequence[str] = (),
        prog: str = DEFAULT_PROG,
        command: str | None = None,
        out: OutputWriter | None = None,
        lg: Logger | None = None,
    ) -> None:
        """
        Initialize the command.

        Args:
            tokens: Raw tokens following the command name
            prog: Program name for usage text
            command: Name the command was invoked as (default: ``name``)
            out: Output writer (default: stdout)
            lg: Logger (default: a warning-level logger named /cmd/<name>)
        """
        self._prog = prog
        self._command = command or self.name
        self.out: OutputWriter = out if out is not None else ConsoleOutput()
        self.lg: Logger = (
            lg
            if lg is not None
            else LoggerFactory.create(f"/cmd/{self._command}", LogConfig())
        )
        self.helper = CommandHelper(
            tokens, prog=prog, command=self._command, lg=self.lg
        )

    @property
    def prog(self) -> str:
        return self._prog

    @property
    def command(self) -> str:
        return self._command

    def add_option(
        self,
        name: str,
        short: str,
        kind: OptionType | str,
        default: bool | str,
        help: str = "",
    ) -> OptionSpec:
        return self.helper.add_option(name, short, kind, default, help)

    def add_argument(
        self, name: str, is_required: bool, help: str = ""
    ) -> ArgumentSpec:
        return self.helper.add_argument(name, is_required, help)

    def option(self, name: str) -> bool | str | None:
        """Get a parsed option value."""
        return self.helper.get_option_value(name)

    def argument(self, name: str) -> str | None:
        """Get a parsed argument value."""
        return self.helper.get_argument_value(name)

    def usage(self) -> str:
        return self.helper.get_usage()

    def description(self) -> str:
        return self.summary

    def help(self) -> str:
        return f"{self.description()}\n\n{self.usage()}"

    def configure(self) -> None:
        """Declare nothing by default."""
        pass
