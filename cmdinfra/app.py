"""
Command dispatcher.

Cli maps the first command-line token after the program path to a
registered command, hands it the remaining tokens, and runs it.

Example:
    cli = Cli(prog="tool").add("cat", CatCommand)
    raise SystemExit(cli.main())
"""

from __future__ import annotations

import functools
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from .commands import CommandFactory, CommandRegistry, HelpCommand
from .config import CliConfig
from .constants import DEFAULT_PROG
from .errors import CliError
from .log import LogConfig, Logger, LoggerFactory
from .output import ConsoleOutput, OutputWriter


class Cli:
    """Registry-backed sub-command dispatcher with a built-in help command."""

    def __init__(
        self,
        prog: str | None = None,
        config: CliConfig | None = None,
        out: OutputWriter | None = None,
        err: TextIO | None = None,
        lg: Logger | None = None,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            prog: Program name for usage text (default: config, then argv[0])
            config: Dispatcher configuration (default: CliConfig())
            out: Output writer handed to commands (default: stdout)
            err: Stream for error messages (default: stderr)
            lg: Root logger (default: built from config.logging)
        """
        self.config = config or CliConfig()
        self._prog = prog or self.config.prog
        self.out: OutputWriter = out if out is not None else ConsoleOutput()
        self._err = err
        self.lg: Logger = (
            lg
            if lg is not None
            else LoggerFactory.create_root(
                LogConfig.from_config(self.config.logging.model_dump())
            )
        )
        self.registry = CommandRegistry()
        self.add("help", functools.partial(HelpCommand, registry=self.registry))

    def add(self, name: str, factory: CommandFactory) -> Cli:
        """
        Register a command.

        Args:
            name: Command name used on the command line
            factory: Callable returning a command instance

        Returns:
            self: For method chaining
        """
        self.registry.register(name, factory)
        return self

    def _resolve_prog(self, argv: Sequence[str]) -> str:
        if self._prog:
            return self._prog
        if argv:
            return os.path.basename(argv[0])
        return DEFAULT_PROG

    def run(self, argv: Sequence[str]) -> int:
        """
        Dispatch to the command named by argv[1].

        Args:
            argv: Full argument vector (program path, command name, tokens)

        Returns:
            int: Exit code returned by the command

        Raises:
            UnknownCommandError: If the command name is not registered
            CliError: Any declaration or parsing error raised by the command
        """
        name = argv[1] if len(argv) > 1 else self.config.default_command
        tokens = list(argv[2:])
        prog = self._resolve_prog(argv)

        self.lg.debug("dispatching command", extra={"command": name})
        command = self.registry.create(
            name,
            tokens=tokens,
            prog=prog,
            command=name,
            out=self.out,
            lg=LoggerFactory.derive(self.lg, f"cmd/{name}"),
        )
        command.configure()
        code = command.execute()

        self.lg.debug("command finished", extra={"command": name, "code": code})
        return code

    def main(self, argv: Sequence[str] | None = None) -> int:
        """
        Run and turn CliError into an error message and exit code 1.

        Args:
            argv: Argument vector (default: sys.argv)

        Returns:
            int: Exit code
        """
        try:
            return self.run(sys.argv if argv is None else argv)
        except CliError as e:
            self._print_error(e)
            return 1

    def _print_error(self, error: Exception) -> None:
        console = Console(
            file=self._err if self._err is not None else sys.stderr,
            highlight=False,
            no_color=not self.config.logging.colors,
        )
        console.print(
            f"[bold red]error:[/bold red] {escape(str(error))}", soft_wrap=True
        )
        self.lg.debug("command failed", extra={"error": error})

    def __repr__(self) -> str:
        return f"Cli(prog={self._prog!r}, commands={self.registry.names()!r})"
