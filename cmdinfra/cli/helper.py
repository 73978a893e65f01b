"""
Per-command parsing helper.

CommandHelper ties a schema to the raw tokens of one invocation. Values are
parsed on first access and memoized; usage text can be rendered at any time
without parsing.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..constants import DEFAULT_PROG
from ..log import Logger
from .parser import UNPARSED, ParseResult, ParseState, parse_tokens
from .schema import ArgumentSpec, CommandSchema, OptionSpec, OptionType
from .usage import render_usage


class CommandHelper:
    """
    Option/argument declaration, lazy parsing and usage for one command.

    Example:
        helper = CommandHelper(["-v", "input.txt"], prog="tool", command="cat")
        helper.add_option("verbose", "v", "bool", False, "Print more")
        helper.add_argument("file", True, "File to read")
        helper.get_option_value("verbose")   # True
        helper.get_argument_value("file")    # "input.txt"
    """

    def __init__(
        self,
        tokens: Sequence[str] = (),
        prog: str = DEFAULT_PROG,
        command: str = "",
        lg: Logger | None = None,
    ) -> None:
        """
        Initialize the helper.

        Args:
            tokens: Raw tokens following the command name
            prog: Program name for usage text
            command: Command name for usage text
            lg: Optional logger for parse tracing
        """
        self._tokens: tuple[str, ...] = tuple(tokens)
        self._prog = prog
        self._command = command
        self._lg = lg
        self._schema = CommandSchema()
        self._state: ParseState = UNPARSED

    @property
    def schema(self) -> CommandSchema:
        return self._schema

    @property
    def tokens(self) -> tuple[str, ...]:
        return self._tokens

    @property
    def parsed(self) -> bool:
        """Whether the tokens have been parsed already."""
        return isinstance(self._state, ParseResult)

    def add_option(
        self,
        name: str,
        short: str,
        kind: OptionType | str,
        default: bool | str,
        help: str = "",
    ) -> OptionSpec:
        """Declare an option. See CommandSchema.add_option()."""
        option = self._schema.add_option(name, short, kind, default, help)
        if self._lg is not None:
            self._lg.trace(
                "option declared", extra={"option": name, "kind": option.kind.value}
            )
        return option

    def add_argument(
        self, name: str, is_required: bool, help: str = ""
    ) -> ArgumentSpec:
        """Declare a positional argument. See CommandSchema.add_argument()."""
        argument = self._schema.add_argument(name, is_required, help)
        if self._lg is not None:
            self._lg.trace(
                "argument declared", extra={"argument": name, "required": is_required}
            )
        return argument

    def parse(self) -> ParseResult:
        """
        Parse the tokens once and return the memoized result.

        Later calls return the first result even if declarations changed.

        Raises:
            UnknownOptionError: If an option token matches no declared option
            MissingArgumentError: If a required argument has no token left
        """
        if isinstance(self._state, ParseResult):
            return self._state

        result = parse_tokens(self._schema, self._tokens)
        self._state = result
        if self._lg is not None:
            self._lg.trace(
                "tokens parsed",
                extra={
                    "options": len(result.options),
                    "arguments": len(result.arguments),
                },
            )
        return result

    def get_option_value(self, name: str) -> bool | str | None:
        """Get a parsed option value (None if no such option was declared)."""
        return self.parse().options.get(name)

    def get_argument_value(self, name: str) -> str | None:
        """Get a parsed argument value (None if it received no token)."""
        return self.parse().arguments.get(name)

    def get_options(self) -> dict[str, bool | str]:
        """Get a copy of all parsed option values."""
        return dict(self.parse().options)

    def get_arguments(self) -> dict[str, str]:
        """Get a copy of all parsed argument values."""
        return dict(self.parse().arguments)

    def get_usage(self) -> str:
        """Render usage text from the current declarations."""
        return render_usage(self._schema, self._prog, self._command)
