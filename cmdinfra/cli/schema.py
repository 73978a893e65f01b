"""
Option and argument declarations for a single command.

A CommandSchema accumulates declarations in order and enforces the two
ordering rules the parser relies on:
- every option is declared before any positional argument
- required arguments come before optional ones

Names are not checked for uniqueness. Declaring the same name twice is a
caller error; later declarations shadow earlier ones when values are
looked up.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import OrderError


class OptionType(str, Enum):
    """How an option consumes the token that follows it."""

    BOOL = "bool"  # flag, no value
    REQUIRED = "required"  # always takes the next token
    OPTIONAL = "optional"  # takes the next token unless it looks like an option


@dataclass(frozen=True)
class OptionSpec:
    """A declared ``-s, --name`` option."""

    name: str
    short: str
    kind: OptionType
    default: bool | str
    help: str = ""

    def render_default(self) -> str:
        """Render the default value for usage text."""
        if self.default is True:
            return "true"
        if self.default is False:
            return "false"
        return str(self.default)


@dataclass(frozen=True)
class ArgumentSpec:
    """A declared positional argument."""

    name: str
    is_required: bool
    help: str = ""


class CommandSchema:
    """Ordered option and argument declarations for one command."""

    def __init__(self) -> None:
        self._options: list[OptionSpec] = []
        self._arguments: list[ArgumentSpec] = []

    @property
    def options(self) -> tuple[OptionSpec, ...]:
        """Declared options, in declaration order."""
        return tuple(self._options)

    @property
    def arguments(self) -> tuple[ArgumentSpec, ...]:
        """Declared positional arguments, in declaration order."""
        return tuple(self._arguments)

    @property
    def has_options(self) -> bool:
        return bool(self._options)

    @property
    def has_arguments(self) -> bool:
        return bool(self._arguments)

    def add_option(
        self,
        name: str,
        short: str,
        kind: OptionType | str,
        default: bool | str,
        help: str = "",
    ) -> OptionSpec:
        """
        Declare an option.

        Args:
            name: Long name, matched by ``--name``
            short: Single character, matched by ``-s``
            kind: OptionType (or its string value)
            default: Value used when the option is absent
            help: Help text shown in usage

        Returns:
            OptionSpec: The stored declaration

        Raises:
            OrderError: If any positional argument was already declared
            ValueError: If kind is not a known option type
        """
        if self._arguments:
            raise OrderError(name, "options must be declared before all arguments")

        option = OptionSpec(
            name=name, short=short, kind=OptionType(kind), default=default, help=help
        )
        self._options.append(option)
        return option

    def add_argument(
        self, name: str, is_required: bool, help: str = ""
    ) -> ArgumentSpec:
        """
        Declare a positional argument.

        Args:
            name: Name to look the value up by
            is_required: Whether parsing fails when no token is left for it
            help: Help text shown in usage

        Returns:
            ArgumentSpec: The stored declaration

        Raises:
            OrderError: If a required argument follows an optional one
        """
        if is_required and self._arguments and not self._arguments[-1].is_required:
            raise OrderError(
                name, "required arguments must be placed in front of optional arguments"
            )

        argument = ArgumentSpec(name=name, is_required=is_required, help=help)
        self._arguments.append(argument)
        return argument
