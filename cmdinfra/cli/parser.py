"""
Token parsing against a CommandSchema.

Parsing is a single forward pass in two phases. Leading option tokens are
consumed first; the first token that is not an option token ends that phase
and everything after it, option-shaped or not, is positional.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..constants import OPTION_TOKEN_PATTERN
from ..errors import MissingArgumentError, UnknownOptionError
from .schema import CommandSchema, OptionSpec, OptionType


@dataclass(frozen=True)
class ParseResult:
    """Parsed option and argument values."""

    options: dict[str, bool | str] = field(default_factory=dict)
    arguments: dict[str, str] = field(default_factory=dict)


class _Unparsed:
    """Marker type for a parse that has not happened yet."""

    def __repr__(self) -> str:
        return "UNPARSED"

    def __bool__(self) -> bool:
        return False


UNPARSED = _Unparsed()

ParseState = _Unparsed | ParseResult


def is_option_token(token: str | None) -> bool:
    """Check whether a token is a ``-x`` or ``--name`` option flag."""
    return token is not None and OPTION_TOKEN_PATTERN.fullmatch(token) is not None


# Helper functions for parse_tokens()


def _resolve_option(schema: CommandSchema, token: str) -> OptionSpec:
    """Find the declaration an option token refers to."""
    match = OPTION_TOKEN_PATTERN.fullmatch(token)
    assert match is not None

    short = match.group("short")
    if short is not None:
        by_key = {o.short: o for o in schema.options}
        key = short
    else:
        by_key = {o.name: o for o in schema.options}
        key = match.group("long")

    option = by_key.get(key)
    if option is None:
        raise UnknownOptionError(token)
    return option


def _consume_options(
    schema: CommandSchema, pending: deque[str], options: dict[str, bool | str]
) -> None:
    """Consume leading option tokens (and their values) from pending."""
    while pending and is_option_token(pending[0]):
        option = _resolve_option(schema, pending.popleft())

        if option.kind is OptionType.BOOL:
            options[option.name] = True
        elif option.kind is OptionType.REQUIRED:
            options[option.name] = pending.popleft() if pending else option.default
        elif pending and not is_option_token(pending[0]):
            options[option.name] = pending.popleft()


def _consume_arguments(
    schema: CommandSchema, pending: deque[str], arguments: dict[str, str]
) -> None:
    """Assign remaining tokens to positional arguments in declaration order."""
    for argument in schema.arguments:
        if pending:
            arguments[argument.name] = pending.popleft()
        elif argument.is_required:
            raise MissingArgumentError(argument.name)


def parse_tokens(schema: CommandSchema, tokens: Sequence[str]) -> ParseResult:
    """
    Parse raw command tokens against a schema.

    Every declared option is present in the result, starting at its default.
    Only arguments that received a token are present. Tokens left over after
    the last declared argument are ignored.

    Args:
        schema: Declared options and arguments
        tokens: Raw tokens following the command name

    Returns:
        ParseResult: Option and argument values

    Raises:
        UnknownOptionError: If an option token matches no declared option
        MissingArgumentError: If a required argument has no token left
    """
    pending = deque(tokens)
    options: dict[str, bool | str] = {o.name: o.default for o in schema.options}
    arguments: dict[str, str] = {}

    _consume_options(schema, pending, options)
    _consume_arguments(schema, pending, arguments)

    return ParseResult(options=options, arguments=arguments)
