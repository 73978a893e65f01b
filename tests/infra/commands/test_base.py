"""
Tests for commands/base.py.

Tests key functionality including:
- Command construction defaults
- Delegation to CommandHelper
- Default description and help
"""

import pytest

from cmdinfra.cli import CommandHelper
from cmdinfra.commands import Command
from cmdinfra.commands.protocol import CommandProtocol
from cmdinfra.log import Logger
from cmdinfra.output import BufferedOutput, ConsoleOutput
from tests.helpers.commands import GreetCommand

# =============================================================================
# Test construction
# =============================================================================


@pytest.mark.unit
class TestCommandInit:
    """Test Command initialization."""

    def test_defaults(self):
        command = GreetCommand()

        assert isinstance(command, CommandProtocol)
        assert isinstance(command.helper, CommandHelper)
        assert isinstance(command.out, ConsoleOutput)
        assert isinstance(command.lg, Logger)
        assert command.prog == "cli"
        assert command.command == "greet"
        assert command.lg.name == "/cmd/greet"

    def test_invoked_name_overrides_class_name(self):
        command = GreetCommand(command="hi")

        assert command.command == "hi"

    def test_tokens_reach_helper(self):
        command = GreetCommand(tokens=["bob"])

        assert command.helper.tokens == ("bob",)

    def test_base_class_is_abstract(self):
        """Test execute() must be provided by subclasses."""
        with pytest.raises(TypeError):
            Command()


# =============================================================================
# Test parsed values
# =============================================================================


@pytest.mark.unit
class TestCommandValues:
    """Test option() and argument() accessors."""

    def test_reads_parsed_values(self):
        command = GreetCommand(tokens=["-s", "-g", "Hi", "bob", "?"])
        command.configure()

        assert command.option("shout") is True
        assert command.option("greeting") == "Hi"
        assert command.argument("who") == "bob"
        assert command.argument("punct") == "?"

    def test_execute_writes_output(self):
        out = BufferedOutput()
        command = GreetCommand(tokens=["--shout", "bob"], out=out)
        command.configure()

        assert command.execute() == 0
        assert out.lines == ["HELLO, BOB!"]


# =============================================================================
# Test help text
# =============================================================================


@pytest.mark.unit
class TestCommandHelp:
    """Test description(), usage() and help()."""

    def test_description_is_summary(self):
        assert GreetCommand().description() == "Greet someone"

    def test_help_is_summary_and_usage(self):
        command = GreetCommand(prog="tool")
        command.configure()

        assert command.help() == (
            "Greet someone\n"
            "\n"
            "Usage:\n"
            "  tool greet [options] <who> [punct]\n"
            "options:\n"
            "  -s, --shout: Print in upper case [false]\n"
            "  -g, --greeting: Greeting word [Hello]\n"
            "\n"
            "arguments:\n"
            "  who - Who to greet\n"
            "  punct - Trailing punctuation\n"
        )

    def test_usage_before_configure(self):
        assert GreetCommand(prog="tool").usage() == "Usage:\n  tool greet "
