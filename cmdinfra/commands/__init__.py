"""
Command layer.

This module provides the pieces a dispatcher works with:
- CommandProtocol, the interface every command implements
- Command, a base class wired to a CommandHelper
- CommandRegistry, name to factory mapping
- HelpCommand, the built-in help command
"""

from .base import Command
from .help import HelpCommand
from .protocol import CommandProtocol
from .registry import CommandFactory, CommandRegistry

__all__ = [
    "Command",
    "CommandFactory",
    "CommandProtocol",
    "CommandRegistry",
    "HelpCommand",
]
