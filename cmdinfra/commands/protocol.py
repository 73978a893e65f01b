"""
Command protocol interface definition.

This module provides an abstract base class that defines the interface
every dispatchable command implements.
"""

from abc import ABC, abstractmethod


class CommandProtocol(ABC):
    """
    Abstract base class defining the interface for commands.

    The dispatcher calls configure() once, then execute(). The help command
    only calls description() or configure() followed by help().
    """

    @abstractmethod
    def description(self) -> str:
        """
        Get a one-line description of the command.

        Returns:
            str: Short description
        """
        pass

    @abstractmethod
    def help(self) -> str:
        """
        Get detailed help text, usually ending with the usage text.

        Returns:
            str: Help text
        """
        pass

    @abstractmethod
    def configure(self) -> None:
        """Declare the command's options and arguments."""
        pass

    @abstractmethod
    def execute(self) -> int:
        """
        Run the command.

        Returns:
            int: Exit code
        """
        pass
