"""
Output abstraction for commands.

Commands write through an OutputWriter so they can be tested without
capturing stdout.
"""

import sys
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Protocol for command output writing."""

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        ...

    def write_raw(self, text: str) -> None:
        """Write text without trailing newline."""
        ...


class ConsoleOutput:
    """
    Default output writer that writes to a stream (stdout by default).

    Example:
        out = ConsoleOutput()
        out.write("List of commands:")
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Initialize with optional output stream.

        Args:
            stream: Output stream (defaults to sys.stdout)
        """
        self._stream = stream if stream is not None else sys.stdout

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        print(text, file=self._stream)

    def write_raw(self, text: str) -> None:
        """Write text without trailing newline."""
        print(text, end="", file=self._stream)


class NullOutput:
    """Output writer that discards all output."""

    def write(self, text: str = "") -> None:
        pass

    def write_raw(self, text: str) -> None:
        pass


class BufferedOutput:
    """
    Output writer that captures output to a list of lines.

    Example:
        out = BufferedOutput()
        out.write("Line 1")
        out.write_raw("Line ")
        out.write("2")
        assert out.lines == ["Line 1", "Line 2"]
        assert out.text == "Line 1\\nLine 2\\n"
    """

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._raw_parts: list[str] = []

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        if self._raw_parts:
            text = "".join(self._raw_parts) + text
            self._raw_parts.clear()
        self._lines.append(text)

    def write_raw(self, text: str) -> None:
        """Buffer text without newline (will be prefixed to next write)."""
        self._raw_parts.append(text)

    @property
    def lines(self) -> list[str]:
        """Get all completed output lines."""
        return self._lines.copy()

    @property
    def text(self) -> str:
        """Get all output as it would appear on a stream."""
        written = "".join(line + "\n" for line in self._lines)
        return written + "".join(self._raw_parts)
