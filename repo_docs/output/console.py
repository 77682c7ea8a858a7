"""Console output abstraction.

Services print through ``ConsoleProtocol`` so they do not depend on Rich
directly and tests can capture output with ``MockConsole``. Every method
accepts ``err=True`` to target standard error instead of standard output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "RichConsole",
    "Style",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()  # OK lines
    ERROR = auto()  # FAIL lines, error messages
    WARNING = auto()
    INFO = auto()
    DIM = auto()  # git output
    HEADER = auto()  # section header

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT, *, err: bool = False) -> None:
        """Print a message verbatim with optional styling.

        Args:
            message: The text to print (no markup interpretation)
            style: The style to apply
            err: Write to standard error
        """
        ...

    def error(self, message: str) -> None:
        """Print ``error: <message>`` to standard error."""
        ...

    def warning(self, message: str) -> None:
        """Print ``warning: <message>`` to standard error."""
        ...

    def header(self, message: str) -> None:
        """Print a section header."""
        ...


class RichConsole:
    """Console implementation using Rich library."""

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._out = Console()
        self._err = Console(stderr=True)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red",
            Style.WARNING: "yellow",
            Style.INFO: "cyan",
            Style.DIM: "dim",
            Style.HEADER: "bold",
        }

    def print(self, message: str, style: Style = Style.DEFAULT, *, err: bool = False) -> None:
        console = self._err if err else self._out
        console.print(
            message,
            style=self._style_map.get(style) or None,
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    def error(self, message: str) -> None:
        self._err.print(f"[red bold]error:[/red bold] {_escape(message)}", highlight=False)

    def warning(self, message: str) -> None:
        self._err.print(f"[yellow]warning:[/yellow] {_escape(message)}", highlight=False)

    def header(self, message: str) -> None:
        self.print(message, Style.HEADER)


def _escape(message: str) -> str:
    from rich.markup import escape

    return escape(message)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style
    err: bool = False


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT, *, err: bool = False) -> None:
        self.outputs.append(OutputRecord(message, style, err))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR, True))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING, True))

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    # Test helper methods

    def clear(self) -> None:
        self.outputs.clear()

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        """All output as a single newline-separated string."""
        return "\n".join(self.messages)

    @property
    def stdout_text(self) -> str:
        return "\n".join(o.message for o in self.outputs if not o.err)

    @property
    def stderr_text(self) -> str:
        return "\n".join(o.message for o in self.outputs if o.err)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
