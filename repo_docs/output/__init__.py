"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    OutputRecord,
    RichConsole,
    Style,
)
from .errors import print_sync_error, sync_error_exit_code, sync_error_message

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "RichConsole",
    "Style",
    "print_sync_error",
    "sync_error_exit_code",
    "sync_error_message",
]
