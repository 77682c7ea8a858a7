"""Platform abstraction layer."""

from .files import FileSystemProtocol, LocalFileSystem
from .paths import (
    CACHE_DIR_PARTS,
    cache_root_for,
    home,
    home_variable,
)
from .process import (
    CommandResult,
    ProcessError,
    format_output,
    run,
)

__all__ = [
    # files
    "FileSystemProtocol",
    "LocalFileSystem",
    # paths
    "CACHE_DIR_PARTS",
    "cache_root_for",
    "home",
    "home_variable",
    # process
    "CommandResult",
    "ProcessError",
    "format_output",
    "run",
]
