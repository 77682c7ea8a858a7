"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from repo_docs.core.errors import ErrorCode
from repo_docs.core.sync_errors import (
    HomeDirectoryUnset,
    MissingArgument,
    NotAVersionControlledDirectory,
    SyncError,
    UnresolvableUrl,
    VersionControlOperationFailed,
)
from repo_docs.output.console import Style

if TYPE_CHECKING:
    from repo_docs.output.console import ConsoleProtocol

__all__ = ["print_sync_error", "sync_error_exit_code", "sync_error_message"]


def sync_error_message(error: SyncError) -> str:
    match error:
        case HomeDirectoryUnset(variable=variable):
            return f"{variable} is not set; cannot resolve ~/.local/repos"
        case UnresolvableUrl(url=url):
            return f"Could not derive org/repo from URL: {url}"
        case NotAVersionControlledDirectory(path=path):
            return f"{path} exists but is not a git repository"
        case VersionControlOperationFailed(operation=operation, label=label):
            return f"git {operation} failed for {label}"
        case MissingArgument():
            return "provide a URL or use --sync-all"


def print_sync_error(error: SyncError, console: ConsoleProtocol) -> None:
    """Print sync error to console with appropriate formatting."""
    console.error(sync_error_message(error))
    match error:
        case NotAVersionControlledDirectory():
            console.print("hint: move or delete the directory, then retry", Style.DIM, err=True)
        case MissingArgument(hint=hint):
            console.print(f"hint: {hint}", Style.DIM, err=True)
        case _:
            pass


def sync_error_exit_code(error: SyncError) -> int:
    """Get exit code for a sync error."""
    match error:
        case UnresolvableUrl() | MissingArgument():
            return int(ErrorCode.USER_ERROR)
        case HomeDirectoryUnset() | NotAVersionControlledDirectory():
            return int(ErrorCode.ENV_ERROR)
        case VersionControlOperationFailed():
            return int(ErrorCode.VCS_ERROR)
