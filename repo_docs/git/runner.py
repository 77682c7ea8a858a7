"""Git invocation boundary.

Sync logic talks to git only through ``GitRunner.run(args, cwd)`` so it can
be exercised with a scripted fake instead of a real binary.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from repo_docs.core.config import GIT_EXECUTABLE
from repo_docs.core.result import Err, Ok
from repo_docs.platform.process import CommandResult
from repo_docs.platform.process import run as run_process

__all__ = ["GitCli", "GitRunner", "error_result", "to_error_message"]


class GitRunner(Protocol):
    def run(self, args: Sequence[str], cwd: Path | None = None) -> CommandResult:
        """Run ``git <args>`` and return its exit code and output."""
        ...


def to_error_message(error: object) -> str:
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return str(error)


def error_result(error: object) -> CommandResult:
    """Failed CommandResult standing in for a git call that never ran."""
    return CommandResult(exit_code=1, stdout="", stderr=to_error_message(error))


class GitCli:
    """GitRunner backed by the git executable.

    No timeout is applied: a pull blocked on the network waits for git.
    """

    def __init__(self, executable: str = GIT_EXECUTABLE) -> None:
        self._executable = executable

    def run(self, args: Sequence[str], cwd: Path | None = None) -> CommandResult:
        match run_process([self._executable, *args], cwd=cwd):
            case Ok(result):
                return result
            case Err(error):
                return error_result(error.stderr or str(error))
