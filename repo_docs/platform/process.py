"""Subprocess execution with Result-based error handling.

Wraps subprocess.run, capturing exit code and both output streams.
A process that ran is always ``Ok(CommandResult)``, whatever its exit
code: deciding whether a nonzero exit is a failure is up to the caller.
``Err(ProcessError)`` means the command could not run at all.

Usage:
    match run(["git", "pull"], cwd=repo_dir):
        case Ok(result) if result.ok:
            print(result.output)
        case Ok(result):
            print(f"exit {result.exit_code}: {result.output}")
        case Err(error):
            print(f"could not start: {error.stderr}")
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from repo_docs.core.result import Err, Ok, Result

__all__ = ["CommandResult", "ProcessError", "format_output", "run"]


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one external command.

    Attributes:
        exit_code: Process exit code (0 means success).
        stdout: Captured standard output.
        stderr: Captured standard error.
    """

    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def output(self) -> str:
        """Trimmed stdout and stderr joined by a newline, empty parts dropped."""
        return format_output(self)


def format_output(result: CommandResult) -> str:
    """Combine both streams of ``result`` for display."""
    parts = [text for text in (result.stdout.strip(), result.stderr.strip()) if text]
    return "\n".join(parts)


@dataclass(frozen=True, slots=True)
class ProcessError:
    """A command that could not be executed.

    Attributes:
        command: The command that was attempted.
        returncode: -1, no process exit status exists.
        stdout: Partial output, if any.
        stderr: Reason the command could not run.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def run(
    cmd: Sequence[str],
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> Result[CommandResult, ProcessError]:
    """Execute a command and capture its result.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory (current directory if None).
        env: Environment variables (uses current env if None).
        timeout: Maximum seconds to wait (None for no limit).

    Returns:
        Ok(CommandResult) when the process ran, Err(ProcessError) when it
        could not be started or timed out.
    """
    try:
        proc = subprocess.run(
            list(cmd),
            cwd=str(cwd) if cwd is not None else None,
            env=env,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=-1,
                stdout=e.stdout if isinstance(e.stdout, str) else "",
                stderr=f"Command timed out after {timeout}s",
            )
        )
    except OSError as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=-1,
                stdout="",
                stderr=str(e),
            )
        )

    return Ok(
        CommandResult(
            exit_code=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )
    )
