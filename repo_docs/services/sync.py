"""Single repository sync: clone when missing, pull when present."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from repo_docs.core.config import SyncConfig
from repo_docs.core.result import Err, Ok, Result
from repo_docs.core.sync_errors import (
    GitOperation,
    NotAVersionControlledDirectory,
    SyncError,
    VersionControlOperationFailed,
)
from repo_docs.git.runner import GitRunner
from repo_docs.git.target import SyncTarget, resolve_target
from repo_docs.output.console import ConsoleProtocol, Style
from repo_docs.platform.files import FileSystemProtocol, LocalFileSystem
from repo_docs.platform.process import CommandResult

__all__ = ["SyncReport", "SyncService", "print_command_output"]


@dataclass(frozen=True, slots=True)
class SyncReport:
    """What a successful single-repository sync did."""

    target: SyncTarget
    operation: GitOperation
    result: CommandResult


def print_command_output(console: ConsoleProtocol, result: CommandResult) -> None:
    """Echo git output, to stderr when the command failed."""
    output = result.output
    if not output:
        return
    if result.ok:
        console.print(output, Style.DIM)
    else:
        console.print(output, Style.ERROR, err=True)


class SyncService:
    """Clone or update one repository in the cache.

    Policy:
    - Missing directory: shallow clone (``--depth 1``).
    - Existing git working tree: plain ``git pull``.
    - Existing directory without ``.git``: refuse, never overwrite it.
    """

    def __init__(
        self,
        *,
        config: SyncConfig,
        console: ConsoleProtocol,
        git: GitRunner,
        fs: FileSystemProtocol | None = None,
    ) -> None:
        self._config = config
        self._console = console
        self._git = git
        self._fs = fs or LocalFileSystem()

    def sync(self, url: str) -> Result[SyncReport, SyncError]:
        target_result = resolve_target(url, cache_root=self._config.cache_root)
        if isinstance(target_result, Err):
            return target_result
        target = target_result.value

        if self._fs.exists(target.local_path):
            return self._pull(target)
        return self._clone(target)

    def _clone(self, target: SyncTarget) -> Result[SyncReport, SyncError]:
        self._console.print(f"Cloning {target.label}")
        self._fs.make_dirs(target.local_path.parent)
        result = self._git.run(
            [
                "clone",
                "--depth",
                str(self._config.clone_depth),
                target.source_url,
                str(target.local_path),
            ]
        )
        return self._finish(target, "clone", result)

    def _pull(self, target: SyncTarget) -> Result[SyncReport, SyncError]:
        if not self._is_git_dir(target.local_path):
            return Err(NotAVersionControlledDirectory(path=target.local_path))

        self._console.print(f"Pulling {target.label}")
        result = self._git.run(["pull"], cwd=target.local_path)
        return self._finish(target, "pull", result)

    def _finish(
        self,
        target: SyncTarget,
        operation: GitOperation,
        result: CommandResult,
    ) -> Result[SyncReport, SyncError]:
        print_command_output(self._console, result)
        if not result.ok:
            return Err(VersionControlOperationFailed(operation=operation, label=target.label))

        self._console.print(f"OK {target.label}", Style.SUCCESS)
        return Ok(SyncReport(target=target, operation=operation, result=result))

    def _is_git_dir(self, path: Path) -> bool:
        return self._fs.exists(path / self._config.metadata_dir)
