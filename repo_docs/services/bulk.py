"""Bulk sync: pull every repository found under the cache root.

Discovery walks the whole cache tree and treats the parent of every
``.git`` entry as a repository, nested ones included. Pulls run on a
bounded thread pool; a repository that fails, or whose pull raises, is
recorded as a failed outcome and never stops the others. The report
lists outcomes in discovery order.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from repo_docs.core.config import GIT_METADATA_DIR, SyncConfig
from repo_docs.git.runner import GitRunner, error_result
from repo_docs.output.console import ConsoleProtocol, Style
from repo_docs.platform.files import FileSystemProtocol, LocalFileSystem
from repo_docs.platform.process import CommandResult

__all__ = [
    "BulkReport",
    "BulkSyncService",
    "SyncOutcome",
    "find_repos",
    "pull_with_summary",
    "repo_label",
    "report_lines",
]


@dataclass(frozen=True, slots=True)
class SyncOutcome:
    """Result of pulling one discovered repository.

    Attributes:
        label: Path relative to the cache root, ``/``-separated.
        local_path: Absolute repository directory.
        ok: True if the pull exited 0.
        output: Trimmed combined stdout/stderr.
        exit_code: Pull exit code (1 if git could not be run).
    """

    label: str
    local_path: Path
    ok: bool
    output: str
    exit_code: int


@dataclass(frozen=True, slots=True)
class BulkReport:
    cache_root: Path
    outcomes: tuple[SyncOutcome, ...] = ()

    @property
    def success_count(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def fail_count(self) -> int:
        return len(self.outcomes) - self.success_count

    @property
    def failures(self) -> list[SyncOutcome]:
        return [o for o in self.outcomes if not o.ok]


def find_repos(
    root: Path,
    fs: FileSystemProtocol,
    *,
    metadata_dir: str = GIT_METADATA_DIR,
) -> list[Path]:
    """Find every git working tree below ``root``.

    Returns:
        Repository directories in listing order, without duplicates.
        Empty if ``root`` does not exist.
    """
    if not fs.exists(root):
        return []

    repos: dict[Path, None] = {}
    for entry in fs.list_recursive(root):
        if entry.name != metadata_dir:
            continue
        resolved = entry if entry.is_absolute() else root / entry
        repos.setdefault(resolved.parent, None)
    return list(repos)


def repo_label(root: Path, repo_dir: Path) -> str:
    """Label ``repo_dir`` by its ``/``-separated path from ``root``.

    Directories outside ``root`` get a ``..`` path and the root itself
    gets the empty label.
    """
    try:
        relative = os.path.relpath(repo_dir, root)
    except ValueError:  # different drives on Windows
        return repo_dir.as_posix()
    if relative == os.curdir:
        return ""
    return Path(relative).as_posix()


def pull_with_summary(git: GitRunner, root: Path, repo_dir: Path) -> SyncOutcome:
    """Pull ``repo_dir`` and summarize the result; never raises."""
    label = repo_label(root, repo_dir)
    try:
        result = git.run(["pull"], cwd=repo_dir)
    except Exception as e:  # noqa: BLE001
        result = error_result(e)
    return _outcome(label, repo_dir, result)


def _outcome(label: str, repo_dir: Path, result: CommandResult) -> SyncOutcome:
    return SyncOutcome(
        label=label,
        local_path=repo_dir,
        ok=result.ok,
        output=result.output,
        exit_code=result.exit_code,
    )


def _status_line(outcome: SyncOutcome) -> str:
    return f"{'OK' if outcome.ok else 'FAIL'} {outcome.label}"


def _failure_text(outcome: SyncOutcome) -> str:
    if outcome.output:
        return f"{outcome.label}\n{outcome.output}"
    return f"{outcome.label} (no output)"


def report_lines(report: BulkReport) -> list[tuple[str, Style]]:
    """Render the summary printed after a bulk sync as ``(text, style)`` lines."""
    lines = [(f"Done. {report.success_count} ok, {report.fail_count} failed.", Style.DEFAULT)]
    lines.extend(
        (_status_line(o), Style.SUCCESS if o.ok else Style.ERROR) for o in report.outcomes
    )

    failures = report.failures
    if failures:
        lines.append(("Failures:", Style.HEADER))
        lines.extend((_failure_text(f), Style.DEFAULT) for f in failures)
    return lines


class BulkSyncService:
    """Pull all repositories in the cache with bounded parallelism."""

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

    def sync_all(self) -> BulkReport:
        root = self._config.cache_root
        repos = find_repos(root, self._fs, metadata_dir=self._config.metadata_dir)
        if not repos:
            self._console.print(f"No repos found in {root}")
            return BulkReport(cache_root=root)

        self._console.print(f"Syncing {len(repos)} repos...")
        report = BulkReport(cache_root=root, outcomes=tuple(self._pull_all(root, repos)))
        self._print_report(report)
        return report

    def _pull_all(self, root: Path, repos: Sequence[Path]) -> list[SyncOutcome]:
        workers = max(1, min(self._config.concurrency, len(repos)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order, not completion order.
            return list(executor.map(lambda repo: pull_with_summary(self._git, root, repo), repos))

    def _print_report(self, report: BulkReport) -> None:
        for text, style in report_lines(report):
            self._console.print(text, style)
