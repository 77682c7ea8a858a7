from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

import pytest

from repo_docs.core.config import SyncConfig
from repo_docs.core.result import Err, Ok
from repo_docs.core.sync_errors import (
    NotAVersionControlledDirectory,
    UnresolvableUrl,
    VersionControlOperationFailed,
)
from repo_docs.git.runner import GitCli
from repo_docs.output.console import MockConsole
from repo_docs.platform.process import CommandResult
from repo_docs.services.sync import SyncService


class ScriptedGit:
    """GitRunner returning a fixed result and recording every call."""

    def __init__(self, result: CommandResult | None = None) -> None:
        self.result = result or CommandResult(0)
        self.calls: list[tuple[tuple[str, ...], Path | None]] = []

    def run(self, args: Sequence[str], cwd: Path | None = None) -> CommandResult:
        self.calls.append((tuple(args), cwd))
        return self.result


def _service(
    tmp_path: Path, git: ScriptedGit | GitCli, console: MockConsole
) -> tuple[SyncService, Path]:
    cache_root = tmp_path / "home" / ".local" / "repos"
    config = SyncConfig(cache_root=cache_root)
    return SyncService(config=config, console=console, git=git), cache_root


def test_clone_when_target_missing(tmp_path: Path) -> None:
    git = ScriptedGit()
    console = MockConsole()
    service, cache_root = _service(tmp_path, git, console)

    result = service.sync("https://github.com/acme/widgets")

    dest = cache_root / "acme" / "widgets"
    assert isinstance(result, Ok)
    assert result.value.operation == "clone"
    assert git.calls == [
        (("clone", "--depth", "1", "https://github.com/acme/widgets", str(dest)), None)
    ]
    assert dest.parent.is_dir()
    assert console.messages == ["Cloning acme/widgets", "OK acme/widgets"]


def test_pull_when_git_dir_present(tmp_path: Path) -> None:
    git = ScriptedGit(CommandResult(0, "Already up to date.\n", ""))
    console = MockConsole()
    service, cache_root = _service(tmp_path, git, console)
    dest = cache_root / "acme" / "widgets"
    (dest / ".git").mkdir(parents=True)

    result = service.sync("git@github.com:acme/widgets.git")

    assert isinstance(result, Ok)
    assert result.value.operation == "pull"
    assert git.calls == [(("pull",), dest)]
    assert console.messages == ["Pulling acme/widgets", "Already up to date.", "OK acme/widgets"]
    assert console.stderr_text == ""


def test_existing_non_git_directory_is_refused(tmp_path: Path) -> None:
    git = ScriptedGit()
    console = MockConsole()
    service, cache_root = _service(tmp_path, git, console)
    dest = cache_root / "acme" / "widgets"
    dest.mkdir(parents=True)
    (dest / "notes.txt").write_text("keep me", encoding="utf-8")

    result = service.sync("https://github.com/acme/widgets")

    assert result == Err(NotAVersionControlledDirectory(path=dest))
    assert git.calls == []
    assert (dest / "notes.txt").read_text(encoding="utf-8") == "keep me"


def test_unresolvable_url_runs_nothing(tmp_path: Path) -> None:
    git = ScriptedGit()
    service, _ = _service(tmp_path, git, MockConsole())

    result = service.sync("widgets")

    assert result == Err(UnresolvableUrl(url="widgets"))
    assert git.calls == []


def test_failed_pull_reports_output_on_stderr(tmp_path: Path) -> None:
    git = ScriptedGit(CommandResult(1, "", "fatal: unable to access remote\n"))
    console = MockConsole()
    service, cache_root = _service(tmp_path, git, console)
    (cache_root / "acme" / "widgets" / ".git").mkdir(parents=True)

    result = service.sync("https://github.com/acme/widgets")

    assert result == Err(VersionControlOperationFailed(operation="pull", label="acme/widgets"))
    assert console.stderr_text == "fatal: unable to access remote"
    assert not console.find("OK acme/widgets")


def test_failed_clone(tmp_path: Path) -> None:
    git = ScriptedGit(CommandResult(128, "", "fatal: repository not found"))
    service, _ = _service(tmp_path, git, MockConsole())

    result = service.sync("https://github.com/acme/missing")

    assert result == Err(VersionControlOperationFailed(operation="clone", label="acme/missing"))


def test_empty_output_prints_nothing_extra(tmp_path: Path) -> None:
    git = ScriptedGit(CommandResult(0, "  \n", ""))
    console = MockConsole()
    service, _ = _service(tmp_path, git, console)

    service.sync("https://github.com/acme/widgets")

    assert console.messages == ["Cloning acme/widgets", "OK acme/widgets"]


# -----------------------------------------------------------------------------
# Real git
# -----------------------------------------------------------------------------


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        raise RuntimeError(
            f"git {' '.join(args)} failed (code {result.returncode}): {result.stderr.strip()}"
        )
    return result.stdout.strip()


def _init_remote_repo(tmp_path: Path, org: str, name: str) -> tuple[str, Path]:
    """Create a bare repo + push an initial commit, return (url, seed_dir)."""
    remote = tmp_path / "remotes" / org / f"{name}.git"
    seed = tmp_path / "seeds" / name
    remote.parent.mkdir(parents=True)
    seed.mkdir(parents=True)

    _git(tmp_path, "init", "--bare", "-b", "main", str(remote))
    _git(seed, "init", "-b", "main")
    _git(seed, "config", "user.email", "test@example.com")
    _git(seed, "config", "user.name", "Test")

    (seed / "hello.txt").write_text("v1\n", encoding="utf-8")
    _git(seed, "add", "hello.txt")
    _git(seed, "commit", "-m", "init")

    url = remote.as_uri()
    _git(seed, "remote", "add", "origin", url)
    _git(seed, "push", "-u", "origin", "main")

    return url, seed


@pytest.mark.skipif(shutil.which("git") is None, reason="git not available")
def test_clone_then_pull_with_real_git(tmp_path: Path) -> None:
    url, seed = _init_remote_repo(tmp_path, "acme", "widgets")
    console = MockConsole()
    service, cache_root = _service(tmp_path, GitCli(), console)

    first = service.sync(url)
    assert isinstance(first, Ok)
    assert first.value.operation == "clone"

    dest = cache_root / "acme" / "widgets"
    assert (dest / ".git").exists()
    assert (dest / "hello.txt").read_text(encoding="utf-8") == "v1\n"
    assert _git(dest, "rev-list", "--count", "HEAD") == "1"

    (seed / "hello.txt").write_text("v2\n", encoding="utf-8")
    _git(seed, "commit", "-am", "update")
    _git(seed, "push")

    second = service.sync(url)
    assert isinstance(second, Ok)
    assert second.value.operation == "pull"
    assert (dest / "hello.txt").read_text(encoding="utf-8") == "v2\n"
    assert "Pulling acme/widgets" in console.text
    assert console.text.count("OK acme/widgets") == 2
