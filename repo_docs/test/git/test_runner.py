"""Tests for git/runner.py."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from repo_docs.git.runner import GitCli, error_result, to_error_message


class TestToErrorMessage:
    def test_exception_message(self) -> None:
        assert to_error_message(RuntimeError("test error")) == "test error"

    def test_exception_without_message_uses_type(self) -> None:
        assert to_error_message(RuntimeError()) == "RuntimeError"

    def test_non_exception_values(self) -> None:
        assert to_error_message("string error") == "string error"
        assert to_error_message(123) == "123"
        assert to_error_message(None) == "None"


def test_error_result() -> None:
    result = error_result(OSError("boom"))

    assert result.exit_code == 1
    assert result.stdout == ""
    assert result.stderr == "boom"
    assert not result.ok


def test_missing_executable_becomes_failed_result(tmp_path: Path) -> None:
    git = GitCli("nonexistent_git_12345")

    result = git.run(["--version"], cwd=tmp_path)

    assert result.exit_code == 1
    assert result.stderr


@pytest.mark.skipif(shutil.which("git") is None, reason="git not available")
def test_runs_git(tmp_path: Path) -> None:
    result = GitCli().run(["--version"], cwd=tmp_path)

    assert result.ok
    assert "git version" in result.stdout


@pytest.mark.skipif(shutil.which("git") is None, reason="git not available")
def test_nonzero_exit_is_not_ok(tmp_path: Path) -> None:
    # tmp_path is not a repository
    result = GitCli().run(["pull"], cwd=tmp_path)

    assert not result.ok
    assert result.exit_code != 0
