"""Tests for repo_docs.platform.paths module."""

from __future__ import annotations

from pathlib import Path

import pytest

from repo_docs.platform.paths import cache_root_for, home, home_variable


class TestHome:
    def test_reads_environment(self, tmp_path: Path) -> None:
        assert home({home_variable(): str(tmp_path)}) == tmp_path

    def test_unset_returns_none(self) -> None:
        assert home({}) is None

    def test_empty_returns_none(self) -> None:
        assert home({home_variable(): ""}) is None

    def test_defaults_to_process_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(home_variable(), str(tmp_path))
        assert home() == tmp_path


def test_cache_root_for(tmp_path: Path) -> None:
    assert cache_root_for(tmp_path) == tmp_path / ".local" / "repos"
