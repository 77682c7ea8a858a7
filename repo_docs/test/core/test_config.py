"""Tests for repo_docs.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from repo_docs.core.config import SyncConfig, load_config
from repo_docs.core.errors import ErrorCode
from repo_docs.core.result import Err, Ok
from repo_docs.core.sync_errors import HomeDirectoryUnset
from repo_docs.platform.paths import home_variable


class TestLoadConfig:
    def test_cache_root_under_home(self, tmp_path: Path) -> None:
        result = load_config({home_variable(): str(tmp_path)})

        assert isinstance(result, Ok)
        assert result.value.cache_root == tmp_path / ".local" / "repos"

    def test_defaults(self, tmp_path: Path) -> None:
        config = load_config({home_variable(): str(tmp_path)}).unwrap()

        assert config.concurrency == 4
        assert config.clone_depth == 1
        assert config.git == "git"
        assert config.metadata_dir == ".git"

    def test_home_unset(self) -> None:
        result = load_config({})

        assert result == Err(HomeDirectoryUnset(variable=home_variable()))

    def test_deterministic(self, tmp_path: Path) -> None:
        env = {home_variable(): str(tmp_path)}
        assert load_config(env) == load_config(env)


def test_config_is_frozen(tmp_path: Path) -> None:
    config = SyncConfig(cache_root=tmp_path)
    with pytest.raises(AttributeError):
        config.concurrency = 8  # type: ignore[misc]


class TestErrorCode:
    def test_values(self) -> None:
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.ENV_ERROR == 2
        assert ErrorCode.VCS_ERROR == 3

    def test_str(self) -> None:
        assert str(ErrorCode.VCS_ERROR) == "vcs error"

    def test_is_success(self) -> None:
        assert ErrorCode.OK.is_success
        assert not ErrorCode.USER_ERROR.is_success
