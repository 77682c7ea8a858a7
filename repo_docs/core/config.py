"""Typed runtime configuration.

Everything repo-docs needs besides its arguments comes from the process
environment; there is no config file. ``load_config`` resolves the home
directory once and derives the cache root from it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from repo_docs.platform.paths import cache_root_for, home, home_variable

from .result import Err, Ok, Result
from .sync_errors import HomeDirectoryUnset

__all__ = [
    "DEFAULT_CLONE_DEPTH",
    "DEFAULT_CONCURRENCY",
    "GIT_EXECUTABLE",
    "GIT_METADATA_DIR",
    "SyncConfig",
    "load_config",
]

# Bulk sync fans out to this many concurrent pulls.
DEFAULT_CONCURRENCY = 4
DEFAULT_CLONE_DEPTH = 1
GIT_EXECUTABLE = "git"
GIT_METADATA_DIR = ".git"


@dataclass(frozen=True, slots=True)
class SyncConfig:
    """Settings shared by single and bulk sync.

    Attributes:
        cache_root: Directory holding ``<org>/<repo>`` clones.
        concurrency: Max concurrent pulls in bulk mode.
        clone_depth: History depth for new clones.
        git: Git executable name or path.
        metadata_dir: Entry marking a directory as a git working tree.
    """

    cache_root: Path
    concurrency: int = DEFAULT_CONCURRENCY
    clone_depth: int = DEFAULT_CLONE_DEPTH
    git: str = GIT_EXECUTABLE
    metadata_dir: str = GIT_METADATA_DIR


def load_config(
    environ: Mapping[str, str] | None = None,
) -> Result[SyncConfig, HomeDirectoryUnset]:
    """Build the configuration from the environment.

    Args:
        environ: Environment mapping (``os.environ`` if None).

    Returns:
        Ok(SyncConfig), or Err(HomeDirectoryUnset) when no home directory
        is set.
    """
    home_dir = home(environ)
    if home_dir is None:
        return Err(HomeDirectoryUnset(variable=home_variable()))
    return Ok(SyncConfig(cache_root=cache_root_for(home_dir)))
