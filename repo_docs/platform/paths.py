"""Platform-aware path utilities.

Locates the user's home directory and the repository cache root
(``<home>/.local/repos``). The cache root is fixed: there is no setting
or flag to move it.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path

__all__ = [
    "CACHE_DIR_PARTS",
    "cache_root_for",
    "home",
    "home_variable",
]

CACHE_DIR_PARTS = (".local", "repos")


def home_variable() -> str:
    """Name of the environment variable holding the home directory."""
    return "USERPROFILE" if sys.platform == "win32" else "HOME"


def home(environ: Mapping[str, str] | None = None) -> Path | None:
    """Get the user's home directory from the environment.

    Uses USERPROFILE on Windows, HOME elsewhere. Unlike ``Path.home()``
    there is no fallback: an unset or empty variable returns None so the
    caller can report it instead of syncing into a guessed location.
    """
    env = os.environ if environ is None else environ
    value = env.get(home_variable(), "")
    if not value:
        return None
    return Path(value)


def cache_root_for(home_dir: Path) -> Path:
    """Return the repository cache root under ``home_dir``."""
    return home_dir.joinpath(*CACHE_DIR_PARTS)
