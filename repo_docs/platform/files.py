"""Filesystem capability.

The sync services only touch the disk through ``FileSystemProtocol`` so
tests can substitute a fake tree for the cache root.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

__all__ = ["FileSystemProtocol", "LocalFileSystem"]


class FileSystemProtocol(Protocol):
    def exists(self, path: Path) -> bool:
        """True if ``path`` exists (file, directory or other entry)."""
        ...

    def make_dirs(self, path: Path) -> None:
        """Create ``path`` and any missing parents."""
        ...

    def list_recursive(self, root: Path) -> list[Path]:
        """List every entry below ``root``, as paths relative to it."""
        ...


class LocalFileSystem:
    """FileSystemProtocol backed by the real disk."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def list_recursive(self, root: Path) -> list[Path]:
        # Sorted walk so discovery order is stable between runs.
        entries: list[Path] = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            rel_dir = Path(dirpath).relative_to(root)
            for name in sorted([*dirnames, *filenames]):
                entries.append(rel_dir / name)
        return entries
