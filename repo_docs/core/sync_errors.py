"""Error types returned by the sync services."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

type GitOperation = Literal["clone", "pull"]


@dataclass(frozen=True, slots=True)
class HomeDirectoryUnset:
    variable: str = "HOME"


@dataclass(frozen=True, slots=True)
class UnresolvableUrl:
    url: str


@dataclass(frozen=True, slots=True)
class NotAVersionControlledDirectory:
    path: Path


@dataclass(frozen=True, slots=True)
class VersionControlOperationFailed:
    operation: GitOperation
    label: str


@dataclass(frozen=True, slots=True)
class MissingArgument:
    hint: str = "Run: repo-docs <url> or repo-docs --sync-all"


SyncError = (
    HomeDirectoryUnset
    | UnresolvableUrl
    | NotAVersionControlledDirectory
    | VersionControlOperationFailed
    | MissingArgument
)
