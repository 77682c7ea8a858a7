"""Resolve a repository URL to its place in the local cache."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from repo_docs.core.result import Err, Ok, Result
from repo_docs.core.sync_errors import UnresolvableUrl
from repo_docs.git.identity import RepoIdentity, parse_repo_identity

__all__ = ["SyncTarget", "resolve_target"]


@dataclass(frozen=True, slots=True)
class SyncTarget:
    """A repository URL resolved against the cache root.

    Attributes:
        identity: Parsed organization/repository pair.
        source_url: URL exactly as given, passed to git unchanged.
        local_path: ``<cache_root>/<organization>/<repository>``.
        label: ``<organization>/<repository>`` for user-facing output.
    """

    identity: RepoIdentity
    source_url: str
    local_path: Path
    label: str


def resolve_target(url: str, *, cache_root: Path) -> Result[SyncTarget, UnresolvableUrl]:
    identity = parse_repo_identity(url)
    if identity is None:
        return Err(UnresolvableUrl(url=url))

    return Ok(
        SyncTarget(
            identity=identity,
            source_url=url,
            local_path=cache_root / identity.organization / identity.repository,
            label=identity.label,
        )
    )
