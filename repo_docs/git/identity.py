"""Repository identity from a clone URL.

Derives ``(organization, repository)`` from the last two path segments
of an HTTPS URL, an SSH shorthand (``git@host:org/repo.git``) or a bare
path. Parsing never raises: anything that does not yield two non-empty
segments returns None.

Usage:
    identity = parse_repo_identity("git@github.com:Effect-TS/effect.git")
    if identity is not None:
        print(identity.label)  # Effect-TS/effect
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

__all__ = [
    "GIT_SUFFIX",
    "RepoIdentity",
    "extract_path",
    "parse_repo_identity",
    "strip_git_suffix",
]

GIT_SUFFIX = ".git"


@dataclass(frozen=True, slots=True)
class RepoIdentity:
    """Organization and repository name of a remote.

    Attributes:
        organization: Second-to-last path segment (owner, group, user).
        repository: Last path segment without a trailing ``.git``.
    """

    organization: str
    repository: str

    @property
    def label(self) -> str:
        return f"{self.organization}/{self.repository}"


def strip_git_suffix(value: str) -> str:
    """Remove one trailing ``.git`` from ``value``."""
    if value.endswith(GIT_SUFFIX):
        return value[: -len(GIT_SUFFIX)]
    return value


def extract_path(raw: str) -> str:
    """Return the path-like part of a repository URL.

    - ``scheme://host/path``: the URL path, or ``raw`` itself when the
      URL does not parse.
    - ``host:path`` with no ``/`` before the colon: everything after it.
    - anything else: ``raw`` unchanged.
    """
    if "://" in raw:
        try:
            parts = urlsplit(raw)
            # Accessing port validates the authority part.
            _ = parts.port
        except ValueError:
            return raw
        return parts.path

    head, sep, tail = raw.partition(":")
    if sep and "/" not in head:
        return tail
    return raw


def parse_repo_identity(raw: str) -> RepoIdentity | None:
    """Parse ``raw`` into a RepoIdentity, or None if it has no org/repo."""
    segments = [segment for segment in extract_path(raw).split("/") if segment]
    if len(segments) < 2:
        return None

    repository = strip_git_suffix(segments[-1])
    organization = segments[-2]
    if not repository or not organization:
        return None
    return RepoIdentity(organization=organization, repository=repository)
