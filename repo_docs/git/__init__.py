"""Git operations module.

This module provides:
- RepoIdentity parsing from clone URLs
- SyncTarget resolution against the cache root
- GitRunner, the boundary to the git executable

Usage:
    from repo_docs.git import GitCli, resolve_target

    match resolve_target("https://github.com/acme/widgets", cache_root=root):
        case Ok(target):
            GitCli().run(["pull"], cwd=target.local_path)
"""

from repo_docs.git.identity import (
    RepoIdentity,
    extract_path,
    parse_repo_identity,
    strip_git_suffix,
)
from repo_docs.git.runner import GitCli, GitRunner, error_result, to_error_message
from repo_docs.git.target import SyncTarget, resolve_target

__all__ = [
    # Identity
    "RepoIdentity",
    "extract_path",
    "parse_repo_identity",
    "strip_git_suffix",
    # Runner
    "GitCli",
    "GitRunner",
    "error_result",
    "to_error_message",
    # Target
    "SyncTarget",
    "resolve_target",
]
