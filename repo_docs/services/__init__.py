"""Sync services: single repository and bulk."""

from .bulk import (
    BulkReport,
    BulkSyncService,
    SyncOutcome,
    find_repos,
    pull_with_summary,
    repo_label,
    report_lines,
)
from .sync import SyncReport, SyncService, print_command_output

__all__ = [
    # bulk
    "BulkReport",
    "BulkSyncService",
    "SyncOutcome",
    "find_repos",
    "pull_with_summary",
    "repo_label",
    "report_lines",
    # sync
    "SyncReport",
    "SyncService",
    "print_command_output",
]
