"""Core domain types and logic."""

from .config import SyncConfig, load_config
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok
from .sync_errors import (
    HomeDirectoryUnset,
    MissingArgument,
    NotAVersionControlledDirectory,
    SyncError,
    UnresolvableUrl,
    VersionControlOperationFailed,
)

__all__ = [
    # config
    "SyncConfig",
    "load_config",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
    # sync errors
    "HomeDirectoryUnset",
    "MissingArgument",
    "NotAVersionControlledDirectory",
    "SyncError",
    "UnresolvableUrl",
    "VersionControlOperationFailed",
]
