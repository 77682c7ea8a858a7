from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import typer

from repo_docs.core.config import SyncConfig, load_config
from repo_docs.core.result import Err
from repo_docs.git.runner import GitCli, GitRunner
from repo_docs.output.console import ConsoleProtocol, RichConsole
from repo_docs.output.errors import print_sync_error, sync_error_exit_code
from repo_docs.platform.files import FileSystemProtocol, LocalFileSystem


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: SyncConfig
    console: ConsoleProtocol
    git: GitRunner
    fs: FileSystemProtocol


def build_context(environ: Mapping[str, str] | None = None) -> CLIContext:
    console = RichConsole()
    config_result = load_config(environ)
    if isinstance(config_result, Err):
        print_sync_error(config_result.error, console)
        raise typer.Exit(code=sync_error_exit_code(config_result.error))

    config = config_result.value
    return CLIContext(
        config=config,
        console=console,
        git=GitCli(config.git),
        fs=LocalFileSystem(),
    )
