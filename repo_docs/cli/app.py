from __future__ import annotations

import typer

from repo_docs import __version__
from repo_docs.cli.context import build_context
from repo_docs.core.result import Err, Ok
from repo_docs.core.sync_errors import MissingArgument
from repo_docs.output.console import RichConsole
from repo_docs.output.errors import print_sync_error, sync_error_exit_code
from repo_docs.services.bulk import BulkSyncService
from repo_docs.services.sync import SyncService


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


@app.command()
def repo_docs(
    url: str | None = typer.Argument(
        None,
        help="Repository URL (https://host/org/repo, git@host:org/repo.git, ...).",
    ),
    sync_all: bool = typer.Option(
        False,
        "--sync-all",
        help="Pull every repository under ~/.local/repos.",
    ),
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Clone or update repositories in ~/.local/repos."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    # Individual pull failures are listed in the report, not in the exit code.
    if sync_all:
        ctx = build_context()
        BulkSyncService(
            config=ctx.config,
            console=ctx.console,
            git=ctx.git,
            fs=ctx.fs,
        ).sync_all()
        return

    if url is None:
        error = MissingArgument()
        print_sync_error(error, RichConsole())
        raise typer.Exit(code=sync_error_exit_code(error))

    ctx = build_context()
    service = SyncService(config=ctx.config, console=ctx.console, git=ctx.git, fs=ctx.fs)
    match service.sync(url):
        case Err(e):
            print_sync_error(e, ctx.console)
            raise typer.Exit(code=sync_error_exit_code(e))
        case Ok(_):
            pass


def main() -> None:
    app(prog_name="repo-docs")
