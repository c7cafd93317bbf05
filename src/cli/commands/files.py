"""Virtual filesystem commands."""

import asyncio

import typer

from src.cli.utils.context import CLIContext
from src.infrastructure.filesystem import (FilesystemError, InvalidPathError,
                                           PathSanitizer)

app = typer.Typer(help="Browse the data root")


def _fail(cli_ctx: CLIContext, exc: FilesystemError) -> None:
    if isinstance(exc, InvalidPathError):
        cli_ctx.formatter.print_error(exc.message)
    else:
        cli_ctx.formatter.print_error(f"{exc.path}: {exc.message}")
    raise typer.Exit(1)


@app.command("ls")
def list_directory(
    ctx: typer.Context,
    path: str = typer.Argument("/", help="Virtual directory path"),
):
    """
    List a directory, folders first.

    Example:
        report-dashboard fs ls /test_pipeline_results
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        entries = asyncio.run(cli_ctx.get_store().list(path))
    except FilesystemError as e:
        _fail(cli_ctx, e)

    cli_ctx.formatter.print_entries(
        [entry.to_dict() for entry in entries],
        title=PathSanitizer.sanitize(path),
    )


@app.command("cat")
def read_file(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Virtual file path"),
):
    """
    Print raw file content.

    Example:
        report-dashboard fs cat /logs/error.log
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        content = asyncio.run(cli_ctx.get_store().read_file(path))
    except FilesystemError as e:
        _fail(cli_ctx, e)

    typer.echo(content, nl=False)


@app.command("info")
def item_info(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Virtual path"),
):
    """
    Show metadata for a file or directory.

    Example:
        report-dashboard fs info /reports/daily
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        entry = asyncio.run(cli_ctx.get_store().stat(path))
    except FilesystemError as e:
        _fail(cli_ctx, e)

    cli_ctx.formatter.print_detail(entry.to_dict(), title=entry.path)


@app.command("sanitize")
def sanitize_path(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Raw path string"),
):
    """
    Show the canonical virtual path for an input string.

    Example:
        report-dashboard fs sanitize "reports//daily/"
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        sanitized = PathSanitizer.sanitize(path)
    except InvalidPathError as e:
        _fail(cli_ctx, e)

    typer.echo(sanitized)
