"""Report Dashboard CLI Tool."""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from src.cli import __version__
from src.cli.commands import files
from src.cli.utils.context import CLIContext
from src.cli.utils.output import OutputFormatter
from src.core.config import settings
from src.infrastructure.filesystem.directory_store import use_system_collation
from src.infrastructure.logging import setup_logging

app = typer.Typer(
    name="report-dashboard",
    help="Report Dashboard CLI - browse and serve a sandboxed report directory",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    pretty_exceptions_enable=False,
)

console = Console()


def version_callback(value: bool):
    """Display version and exit."""
    if value:
        console.print(f"Report Dashboard CLI v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug output",
    ),
    output_format: str = typer.Option(
        "table",
        "--output",
        "-o",
        help="Output format: table, json, yaml",
    ),
    root: Optional[Path] = typer.Option(
        None,
        "--root",
        "-r",
        help="Data root directory (defaults to DATA_ROOT)",
    ),
):
    """
    Report Dashboard CLI

    Inspect the data root through the same sanitized virtual paths the API uses.
    """
    # Logs go to stderr so command output stays parseable
    setup_logging("DEBUG" if debug else "WARNING", sys.stderr)
    use_system_collation()

    ctx.obj = CLIContext(
        debug=debug,
        root=root or settings.data_root,
        formatter=OutputFormatter(output_format),
        console=console,
    )

    if debug:
        console.print("[dim]Debug mode enabled[/dim]")


app.add_typer(files.app, name="fs", help="Browse the data root")


@app.command("serve")
def serve_command(
    host: str = typer.Option(settings.api_host, "--host", help="Bind address"),
    port: int = typer.Option(settings.api_port, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """
    Run the HTTP API server.
    """
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("seed")
def seed_command(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", "-f", help="Write even if the root is not empty"),
):
    """
    Populate the data root with demo test reports.
    """
    from src.infrastructure.sample_data import seed_sample_data

    cli_ctx: CLIContext = ctx.obj
    written = seed_sample_data(cli_ctx.root, force=force)

    if written:
        cli_ctx.formatter.print_success(f"Created {written} sample files")
    else:
        cli_ctx.formatter.print_success("Data root is not empty; nothing to do")


if __name__ == "__main__":
    app()
