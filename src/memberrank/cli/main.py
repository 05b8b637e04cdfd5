"""Global options shared by every subcommand."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ..logging_config import setup_logging
from . import app
from ._common import console


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"memberrank {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML configuration file",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Parallel workers (default: CPU count, at most 8)",
        min=1,
    ),
    recursive: Optional[bool] = typer.Option(
        None,
        "--recursive/--no-recursive",
        help="Also scan subdirectories of the source directory",
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--lenient",
        help="Skip files with syntax errors instead of ranking the recovered tree",
    ),
    count_compound: Optional[bool] = typer.Option(
        None,
        "--count-compound/--simple-only",
        help="Count if/while/try/... themselves as statements",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to a file"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Rank the members of a directory of C# files by complexity.

    [bold cyan]Examples:[/bold cyan]

      memberrank top ./src long.txt nesting.txt

      memberrank --recursive show ./src --metric nesting --limit 20
    """
    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)
    ctx.obj = {
        "config": config,
        "workers": workers,
        "recursive": recursive,
        "strict_parse": strict,
        "count_compound_statements": count_compound,
        "verbose": verbose,
        "quiet": quiet,
    }
