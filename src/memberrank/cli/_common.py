"""Shared CLI helpers."""

from typing import NoReturn, Optional

import typer
from rich.console import Console

from ..analysis import AnalysisResult, RankingEngine
from ..config import AnalysisConfig, load_config
from ..exceptions import MemberRankError

console = Console()
err_console = Console(stderr=True)


def resolve_config(ctx: typer.Context, limit: Optional[int] = None) -> AnalysisConfig:
    """Build the run configuration from the global options and ``limit``."""
    options = dict(ctx.obj or {})
    config_file = options.pop("config", None)
    return load_config(config_file=config_file, limit=limit, **options)


def fail(error: MemberRankError) -> NoReturn:
    """Report an error and exit with status 1."""
    err_console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1)


def run_analysis(config: AnalysisConfig, source_dir) -> AnalysisResult:
    """Analyze ``source_dir`` and warn about files that were skipped."""
    result = RankingEngine(config).analyze(source_dir)
    if result.failed_files:
        err_console.print(
            f"[yellow]{len(result.failed_files)} of {result.files_scanned} files "
            "could not be parsed and were skipped.[/yellow]"
        )
    return result
