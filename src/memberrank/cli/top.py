"""Top command -- write both rankings to text files."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis import format_results
from ..exceptions import MemberRankError
from ..file_ops import safe_write_file
from ..metrics import Metric
from . import app
from ._common import console, fail, resolve_config, run_analysis


@app.command()
def top(
    ctx: typer.Context,
    source_dir: Path = typer.Argument(
        ...,
        help="Directory of C# source files",
        file_okay=False,
        dir_okay=True,
    ),
    statements_out: Path = typer.Argument(
        ..., help="Output file for the statement-count ranking", dir_okay=False
    ),
    nesting_out: Path = typer.Argument(
        ..., help="Output file for the nesting-depth ranking", dir_okay=False
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        help="Entries per ranking (default: 100)",
        min=1,
    ),
):
    """
    Write the members with the most statements and the deepest nesting.

    Each output line is [bold]value<TAB>file:line[/bold], best first.
    """
    try:
        config = resolve_config(ctx, limit)
        result = run_analysis(config, source_dir)
        safe_write_file(
            statements_out, format_results(result.top(Metric.STATEMENTS, config.limit))
        )
        safe_write_file(nesting_out, format_results(result.top(Metric.NESTING, config.limit)))
    except MemberRankError as e:
        fail(e)

    console.print(
        f"Ranked [bold]{len(result.members)}[/bold] members from "
        f"{result.files_scanned - len(result.failed_files)} files "
        f"→ {statements_out}, {nesting_out}"
    )
