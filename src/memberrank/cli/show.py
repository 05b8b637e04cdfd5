"""Show command -- print one ranking to the terminal."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..exceptions import MemberRankError
from ..metrics import Metric
from . import app
from ._common import console, fail, resolve_config, run_analysis

_METRIC_LABELS = {
    Metric.STATEMENTS: "Statements",
    Metric.NESTING: "Nesting",
}


@app.command()
def show(
    ctx: typer.Context,
    source_dir: Path = typer.Argument(
        ...,
        help="Directory of C# source files",
        file_okay=False,
        dir_okay=True,
    ),
    metric: Metric = typer.Option(
        Metric.STATEMENTS,
        "--metric",
        "-m",
        help="Metric to rank by",
        case_sensitive=False,
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        help="Entries to show (default: 100)",
        min=1,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """
    Show the top members for one metric.

    [bold cyan]Examples:[/bold cyan]

      memberrank show ./src

      memberrank show ./src --metric nesting --limit 10

      memberrank show ./src --json
    """
    try:
        config = resolve_config(ctx, limit)
        result = run_analysis(config, source_dir)
    except MemberRankError as e:
        fail(e)

    ranked = result.top(metric, config.limit)

    if json_output:
        print(
            json.dumps(
                [{"value": r.value, "file": r.file, "line": r.line} for r in ranked],
                indent=2,
            )
        )
        return

    if not ranked:
        console.print("[yellow]No members with statements found.[/yellow]")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column(_METRIC_LABELS[metric], justify="right", style="bold")
    table.add_column("File")
    table.add_column("Line", justify="right")

    for position, entry in enumerate(ranked, start=1):
        table.add_row(str(position), str(entry.value), entry.file, str(entry.line))

    console.print()
    console.print(
        f"[bold cyan]TOP {len(ranked)} BY {_METRIC_LABELS[metric].upper()}[/bold cyan]"
        f" -- {len(result.members)} members in {result.files_scanned} files"
    )
    console.print(table)
    console.print()
