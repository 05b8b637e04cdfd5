"""CLI entry point: registers all subcommands."""

import typer

app = typer.Typer(
    name="memberrank",
    help="memberrank - rank C# members by statement count and nesting depth",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .main import main as _main_callback  # noqa: F401, E402
from .top import top as _top  # noqa: F401, E402
from .show import show as _show  # noqa: F401, E402
