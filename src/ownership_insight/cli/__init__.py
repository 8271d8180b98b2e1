"""CLI entry point -- registers all subcommands."""

import typer

app = typer.Typer(
    name="ownership-insight",
    help="Ownership Insight - adjusted per-owner contribution metrics",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .attribute import main as _main_callback  # noqa: F401, E402
from .summary import summary as _summary  # noqa: F401, E402
from .owners import owners as _owners  # noqa: F401, E402
