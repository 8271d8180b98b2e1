"""Root callback and the per-commit attribution command."""

from pathlib import Path
from typing import Optional

import click
import typer

from ..config import load_config
from ..exceptions import OwnershipInsightError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..metrics import compute_batch
from . import app
from ._common import METRIC_CHOICE, console, fail, get_config, read_commits


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Split commits across the owners of the files they touch.

    Commit records are read from JSON files of already-extracted changes.

    [bold cyan]Examples:[/bold cyan]

      ownership-insight attribute commits.json

      ownership-insight attribute commits.json --metric insertions --format csv

      ownership-insight owners commits.json --memberships teams.tsv
    """
    from .. import __version__

    if version:
        console.print(
            f"[bold cyan]Ownership Insight[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    ctx.ensure_object(dict)
    try:
        settings = load_config(
            config_file=config,
            verbose=verbose,
            quiet=quiet,
            log_file=str(log_file) if log_file else None,
        )
    except OwnershipInsightError as e:
        fail(e)

    setup_logging(verbosity=settings.verbosity, log_file=settings.log_file)
    ctx.obj["config"] = settings


@app.command()
def attribute(
    ctx: typer.Context,
    commits_file: Path = typer.Argument(
        ...,
        help="JSON file with commit records",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    metric: Optional[str] = typer.Option(
        None,
        "--metric",
        "-m",
        help="Per-file weight: insertions | insertions_deletions",
        click_type=METRIC_CHOICE,
    ),
    output_format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich | json | csv",
        click_type=click.Choice(["rich", "json", "csv"], case_sensitive=False),
    ),
    precision: Optional[int] = typer.Option(
        None,
        "--precision",
        "-p",
        help="Decimal places for fractions",
        min=0,
        max=17,
    ),
    exact: bool = typer.Option(
        False,
        "--exact",
        help="Use exact rational arithmetic",
    ),
):
    """
    Attribute every commit to its owners as fractions summing to 1.

    Commits without weighable changes are listed with no owners.
    """
    config = get_config(ctx)
    commits = read_commits(commits_file)

    try:
        results = compute_batch(
            commits,
            metric=(metric or config.metric).lower(),
            exact=exact or config.exact,
        )
    except OwnershipInsightError as e:
        fail(e)

    digits = precision if precision is not None else config.precision
    get_formatter(output_format.lower(), precision=digits).render(results)
