"""Summary command -- adjusted totals per owner across all commits."""

import json
from fractions import Fraction
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..exceptions import OwnershipInsightError
from ..metrics import summarize
from ..models import OwnerTotals
from . import app
from ._common import METRIC_CHOICE, console, fail, get_config, read_commits


@app.command()
def summary(
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
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """
    Sum each owner's adjusted fractions over all commits.

    [bold cyan]Examples:[/bold cyan]

      ownership-insight summary commits.json

      ownership-insight summary commits.json --metric insertions --json
    """
    config = get_config(ctx)
    commits = read_commits(commits_file)
    metric_name = (metric or config.metric).lower()

    try:
        totals = summarize(commits, metric=metric_name, exact=config.exact)
    except OwnershipInsightError as e:
        fail(e)

    if json_output:
        _output_json(totals, config.precision)
    else:
        _output_rich(totals, metric_name, config.precision)


def _output_json(totals: List[OwnerTotals], precision: int) -> None:
    data = [
        {
            "owner": t.owner,
            "adjusted_commits": _json_number(t.adjusted_commits, precision),
            "commits": t.commits,
            "changes": t.changes,
        }
        for t in totals
    ]
    print(json.dumps(data, indent=2))


def _json_number(value, precision: int):
    # Exact totals keep their rational form, as in attribute --format json
    if isinstance(value, Fraction):
        return str(value)
    return round(float(value), precision)


def _output_rich(totals: List[OwnerTotals], metric: str, precision: int) -> None:
    if not totals:
        console.print("[yellow]No owners found.[/yellow]")
        return

    table = Table(title=f"Adjusted totals ({metric})", show_lines=False, pad_edge=True)
    table.add_column("Owner", style="bold")
    table.add_column("Adjusted commits", justify="right", style="green")
    table.add_column("Commits", justify="right")
    table.add_column("Changes", justify="right", style="cyan")

    for t in totals:
        table.add_row(
            escape(t.owner),
            f"{float(t.adjusted_commits):.{precision}f}",
            str(t.commits),
            str(t.changes),
        )

    console.print(table)
