"""Owners command -- team versus outside contributions per owner."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..analysis import analyze_by_owner
from ..exceptions import OwnershipInsightError
from ..memberships import AuthorMembership, read_memberships_tsv
from ..models import OwnerInfo
from . import app
from ._common import console, fail, get_config, read_commits


@app.command()
def owners(
    ctx: typer.Context,
    commits_file: Path = typer.Argument(
        ...,
        help="JSON file with commit records",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    memberships_file: Optional[Path] = typer.Option(
        None,
        "--memberships",
        "-M",
        help="TSV of author_email, author_name, codeowner",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        "-n",
        help="Contributors listed per ranking",
        min=1,
        max=1000,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """
    Break down each owner's changes into team and outside contributions.

    Without --memberships every author counts as an outsider.
    """
    config = get_config(ctx)
    commits = read_commits(commits_file)

    try:
        memberships = None
        if memberships_file is not None:
            memberships = AuthorMembership(read_memberships_tsv(memberships_file))
        infos = analyze_by_owner(
            commits,
            memberships=memberships,
            top_n=top if top is not None else config.top_contributors,
        )
    except OwnershipInsightError as e:
        fail(e)

    if json_output:
        print(json.dumps([asdict(info) for info in infos], indent=2))
    else:
        _output_rich(infos)


def _output_rich(infos: List[OwnerInfo]) -> None:
    if not infos:
        console.print("[yellow]No owners found.[/yellow]")
        return

    table = Table(title="Owner contributions", show_lines=False, pad_edge=True)
    table.add_column("Owner", style="bold")
    table.add_column("Team +/-", justify="right", style="green")
    table.add_column("Team commits", justify="right")
    table.add_column("Others +/-", justify="right", style="yellow")
    table.add_column("Others commits", justify="right")
    table.add_column("Top outsider", style="dim")

    for info in infos:
        top = info.top_outside_contributors_by_changes
        outsider = f"{escape(top[0].author_name)} ({top[0].metric_value})" if top else "-"
        table.add_row(
            escape(info.owner),
            f"+{info.total_insertions_by_team}/-{info.total_deletions_by_team}",
            str(info.total_commits_by_team),
            f"+{info.total_insertions_by_others}/-{info.total_deletions_by_others}",
            str(info.total_commits_by_others),
            outsider,
        )

    console.print(table)
