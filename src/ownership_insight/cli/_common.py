"""Shared CLI helpers."""

from pathlib import Path
from typing import List

import click
import typer
from rich.console import Console
from rich.markup import escape

from ..config import AnalysisConfig
from ..exceptions import OwnershipInsightError
from ..loader import load_commits
from ..logging_config import get_logger
from ..metrics import MetricVariant
from ..models import Commit

console = Console()
err_console = Console(stderr=True)

logger = get_logger(__name__)

METRIC_CHOICE = click.Choice([m.value for m in MetricVariant], case_sensitive=False)


def get_config(ctx: typer.Context) -> AnalysisConfig:
    """Config resolved by the root callback."""
    ctx.ensure_object(dict)
    return ctx.obj.get("config") or AnalysisConfig()


def read_commits(path: Path) -> List[Commit]:
    """Load commits, converting library errors into a CLI exit."""
    try:
        return load_commits(path)
    except OwnershipInsightError as e:
        fail(e)


def fail(error: OwnershipInsightError) -> None:
    logger.error(f"{error.__class__.__name__}: {error}")
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(1)
