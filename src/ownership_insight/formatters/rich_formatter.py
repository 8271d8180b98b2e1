"""Rich terminal formatter for attribution output."""

from typing import List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import CommitAttribution
from .base import BaseFormatter

console = Console()


class RichFormatter(BaseFormatter):
    """Table with one row per commit and owner."""

    def render(self, results: List[CommitAttribution]) -> None:
        console.print(self._table(results))

    def format(self, results: List[CommitAttribution]) -> str:
        with console.capture() as capture:
            console.print(self._table(results))
        return capture.get()

    def _table(self, results: List[CommitAttribution]) -> Table:
        metric = results[0].metric if results else ""
        table = Table(title=f"Adjusted attribution ({metric})", show_lines=False, pad_edge=True)
        table.add_column("Commit", style="cyan")
        table.add_column("Owner", style="bold")
        table.add_column("Fraction", justify="right", style="green")

        for r in results:
            commit = escape(r.commit_id[:12])
            if r.is_empty:
                table.add_row(commit, "[dim]-[/dim]", "[dim]no changes[/dim]")
                continue
            for a in r.attributions():
                table.add_row(commit, escape(a.owner), self.format_fraction(a.fraction))
                commit = ""
        return table
