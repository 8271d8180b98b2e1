"""CSV formatter for attribution output."""

import csv
import io
from typing import List

from .base import BaseFormatter
from ..models import CommitAttribution


class CsvFormatter(BaseFormatter):
    """Render results as CSV, one row per commit and owner."""

    def render(self, results: List[CommitAttribution]) -> None:
        print(self.format(results), end="")

    def format(self, results: List[CommitAttribution]) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["commit", "metric", "owner", "fraction"])
        for r in results:
            for a in r.attributions():
                writer.writerow([r.commit_id, r.metric, a.owner, self.format_fraction(a.fraction)])
        return output.getvalue()
