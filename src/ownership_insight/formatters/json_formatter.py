"""JSON formatter for attribution output."""

import json
from fractions import Fraction
from typing import List, Union

from .base import BaseFormatter
from ..models import CommitAttribution, Number


class JsonFormatter(BaseFormatter):
    """Render results as JSON.

    Float fractions are rounded to the configured precision; exact fractions
    are written as "numerator/denominator" strings ("1" and "0" when whole).
    """

    def render(self, results: List[CommitAttribution]) -> None:
        print(self.format(results))

    def format(self, results: List[CommitAttribution]) -> str:
        data = [
            {
                "commit": r.commit_id,
                "metric": r.metric,
                "fractions": {a.owner: self._value(a.fraction) for a in r.attributions()},
            }
            for r in results
        ]
        return json.dumps(data, indent=2)

    def _value(self, value: Number) -> Union[str, float]:
        if isinstance(value, Fraction):
            return self.format_fraction(value)
        return round(value, self.precision)
