"""Base formatter interface for attribution output."""

from abc import ABC, abstractmethod
from fractions import Fraction
from typing import List

from ..models import CommitAttribution, Number


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def __init__(self, precision: int = 4):
        self.precision = precision

    @abstractmethod
    def render(self, results: List[CommitAttribution]) -> None:
        """Render results to stdout."""

    @abstractmethod
    def format(self, results: List[CommitAttribution]) -> str:
        """Return formatted string representation of results."""

    def format_fraction(self, value: Number) -> str:
        if isinstance(value, Fraction):
            return str(value)
        return f"{float(value):.{self.precision}f}"
