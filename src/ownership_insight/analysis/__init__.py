"""Owner-level analysis across many commits."""

from .owners import analyze_by_owner

__all__ = ["analyze_by_owner"]
