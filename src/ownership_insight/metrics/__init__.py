"""Adjusted contribution metrics."""

from .adjusted import (
    MetricVariant,
    attribute,
    compute,
    compute_batch,
    compute_insertions_and_deletions,
    compute_insertions_only,
    insertions_and_deletions_weight,
    insertions_weight,
    owner_changes,
)
from .summary import summarize

__all__ = [
    "MetricVariant",
    "attribute",
    "compute",
    "compute_batch",
    "compute_insertions_only",
    "compute_insertions_and_deletions",
    "insertions_weight",
    "insertions_and_deletions_weight",
    "owner_changes",
    "summarize",
]
