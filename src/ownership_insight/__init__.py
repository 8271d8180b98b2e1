"""
Ownership Insight - adjusted per-owner contribution metrics

Splits every commit across the owners of the files it touches, in proportion
to the lines changed in their files, so that each commit distributes exactly
one unit of credit.
"""

__version__ = "0.2.0"
__author__ = "Naman Agarwal"

from .exceptions import InvalidInputError, OwnershipInsightError
from .metrics import (
    MetricVariant,
    compute,
    compute_batch,
    compute_insertions_and_deletions,
    compute_insertions_only,
    summarize,
)
from .models import Commit, CommitAttribution, FileChange, OwnerAttribution

__all__ = [
    "compute_insertions_only",  # v1 metric
    "compute_insertions_and_deletions",  # v2 metric
    "compute",
    "compute_batch",
    "summarize",
    "MetricVariant",
    "Commit",
    "FileChange",
    "OwnerAttribution",
    "CommitAttribution",
    "InvalidInputError",
    "OwnershipInsightError",
]
