"""Adjusted metric totals across many commits."""

from fractions import Fraction
from typing import Dict, Iterable, List, Union

from ..models import Commit, Number, OwnerTotals
from .adjusted import MetricVariant, attribute, owner_changes, resolve_metric


def summarize(
    commits: Iterable[Commit],
    metric: Union[MetricVariant, str] = MetricVariant.INSERTIONS_AND_DELETIONS,
    exact: bool = False,
) -> List[OwnerTotals]:
    """Accumulate per-commit fractions into per-owner totals.

    ``adjusted_commits`` is how many commits' worth of work each owner
    received. Summed over owners it equals the number of commits with a
    nonzero total, since each of those distributes exactly 1.

    Returns:
        One OwnerTotals per owner seen in any commit, sorted by owner.
    """
    variant = resolve_metric(metric)
    zero: Number = Fraction(0) if exact else 0.0

    totals: Dict[str, OwnerTotals] = {}
    for commit in commits:
        pooled = owner_changes(commit, variant.weight)
        fractions = attribute(commit, variant.weight, exact=exact)
        for owner, changes in pooled.items():
            entry = totals.get(owner)
            if entry is None:
                entry = totals[owner] = OwnerTotals(
                    owner=owner, adjusted_commits=zero, commits=0, changes=0
                )
            entry.commits += 1
            entry.changes += changes
            entry.adjusted_commits += fractions.get(owner, zero)

    return [totals[owner] for owner in sorted(totals)]
