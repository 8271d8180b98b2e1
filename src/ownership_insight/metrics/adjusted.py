"""Adjusted contribution metrics.

A commit that touches files of several owners should not count as a whole
commit for each of them. The adjusted metric splits every commit across the
owners it touches, in proportion to the lines changed in their files:

    owner_changes(o) = sum(weight(f) for f in commit.changes if f.owner == o)
    total_changes    = sum(owner_changes(o) for o in owners)
    fraction(o)      = owner_changes(o) / total_changes

Two weights exist:

    v1 (insertions):            weight(f) = f.insertions
    v2 (insertions_deletions):  weight(f) = f.insertions + f.deletions

Contributions are pooled per owner before normalizing, so the number of
files an owner touched does not matter, only their line counts. A commit
with total_changes == 0 has no defined split and yields an empty mapping.
"""

from enum import Enum
from fractions import Fraction
from typing import Callable, Dict, Iterable, List, Optional, Union

from ..exceptions import InvalidInputError
from ..logging_config import get_logger
from ..models import Commit, CommitAttribution, FileChange, Number

logger = get_logger(__name__)

WeightFn = Callable[[FileChange], int]


def insertions_weight(change: FileChange) -> int:
    return change.insertions


def insertions_and_deletions_weight(change: FileChange) -> int:
    return change.insertions + change.deletions


class MetricVariant(Enum):
    """Available adjusted metrics."""

    INSERTIONS = "insertions"
    INSERTIONS_AND_DELETIONS = "insertions_deletions"

    @property
    def weight(self) -> WeightFn:
        if self is MetricVariant.INSERTIONS:
            return insertions_weight
        return insertions_and_deletions_weight


def validate_change(change: FileChange, commit_id: Optional[str] = None) -> None:
    """Raise InvalidInputError unless the change can be weighed.

    Owners must be non-blank strings; line counts must be non-negative ints.
    """
    owner = change.owner
    if not isinstance(owner, str) or not owner.strip():
        raise InvalidInputError("owner", owner, "owner must be a non-empty string", commit_id)

    for name in ("insertions", "deletions"):
        value = getattr(change, name)
        # bool is an int subclass but never a line count
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(name, value, "line count must be an integer", commit_id)
        if value < 0:
            raise InvalidInputError(name, value, "line count must be non-negative", commit_id)


def owner_changes(commit: Commit, weight: WeightFn) -> Dict[str, int]:
    """Pool the weight of every file change by owner.

    Owners whose files weigh nothing are kept with a zero entry.

    Raises:
        InvalidInputError: If any change is invalid. All changes are checked
            before anything is summed.
    """
    for change in commit.changes:
        validate_change(change, commit.id)

    totals: Dict[str, int] = {}
    for change in commit.changes:
        totals[change.owner] = totals.get(change.owner, 0) + weight(change)
    return totals


def attribute(commit: Commit, weight: WeightFn, exact: bool = False) -> Dict[str, Number]:
    """Split a commit across its owners using the given per-file weight.

    Args:
        commit: Commit whose changes carry owner and line counts.
        weight: Per-file weight function.
        exact: Return ``Fraction`` values that sum to exactly 1.

    Returns:
        Mapping owner -> fraction in [0, 1]. Empty when the commit has no
        changes or every change weighs zero.
    """
    totals = owner_changes(commit, weight)
    total_changes = sum(totals.values())

    if total_changes == 0:
        logger.debug("Commit %s has no weighable changes", commit.id)
        return {}

    if exact:
        return {owner: Fraction(value, total_changes) for owner, value in totals.items()}
    return {owner: value / total_changes for owner, value in totals.items()}


def compute_insertions_only(commit: Commit, exact: bool = False) -> Dict[str, Number]:
    """Historical (v1) metric: weigh each file by its insertions."""
    return attribute(commit, insertions_weight, exact=exact)


def compute_insertions_and_deletions(commit: Commit, exact: bool = False) -> Dict[str, Number]:
    """Current (v2) metric: weigh each file by insertions plus deletions."""
    return attribute(commit, insertions_and_deletions_weight, exact=exact)


def resolve_metric(metric: Union[MetricVariant, str]) -> MetricVariant:
    if isinstance(metric, MetricVariant):
        return metric
    try:
        return MetricVariant(metric)
    except ValueError:
        valid = ", ".join(m.value for m in MetricVariant)
        raise InvalidInputError("metric", metric, f"expected one of {valid}")


def compute(
    commit: Commit,
    metric: Union[MetricVariant, str] = MetricVariant.INSERTIONS_AND_DELETIONS,
    exact: bool = False,
) -> Dict[str, Number]:
    """Attribute a commit with the named metric."""
    return attribute(commit, resolve_metric(metric).weight, exact=exact)


def compute_batch(
    commits: Iterable[Commit],
    metric: Union[MetricVariant, str] = MetricVariant.INSERTIONS_AND_DELETIONS,
    exact: bool = False,
) -> List[CommitAttribution]:
    """Attribute every commit independently, preserving input order."""
    variant = resolve_metric(metric)
    results = [
        CommitAttribution(
            commit_id=commit.id,
            metric=variant.value,
            fractions=attribute(commit, variant.weight, exact=exact),
        )
        for commit in commits
    ]
    logger.debug("Attributed %d commits with %s metric", len(results), variant.value)
    return results
