"""Per-owner contribution analysis.

For every owner, separates the lines and commits contributed by the owner's
own team from those contributed by outsiders, and ranks the contributors on
both sides.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..logging_config import get_logger
from ..memberships import AuthorMembership
from ..metrics.adjusted import validate_change
from ..models import Commit, ContributorInfo, OwnerInfo

logger = get_logger(__name__)

AuthorKey = Tuple[str, str]  # (name, email)


@dataclass
class _ContributorTally:
    changes: int = 0
    commits: Set[str] = field(default_factory=set)


@dataclass
class _OwnerTally:
    info: OwnerInfo
    team_commits: Set[str] = field(default_factory=set)
    other_commits: Set[str] = field(default_factory=set)
    team: Dict[AuthorKey, _ContributorTally] = field(default_factory=dict)
    others: Dict[AuthorKey, _ContributorTally] = field(default_factory=dict)


def analyze_by_owner(
    commits: Iterable[Commit],
    memberships: Optional[AuthorMembership] = None,
    top_n: int = 10,
) -> List[OwnerInfo]:
    """Build an OwnerInfo for every owner seen in the commits.

    Without a membership table every author counts as an outsider.

    Args:
        commits: Commits with author information.
        memberships: Author to owner lookup.
        top_n: Contributors kept in each ranking.

    Returns:
        OwnerInfo list sorted by owner.

    Raises:
        InvalidInputError: If any file change is invalid.
    """
    tallies: Dict[str, _OwnerTally] = {}

    for commit in commits:
        for change in commit.changes:
            validate_change(change, commit.id)

        author: AuthorKey = (commit.author_name, commit.author_email)
        for change in commit.changes:
            tally = tallies.get(change.owner)
            if tally is None:
                tally = tallies[change.owner] = _OwnerTally(info=OwnerInfo(owner=change.owner))

            is_team_member = memberships is not None and memberships.is_member(
                commit.author_name, commit.author_email, change.owner
            )
            info = tally.info
            if is_team_member:
                info.total_insertions_by_team += change.insertions
                info.total_deletions_by_team += change.deletions
                tally.team_commits.add(commit.id)
                contributors = tally.team
            else:
                info.total_insertions_by_others += change.insertions
                info.total_deletions_by_others += change.deletions
                tally.other_commits.add(commit.id)
                contributors = tally.others

            contributor = contributors.setdefault(author, _ContributorTally())
            contributor.changes += change.insertions + change.deletions
            contributor.commits.add(commit.id)

    results = []
    for owner in sorted(tallies):
        tally = tallies[owner]
        info = tally.info
        info.total_commits_by_team = len(tally.team_commits)
        info.total_commits_by_others = len(tally.other_commits)

        info.top_team_contributors_by_changes = _top(tally.team, top_n, by_commits=False)
        info.top_team_contributors_by_commits = _top(tally.team, top_n, by_commits=True)
        info.top_outside_contributors_by_changes = _top(tally.others, top_n, by_commits=False)
        info.top_outside_contributors_by_commits = _top(tally.others, top_n, by_commits=True)
        results.append(info)

    logger.debug("Analyzed %d owners", len(results))
    return results


def _top(
    contributors: Dict[AuthorKey, _ContributorTally], top_n: int, by_commits: bool
) -> List[ContributorInfo]:
    def metric(tally: _ContributorTally) -> int:
        return len(tally.commits) if by_commits else tally.changes

    ranked = sorted(contributors.items(), key=lambda item: (-metric(item[1]), item[0]))
    return [
        ContributorInfo(author_name=name, author_email=email, metric_value=metric(tally))
        for (name, email), tally in ranked[:top_n]
    ]
