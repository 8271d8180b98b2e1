"""Data models for owner attribution."""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Dict, Iterator, List, Optional, Union

Number = Union[float, Fraction]


@dataclass
class FileChange:
    owner: Optional[str]  # team or individual the file is attributed to
    insertions: int
    deletions: int
    path: str = ""  # traceability only


@dataclass
class Commit:
    id: str
    changes: List[FileChange] = field(default_factory=list)
    author_name: str = ""
    author_email: str = ""
    timestamp: int = 0  # unix seconds


@dataclass(frozen=True)
class OwnerAttribution:
    owner: str
    fraction: Number  # in [0, 1]


@dataclass
class CommitAttribution:
    """Per-commit result of an adjusted metric."""

    commit_id: str
    metric: str
    fractions: Dict[str, Number]  # empty when the commit has no weighable changes

    @property
    def is_empty(self) -> bool:
        return not self.fractions

    def attributions(self) -> Iterator[OwnerAttribution]:
        """Yield one OwnerAttribution per owner, sorted by owner."""
        for owner in sorted(self.fractions):
            yield OwnerAttribution(owner=owner, fraction=self.fractions[owner])


@dataclass
class OwnerTotals:
    """Adjusted metric accumulated across many commits for one owner."""

    owner: str
    adjusted_commits: Number  # sum of per-commit fractions
    commits: int  # commits touching at least one of the owner's files
    changes: int  # sum of the metric's per-file weight


@dataclass
class ContributorInfo:
    author_name: str
    author_email: str
    metric_value: int


@dataclass
class OwnerInfo:
    """Team versus outside contribution breakdown for one owner."""

    owner: str
    total_insertions_by_team: int = 0
    total_deletions_by_team: int = 0
    total_commits_by_team: int = 0

    total_insertions_by_others: int = 0
    total_deletions_by_others: int = 0
    total_commits_by_others: int = 0

    top_team_contributors_by_changes: List[ContributorInfo] = field(default_factory=list)
    top_team_contributors_by_commits: List[ContributorInfo] = field(default_factory=list)
    top_outside_contributors_by_changes: List[ContributorInfo] = field(default_factory=list)
    top_outside_contributors_by_commits: List[ContributorInfo] = field(default_factory=list)
