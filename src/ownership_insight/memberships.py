"""Author to owner memberships.

A membership row says that an author (matched by email, by name, or both)
belongs to an owner. The owner analysis uses it to tell changes made by an
owner's own team apart from changes made by outsiders.

Memberships are stored as tab-separated text:

    author_email<TAB>author_name<TAB>codeowner

An empty cell means the author is not matched on that column.
"""

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Union

from .exceptions import MalformedRecordError
from .logging_config import get_logger

logger = get_logger(__name__)

TSV_HEADER = ["author_email", "author_name", "codeowner"]


@dataclass(frozen=True)
class Membership:
    codeowner: str
    author_email: Optional[str] = None
    author_name: Optional[str] = None


class AuthorMembership:
    """Lookup of owners by author email or name."""

    def __init__(self, memberships: Iterable[Membership]):
        self.email_to_owner: Dict[str, Set[str]] = {}
        self.name_to_owner: Dict[str, Set[str]] = {}

        for membership in memberships:
            if membership.author_email:
                self.email_to_owner.setdefault(membership.author_email, set()).add(
                    membership.codeowner
                )
            if membership.author_name:
                self.name_to_owner.setdefault(membership.author_name, set()).add(
                    membership.codeowner
                )

    def owners_for(self, author_name: str, author_email: str) -> Set[str]:
        """Union of owners matched by email and by name."""
        owners: Set[str] = set()
        owners.update(self.email_to_owner.get(author_email, ()))
        owners.update(self.name_to_owner.get(author_name, ()))
        return owners

    def is_member(self, author_name: str, author_email: str, owner: str) -> bool:
        return owner in self.owners_for(author_name, author_email)


def write_memberships_tsv(memberships: Iterable[Membership], path: Union[str, Path]) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, delimiter="\t", lineterminator="\n")
        writer.writerow(TSV_HEADER)
        for membership in memberships:
            writer.writerow(
                [
                    membership.author_email or "",
                    membership.author_name or "",
                    membership.codeowner,
                ]
            )


def read_memberships_tsv(path: Union[str, Path]) -> List[Membership]:
    """Read memberships written by write_memberships_tsv.

    The first line is a header and is skipped.

    Raises:
        MalformedRecordError: If a row does not have exactly three columns or
            names no owner.
    """
    memberships: List[Membership] = []

    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f, delimiter="\t")
        next(reader, None)

        for row in reader:
            line = reader.line_num
            if not row:
                continue
            if len(row) != 3:
                raise MalformedRecordError(
                    path, f"expected 3 tab-separated columns, got {len(row)}", line=line
                )
            email, name, codeowner = row
            if not codeowner:
                raise MalformedRecordError(path, "missing codeowner", line=line)
            memberships.append(
                Membership(
                    codeowner=codeowner,
                    author_email=email or None,
                    author_name=name or None,
                )
            )

    logger.debug("Read %d memberships from %s", len(memberships), path)
    return memberships
