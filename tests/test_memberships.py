"""Tests for author to owner memberships."""

import pytest

from ownership_insight.exceptions import MalformedRecordError
from ownership_insight.memberships import (
    AuthorMembership,
    Membership,
    read_memberships_tsv,
    write_memberships_tsv,
)


@pytest.fixture
def records():
    return [
        Membership(codeowner="@org/api", author_email="alice@example.com", author_name="Alice"),
        Membership(codeowner="@org/web", author_email="alice@example.com"),
        Membership(codeowner="@org/web", author_name="Bob"),
    ]


class TestAuthorMembership:
    def test_owners_by_email_and_name(self, records):
        lookup = AuthorMembership(records)
        assert lookup.owners_for("Alice", "alice@example.com") == {"@org/api", "@org/web"}
        assert lookup.owners_for("Bob", "bob@elsewhere.org") == {"@org/web"}

    def test_unknown_author(self, records):
        lookup = AuthorMembership(records)
        assert lookup.owners_for("Mallory", "mallory@example.com") == set()
        assert not lookup.is_member("Mallory", "mallory@example.com", "@org/api")

    def test_name_match_alone_is_enough(self, records):
        lookup = AuthorMembership(records)
        assert lookup.is_member("Alice", "alice@personal.net", "@org/api")


class TestMembershipTsv:
    def test_write_then_read(self, tmp_path, records):
        path = tmp_path / "memberships.tsv"
        write_memberships_tsv(records, path)
        assert read_memberships_tsv(path) == records

    def test_header_written(self, tmp_path, records):
        path = tmp_path / "memberships.tsv"
        write_memberships_tsv(records, path)
        first = path.read_text(encoding="utf-8").splitlines()[0]
        assert first == "author_email\tauthor_name\tcodeowner"

    def test_empty_cells_become_none(self, tmp_path):
        path = tmp_path / "memberships.tsv"
        path.write_text("author_email\tauthor_name\tcodeowner\n\tBob\tweb\n", encoding="utf-8")
        assert read_memberships_tsv(path) == [Membership(codeowner="web", author_name="Bob")]

    def test_wrong_column_count(self, tmp_path):
        path = tmp_path / "memberships.tsv"
        path.write_text(
            "author_email\tauthor_name\tcodeowner\nalice@example.com\tapi\n", encoding="utf-8"
        )
        with pytest.raises(MalformedRecordError) as exc_info:
            read_memberships_tsv(path)
        assert exc_info.value.line == 2

    def test_missing_codeowner(self, tmp_path):
        path = tmp_path / "memberships.tsv"
        path.write_text("author_email\tauthor_name\tcodeowner\na@b.c\tA\t\n", encoding="utf-8")
        with pytest.raises(MalformedRecordError, match="codeowner"):
            read_memberships_tsv(path)

    def test_blank_lines_skipped(self, tmp_path):
        path = tmp_path / "memberships.tsv"
        path.write_text("author_email\tauthor_name\tcodeowner\n\na@b.c\t\tapi\n", encoding="utf-8")
        assert read_memberships_tsv(path) == [Membership(codeowner="api", author_email="a@b.c")]
