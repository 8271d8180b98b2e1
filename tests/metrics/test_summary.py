"""Tests for adjusted metric totals across commits."""

from fractions import Fraction

import pytest

from ownership_insight.exceptions import InvalidInputError
from ownership_insight.metrics.summary import summarize
from ownership_insight.models import Commit, FileChange


class TestSummarize:
    def test_empty_input(self):
        assert summarize([]) == []

    def test_worked_examples_insertions(self, commit_one, commit_two):
        totals = {t.owner: t for t in summarize([commit_one, commit_two], "insertions")}
        assert totals["owner1"].adjusted_commits == pytest.approx(4 / 7 + 0.125)
        assert totals["owner2"].adjusted_commits == pytest.approx(3 / 7 + 0.875)
        assert totals["owner1"].changes == 105
        assert totals["owner2"].changes == 110
        assert totals["owner1"].commits == 2

    def test_adjusted_commits_sum_to_commit_count(self, commit_one, commit_two):
        totals = summarize([commit_one, commit_two])
        assert sum(t.adjusted_commits for t in totals) == pytest.approx(2.0)

    def test_zero_total_commit_counts_but_adds_nothing(self, commit_one, metadata_only_commit):
        totals = summarize([commit_one, metadata_only_commit], exact=True)
        assert sum(t.adjusted_commits for t in totals) == 1
        by_owner = {t.owner: t for t in totals}
        assert by_owner["owner1"].commits == 2
        assert by_owner["owner1"].adjusted_commits == Fraction(15, 26)

    def test_sorted_by_owner(self):
        commits = [
            Commit(id="1", changes=[FileChange(owner="web", insertions=1, deletions=0)]),
            Commit(id="2", changes=[FileChange(owner="api", insertions=1, deletions=0)]),
        ]
        assert [t.owner for t in summarize(commits)] == ["api", "web"]

    def test_invalid_change_rejected(self):
        commits = [Commit(id="1", changes=[FileChange(owner="", insertions=1, deletions=0)])]
        with pytest.raises(InvalidInputError):
            summarize(commits)
