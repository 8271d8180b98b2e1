"""Tests for the attribution formatters."""

import csv
import io
import json
from fractions import Fraction

import pytest

from ownership_insight.formatters import (
    CsvFormatter,
    JsonFormatter,
    RichFormatter,
    get_formatter,
)
from ownership_insight.models import CommitAttribution


@pytest.fixture
def results():
    return [
        CommitAttribution(
            commit_id="commit1",
            metric="insertions_deletions",
            fractions={"owner2": 110 / 260, "owner1": 150 / 260},
        ),
        CommitAttribution(commit_id="chmod", metric="insertions_deletions", fractions={}),
    ]


class TestGetFormatter:
    def test_known_formatters(self):
        assert isinstance(get_formatter("rich"), RichFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)
        assert isinstance(get_formatter("csv"), CsvFormatter)

    def test_precision_passed(self):
        assert get_formatter("json", precision=2).precision == 2

    def test_unknown_formatter(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestJsonFormatter:
    def test_rounded_to_precision(self, results):
        data = json.loads(JsonFormatter().format(results))
        assert data[0] == {
            "commit": "commit1",
            "metric": "insertions_deletions",
            "fractions": {"owner1": 0.5769, "owner2": 0.4231},
        }
        assert data[1]["fractions"] == {}

    def test_exact_values_as_strings(self):
        result = CommitAttribution(
            commit_id="c", metric="insertions", fractions={"a": Fraction(4, 7), "b": Fraction(3, 7)}
        )
        data = json.loads(JsonFormatter().format([result]))
        assert data[0]["fractions"] == {"a": "4/7", "b": "3/7"}

    def test_sole_exact_owner(self):
        result = CommitAttribution(commit_id="c", metric="insertions", fractions={"a": Fraction(1)})
        data = json.loads(JsonFormatter().format([result]))
        assert data[0]["fractions"] == {"a": "1"}


class TestCsvFormatter:
    def test_rows_per_owner(self, results):
        rows = list(csv.reader(io.StringIO(CsvFormatter().format(results))))
        assert rows[0] == ["commit", "metric", "owner", "fraction"]
        assert rows[1] == ["commit1", "insertions_deletions", "owner1", "0.5769"]
        assert rows[2] == ["commit1", "insertions_deletions", "owner2", "0.4231"]
        # Empty commits produce no rows
        assert len(rows) == 3

    def test_precision(self, results):
        rows = list(csv.reader(io.StringIO(CsvFormatter(precision=6).format(results))))
        assert rows[1][3] == "0.576923"


class TestRichFormatter:
    def test_format_contains_values(self, results):
        text = RichFormatter().format(results)
        assert "owner1" in text
        assert "0.5769" in text
        assert "no changes" in text

    def test_whole_exact_fraction_printed_as_integer(self):
        formatter = RichFormatter()
        assert formatter.format_fraction(Fraction(1)) == "1"
        assert formatter.format_fraction(Fraction(0)) == "0"
        # Floats keep the configured precision
        assert formatter.format_fraction(1.0) == "1.0000"

    def test_owner_markup_printed_literally(self):
        result = CommitAttribution(
            commit_id="[red]c", metric="insertions", fractions={"[bold]team": 1.0}
        )
        text = RichFormatter().format([result])
        assert "[bold]team" in text
        assert "[red]c" in text
