"""Shared test fixtures for Ownership Insight tests."""

import pytest

from ownership_insight.models import Commit, FileChange


def make_commit(commit_id, changes, author_name="", author_email=""):
    """Create a commit from (path, owner, insertions, deletions) tuples."""
    return Commit(
        id=commit_id,
        changes=[
            FileChange(owner=owner, insertions=ins, deletions=dels, path=path)
            for path, owner, ins, dels in changes
        ],
        author_name=author_name,
        author_email=author_email,
    )


@pytest.fixture
def commit_one():
    """Worked example: owner1 +100/-50, owner2 +50/-25 and +25/-10."""
    return make_commit(
        "commit1",
        [
            ("file1", "owner1", 100, 50),
            ("file2", "owner2", 50, 25),
            ("file3", "owner2", 25, 10),
        ],
    )


@pytest.fixture
def commit_two():
    """Worked example: owner1 +5/-10, owner2 +25/-10 and +10/-5."""
    return make_commit(
        "commit2",
        [
            ("file1", "owner1", 5, 10),
            ("file2", "owner2", 25, 10),
            ("file3", "owner2", 10, 5),
        ],
    )


@pytest.fixture
def deletion_only_commit():
    return make_commit(
        "cleanup",
        [
            ("old.py", "owner1", 0, 40),
            ("older.py", "owner2", 0, 10),
        ],
    )


@pytest.fixture
def metadata_only_commit():
    """Mode change: files touched, no lines changed."""
    return make_commit(
        "chmod",
        [
            ("run.sh", "owner1", 0, 0),
            ("build.sh", "owner2", 0, 0),
        ],
    )


@pytest.fixture
def commits_json():
    """Worked examples as the JSON records the loader accepts."""
    return [
        {
            "id": "commit1",
            "author_name": "Alice",
            "author_email": "alice@example.com",
            "timestamp": 1700000000,
            "changes": [
                {"path": "file1", "owner": "owner1", "insertions": 100, "deletions": 50},
                {"path": "file2", "owner": "owner2", "insertions": 50, "deletions": 25},
                {"path": "file3", "owner": "owner2", "insertions": 25, "deletions": 10},
            ],
        },
        {
            "id": "commit2",
            "author_name": "Bob",
            "author_email": "bob@example.com",
            "timestamp": 1700003600,
            "changes": [
                {"path": "file1", "owner": "owner1", "insertions": 5, "deletions": 10},
                {"path": "file2", "owner": "owner2", "insertions": 25, "deletions": 10},
                {"path": "file3", "owner": "owner2", "insertions": 10, "deletions": 5},
            ],
        },
    ]
