"""Load already-parsed commit records from JSON.

Accepted shapes::

    [{"id": "abc", "changes": [{"owner": "team-a", "insertions": 3, "deletions": 1}]}]
    {"commits": [...]}

Only structure is checked here. Negative counts and blank owners are left
for the metrics to reject, so that every entry point reports them the same
way.
"""

import json
from pathlib import Path
from typing import Any, List, Union

from .exceptions import MalformedRecordError
from .logging_config import get_logger
from .models import Commit, FileChange

logger = get_logger(__name__)


def load_commits(path: Union[str, Path]) -> List[Commit]:
    """Read and parse a JSON commit file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedRecordError(path, f"invalid JSON: {e.msg}", line=e.lineno)
    except UnicodeDecodeError as e:
        raise MalformedRecordError(path, f"not UTF-8 text: {e.reason} at byte {e.start}")
    except OSError as e:
        raise MalformedRecordError(path, f"cannot read file: {e.strerror or e}")

    commits = parse_commits(data, source=str(path))
    logger.debug("Loaded %d commits from %s", len(commits), path)
    return commits


def parse_commits(data: Any, source: str = "<data>") -> List[Commit]:
    if isinstance(data, dict):
        if "commits" not in data:
            raise MalformedRecordError(source, "object has no 'commits' key")
        data = data["commits"]
    if not isinstance(data, list):
        raise MalformedRecordError(source, "expected a list of commits")

    return [_parse_commit(raw, source, index) for index, raw in enumerate(data)]


def _parse_commit(raw: Any, source: str, index: int) -> Commit:
    where = f"commit #{index}"
    if not isinstance(raw, dict):
        raise MalformedRecordError(source, f"{where} is not an object")

    for key in ("id", "changes"):
        if raw.get(key) is None:
            raise MalformedRecordError(source, f"{where} has no '{key}'")

    changes = raw["changes"]
    if not isinstance(changes, list):
        raise MalformedRecordError(source, f"{where} 'changes' is not a list")

    timestamp = raw.get("timestamp", 0)
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise MalformedRecordError(source, f"{where} 'timestamp' is not an integer")

    return Commit(
        id=str(raw["id"]),
        changes=[_parse_change(c, source, f"{where} change #{i}") for i, c in enumerate(changes)],
        author_name=str(raw.get("author_name", "")),
        author_email=str(raw.get("author_email", "")),
        timestamp=timestamp,
    )


def _parse_change(raw: Any, source: str, where: str) -> FileChange:
    if not isinstance(raw, dict):
        raise MalformedRecordError(source, f"{where} is not an object")

    for key in ("insertions", "deletions"):
        if key not in raw:
            raise MalformedRecordError(source, f"{where} has no '{key}'")
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise MalformedRecordError(source, f"{where} '{key}' is not an integer")

    return FileChange(
        owner=raw.get("owner"),
        insertions=raw["insertions"],
        deletions=raw["deletions"],
        path=str(raw.get("path", "")),
    )
