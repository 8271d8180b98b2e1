"""Input-related exceptions: invalid change records and malformed files."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .base import OwnershipInsightError


class InputError(OwnershipInsightError):
    """Base class for errors in caller-supplied commit data."""
    pass


class InvalidInputError(InputError):
    """Raised when a file change carries a value the metrics cannot accept.

    Covers negative line counts and missing or empty owner identifiers.
    """

    def __init__(self, field: str, value: Any, reason: str, commit_id: Optional[str] = None):
        details: Dict[str, str] = {"field": field, "value": repr(value), "reason": reason}
        if commit_id is not None:
            details["commit"] = commit_id

        super().__init__(f"Invalid {field}: {value!r}", details=details)
        self.field = field
        self.value = value
        self.reason = reason
        self.commit_id = commit_id


class MalformedRecordError(InputError):
    """Raised when a commit or membership file cannot be parsed."""

    def __init__(self, source: Union[str, Path], reason: str, line: Optional[int] = None):
        details = {"source": str(source), "reason": reason}
        if line is not None:
            details["line"] = str(line)

        super().__init__(f"Malformed record in {source}", details=details)
        self.source = source
        self.reason = reason
        self.line = line
