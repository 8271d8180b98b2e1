"""Exception hierarchy for Ownership Insight."""

from .base import OwnershipInsightError
from .config import ConfigurationError, InvalidConfigError
from .input import InputError, InvalidInputError, MalformedRecordError

__all__ = [
    "OwnershipInsightError",
    "InputError",
    "InvalidInputError",
    "MalformedRecordError",
    "ConfigurationError",
    "InvalidConfigError",
]
