"""Configuration loading and management for Ownership Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.ownership-insight.toml)
    3. Project config (./ownership-insight.toml)
    4. Explicit config file
    5. Environment variables (OWNERSHIP_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(metric="insertions", precision=6)
    >>> config.metric
    'insertions'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .metrics.adjusted import MetricVariant

Verbosity = Literal["quiet", "normal", "verbose"]
MetricName = Literal["insertions", "insertions_deletions"]

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for attribution runs.

    Attributes:
        metric: Which per-file weight to attribute ("insertions" is the
            historical v1 metric, "insertions_deletions" the current v2 one)
        precision: Decimal places used in textual output
        top_contributors: How many contributors to list per owner
        exact: Use rational arithmetic instead of floats
        verbosity: Logging verbosity level
        log_file: Also append log records to this file
    """

    metric: MetricName = "insertions_deletions"
    precision: int = 4
    top_contributors: int = 10
    exact: bool = False
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        valid_metrics = [m.value for m in MetricVariant]
        if self.metric not in valid_metrics:
            raise InvalidConfigError(
                "metric", self.metric, f"expected one of {', '.join(valid_metrics)}"
            )
        if self.precision < 0:
            raise InvalidConfigError("precision", self.precision, "must be non-negative")
        if self.top_contributors < 1:
            raise InvalidConfigError(
                "top_contributors", self.top_contributors, "must be at least 1"
            )
        if self.verbosity not in _VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(_VERBOSITY_LEVELS)}"
            )

    @property
    def metric_variant(self) -> MetricVariant:
        return MetricVariant(self.metric)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options fall through.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is missing, unreadable, or has
            unknown keys
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".ownership-insight.toml"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global config"))

    project_config = Path.cwd() / "ownership-insight.toml"
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "config file"))

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, label: str) -> dict:
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from OWNERSHIP_* environment variables.

    Supported environment variables:
        OWNERSHIP_METRIC: insertions/insertions_deletions
        OWNERSHIP_PRECISION: int
        OWNERSHIP_TOP_CONTRIBUTORS: int
        OWNERSHIP_EXACT: bool (true/false/1/0)
        OWNERSHIP_VERBOSITY: quiet/normal/verbose
        OWNERSHIP_LOG_FILE: path

    Returns:
        Dict of field_name -> parsed_value for any OWNERSHIP_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"OWNERSHIP_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    # Optional[X] is Union[X, None]; parse as X
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]

    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
