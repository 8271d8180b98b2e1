"""
Logging configuration for Ownership Insight.

Library logging goes through a rich handler on stderr so that stdout stays
reserved for computed output (JSON, CSV, tables). Handlers are attached to
the ``ownership_insight`` logger rather than the root logger, so repeated
setup (one per CLI invocation) replaces them instead of stacking.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "ownership_insight"


def resolve_level(verbosity: str) -> int:
    """Map a config verbosity ("quiet" | "normal" | "verbose") to a level."""
    if verbosity == "quiet":
        return logging.ERROR
    if verbosity == "verbose":
        return logging.DEBUG
    return logging.WARNING


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the ownership_insight logger.

    Args:
        verbosity: "quiet" logs errors only, "verbose" adds debug output
        log_file: Optional file path; receives every record at the same level

    Returns:
        Configured logger instance for ownership_insight
    """
    level = resolve_level(verbosity)
    verbose = level == logging.DEBUG

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    )

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        logger.addHandler(file_handler)

    logger.setLevel(level)
    # Records stop here; the root logger never sees them.
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'ownership_insight.metrics.adjusted')
              If None, returns the root ownership_insight logger
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
