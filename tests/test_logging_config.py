"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from ownership_insight.logging_config import get_logger, resolve_level, setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("ownership_insight")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestResolveLevel:
    def test_levels(self):
        assert resolve_level("quiet") == logging.ERROR
        assert resolve_level("normal") == logging.WARNING
        assert resolve_level("verbose") == logging.DEBUG


class TestSetupLogging:
    def test_repeated_setup_replaces_handlers(self):
        setup_logging("verbose")
        logger = setup_logging("quiet")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.level == logging.ERROR
        assert logger.propagate is False

    def test_log_file_receives_records(self, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging("verbose", log_file=str(log_file))
        get_logger("metrics.adjusted").debug("attributed %d commits", 3)
        text = log_file.read_text(encoding="utf-8")
        assert "ownership_insight.metrics.adjusted - DEBUG - attributed 3 commits" in text


class TestGetLogger:
    def test_namespaced(self):
        assert get_logger("loader").name == "ownership_insight.loader"
        assert get_logger("ownership_insight.cli").name == "ownership_insight.cli"
        assert get_logger().name == "ownership_insight"
