"""Tests for loguru sink setup."""

import sys

import pytest
from loguru import logger

from mucmarks.config.schema import LoggingConfig
from mucmarks.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_logger():
    """Put loguru's default sink back after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestConfigureLogging:
    """Test configure_logging."""

    def test_uses_configured_file(self, tmp_path):
        """The log file comes from the logging section."""
        log_file = tmp_path / "logs" / "bookmarks.log"

        assert configure_logging(LoggingConfig(file=str(log_file))) == log_file
        assert log_file.parent.is_dir()

    def test_file_level_filters_file_sink(self, tmp_path):
        """Only messages at or above file_level reach the file."""
        log_file = tmp_path / "bookmarks.log"
        configure_logging(LoggingConfig(file=str(log_file), file_level="INFO"))

        logger.debug("hidden detail")
        logger.info("room added")
        logger.remove()

        text = log_file.read_text()
        assert "room added" in text
        assert "hidden detail" not in text

    def test_verbose_sends_debug_to_console(self, tmp_path, capsys):
        """verbose overrides the configured console level."""
        configure_logging(LoggingConfig(file=str(tmp_path / "bookmarks.log")), verbose=True)

        logger.debug("fetch sent")

        assert "fetch sent" in capsys.readouterr().err

    def test_console_level(self, tmp_path, capsys):
        """Below the console level nothing is printed."""
        configure_logging(LoggingConfig(file=str(tmp_path / "bookmarks.log"), level="WARNING"))

        logger.info("quiet")
        logger.warning("loud")

        err = capsys.readouterr().err
        assert "loud" in err
        assert "quiet" not in err
