"""
Module: test_logging.py

Author: Michael Economou
Date: 2026-10-02

Tests for the logging helpers, the logger cache and ConfigureLogger.
"""

import contextlib
import logging

from doppel.utils.logging.logger_factory import get_cached_logger
from doppel.utils.logging.logger_file_helper import add_file_handler
from doppel.utils.logging.logger_helper import DevOnlyFilter, safe_log, safe_text
from doppel.utils.logging.logger_setup import ConfigureLogger, get_user_config_dir


def make_record(name="doppel.test", **extra) -> logging.LogRecord:
    record = logging.LogRecord(name, logging.DEBUG, __file__, 1, "message", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@contextlib.contextmanager
def bare_root_logger():
    """Strip the root logger of its handlers for the duration of the block.

    pytest attaches its capture handler to the root logger for each test
    phase, so this runs inside the test body rather than in a fixture.
    """
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


class TestSafeText:
    """Test ASCII-safe text conversion."""

    def test_known_replacements(self):
        """Test arrows and dashes become ASCII."""
        assert safe_text("a → b … c") == "a -> b ... c"

    def test_unknown_characters_escaped(self):
        """Test that other characters are backslash-escaped."""
        assert safe_text("café") == "caf\\xe9"

    def test_ascii_unchanged(self):
        """Test plain text passes through."""
        assert safe_text("report-1.txt") == "report-1.txt"

    def test_safe_log_falls_back(self):
        """Test that a UnicodeEncodeError retries with safe text."""
        messages = []

        def flaky(message, *args):
            if not message.isascii():
                raise UnicodeEncodeError("ascii", message, 0, 1, "unsupported")
            messages.append(message % args)

        safe_log(flaky, "file → %s", "x")

        assert messages == ["file -> x"]


class TestDevOnlyFilter:
    """Test the console filter."""

    def test_dev_only_hidden(self):
        """Test that dev-only records are dropped."""
        dev_filter = DevOnlyFilter()

        assert dev_filter.filter(make_record(dev_only=True)) is False
        assert dev_filter.filter(make_record()) is True


class TestLoggerFactory:
    """Test logger caching."""

    def test_same_instance(self, fresh_logger_factory):
        """Test that a name maps to one cached logger."""
        first = get_cached_logger("doppel.test.cache")
        second = get_cached_logger("doppel.test.cache")

        assert first is second
        assert list(fresh_logger_factory._loggers) == ["doppel.test.cache"]

    def test_name_defaults_to_caller_module(self, fresh_logger_factory):
        """Test that omitting the name uses the calling module."""
        logger = fresh_logger_factory.get_logger()

        assert logger.name == __name__

    def test_logger_propagates_to_root(self, fresh_logger_factory, caplog):
        """Test that cached loggers reach the root handlers."""
        logger = get_cached_logger("doppel.test.propagate")

        with caplog.at_level(logging.INFO):
            logger.info("[Test] grouped %d files", 3)

        assert "[Test] grouped 3 files" in caplog.text


class TestFileHandler:
    """Test rotating file handlers."""

    def test_writes_to_file(self, tmp_path):
        """Test that records reach the log file and the directory is created."""
        log_path = tmp_path / "logs" / "test.log"
        logger = logging.getLogger("doppel.test.file_handler")
        logger.propagate = False
        logger.setLevel(logging.DEBUG)

        handler = add_file_handler(logger, str(log_path), level=logging.INFO)
        try:
            logger.debug("hidden")
            logger.info("written %s", "here")
        finally:
            logger.removeHandler(handler)
            handler.close()
            logger.propagate = True

        content = log_path.read_text(encoding="utf-8")
        assert "[INFO] doppel.test.file_handler: written here" in content
        assert "hidden" not in content


class TestConfigureLogger:
    """Test root logger setup."""

    def test_user_config_dir(self, isolated_config_dir):
        """Test that the config directory follows the environment."""
        assert get_user_config_dir("doppel") == str(isolated_config_dir / "doppel")

    def test_console_only(self):
        """Test that without a log directory only the console handler is added."""
        with bare_root_logger() as root:
            configured = ConfigureLogger(log_dir=None)
            handlers = root.handlers[:]

        assert configured.log_file_path is None
        assert len(handlers) == 1
        assert handlers[0].level == logging.WARNING

    def test_with_log_file(self, tmp_path):
        """Test that a session log file is created in the log directory."""
        with bare_root_logger() as root:
            configured = ConfigureLogger(
                log_dir=str(tmp_path / "logs"), console_level=logging.DEBUG
            )
            logging.getLogger("doppel.test.setup").info("session started")
            for handler in root.handlers:
                handler.flush()

        assert configured.log_file_path is not None
        assert configured.log_file_path.startswith(str(tmp_path / "logs"))
        with open(configured.log_file_path, encoding="utf-8") as log_file:
            assert "session started" in log_file.read()

    def test_existing_handlers_kept(self):
        """Test that a configured root logger is left alone."""
        marker = logging.NullHandler()
        with bare_root_logger() as root:
            root.addHandler(marker)
            ConfigureLogger(log_dir=None)
            handlers = root.handlers[:]

        assert handlers == [marker]
