"""
Tests for Logging Configuration

Tests for videobrain/core/logging_config.py
"""

import logging

from videobrain.core.logging_config import LogContext, LogLevel, get_logger, setup_logging


class TestLogging:
    """Tests for logger setup."""

    def test_loggers_are_namespaced(self):
        """Test module loggers live under the videobrain root."""
        assert get_logger("pipelines.creative").name == "videobrain.pipelines.creative"
        assert get_logger("videobrain.api").name == "videobrain.api"

    def test_logger_cached(self):
        assert get_logger("brains") is get_logger("brains")

    def test_setup_writes_log_file(self, temp_dir):
        """Test a log file handler is attached when requested."""
        log_file = temp_dir / "logs" / "videobrain.log"

        setup_logging(level=LogLevel.DEBUG, log_file=log_file, console_output=False)
        get_logger("test").info("hello from the test")
        for handler in logging.getLogger("videobrain").handlers:
            handler.flush()

        assert "hello from the test" in log_file.read_text(encoding="utf-8")

        for handler in logging.getLogger("videobrain").handlers:
            handler.close()
        logging.getLogger("videobrain").handlers.clear()

    def test_log_context_restores_level(self):
        """Test LogContext restores the previous level on exit."""
        logger = get_logger("context_test")
        logger.setLevel(logging.INFO)

        with LogContext(logger, LogLevel.DEBUG):
            assert logger.level == logging.DEBUG

        assert logger.level == logging.INFO
