"""
Unit tests for the logging setup.
"""

import logging

import pytest

from cells_client.api_client import convert_to_type
from cells_client.core.config import LoggingConfig
from cells_client.core.logging import CONVERSION_LOGGER, configure_logging, get_logger


@pytest.fixture
def pristine_root_logger():
    """Give the test unconfigured root and conversion loggers and restore them afterwards."""
    root = logging.getLogger()
    conversion = logging.getLogger(CONVERSION_LOGGER)
    saved = {
        logger: (list(logger.handlers), logger.level)
        for logger in (root, conversion)
    }
    was_configured = getattr(root, "_cells_logging_configured", False)
    conversion_configured = getattr(conversion, "_cells_conversion_logging_configured", False)
    root._cells_logging_configured = False
    conversion._cells_conversion_logging_configured = False
    yield root
    for logger, (handlers, level) in saved.items():
        for handler in list(logger.handlers):
            if handler not in handlers:
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(level)
    root._cells_logging_configured = was_configured
    conversion._cells_conversion_logging_configured = conversion_configured


def _flush(*loggers):
    for logger in loggers:
        for handler in logger.handlers:
            handler.flush()


class TestConfigureLogging:
    """Test central logging configuration."""

    def test_creates_log_files(self, tmp_path, pristine_root_logger):
        """Test the file handlers and level."""
        log_dir = tmp_path / "logs"
        configure_logging(LoggingConfig(log_dir=str(log_dir), log_level="debug"))

        get_logger("cells.test").warning("conversion warning")
        _flush(pristine_root_logger)

        assert pristine_root_logger.level == logging.DEBUG
        assert (log_dir / "error.log").exists()
        assert "conversion warning" in (log_dir / "warning.log").read_text()
        assert "conversion warning" in (log_dir / "debug.log").read_text()
        assert "conversion warning" not in (log_dir / "error.log").read_text()

    def test_idempotent(self, tmp_path, pristine_root_logger):
        """Test that a second call adds no handlers."""
        config = LoggingConfig(log_dir=str(tmp_path))
        configure_logging(config)
        count = len(pristine_root_logger.handlers)
        conversion_count = len(logging.getLogger(CONVERSION_LOGGER).handlers)
        configure_logging(config)
        assert len(pristine_root_logger.handlers) == count
        assert len(logging.getLogger(CONVERSION_LOGGER).handlers) == conversion_count


class TestConversionLog:
    """Test the dedicated log of the conversion utility."""

    def test_coercion_fallback_logged_at_info_level(self, tmp_path, pristine_root_logger):
        """Test that DEBUG fallbacks reach conversion.log while the root stays at INFO."""
        configure_logging(LoggingConfig(log_dir=str(tmp_path), log_level="INFO"))

        assert convert_to_type("abc", "Integer") == "abc"
        conversion = logging.getLogger(CONVERSION_LOGGER)
        _flush(pristine_root_logger, conversion)

        assert pristine_root_logger.level == logging.INFO
        assert conversion.propagate
        assert "abc" in (tmp_path / "conversion.log").read_text()
        assert "abc" not in (tmp_path / "warning.log").read_text()

    def test_other_loggers_not_in_conversion_log(self, tmp_path, pristine_root_logger):
        """Test that only the conversion utility writes conversion.log."""
        configure_logging(LoggingConfig(log_dir=str(tmp_path)))

        get_logger("cells.cli").warning("cli only")
        _flush(pristine_root_logger, logging.getLogger(CONVERSION_LOGGER))

        assert "cli only" in (tmp_path / "warning.log").read_text()
        assert "cli only" not in (tmp_path / "conversion.log").read_text()
