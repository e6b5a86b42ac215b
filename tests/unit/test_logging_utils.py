#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for logging configuration helpers."""

import logging

import pytest

from richtext2md.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, resolve_log_level


@pytest.fixture
def package_logger():
    """Restore the package logger after a test reconfigures it."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.mark.unit
class TestResolveLogLevel:
    """Tests for resolve_log_level."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            (logging.ERROR, logging.ERROR),
            ("nonsense", logging.INFO),
        ],
    )
    def test_levels(self, value, expected):
        assert resolve_log_level(value) == expected


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_handler(self, package_logger):
        logger = configure_logging("DEBUG")
        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        assert len(stream_handlers) == 1

    def test_repeated_calls_do_not_duplicate(self, package_logger):
        configure_logging("INFO")
        configure_logging("INFO")
        assert len(package_logger.handlers) == 1

    def test_null_handler_replaced(self, package_logger):
        configure_logging("INFO")
        assert not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)

    def test_log_file(self, package_logger, tmp_path):
        log_file = tmp_path / "render.log"
        configure_logging("WARNING", log_file=str(log_file), trace_mode=True)
        logging.getLogger("richtext2md.renderers.handlers").warning("Header level clamped")
        for handler in package_logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "Header level clamped" in content
        assert "[richtext2md.renderers.handlers]" in content

    def test_root_logger_untouched(self, package_logger):
        root_handlers = list(logging.getLogger().handlers)
        configure_logging("DEBUG")
        assert logging.getLogger().handlers == root_handlers
