"""
Unit tests for logging module.
"""

import logging

import pytest

from template_outlet_mcp.core.logging import DocsLogFormatter, setup_logging


def make_record(msg: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestDocsLogFormatter:
    """Test custom formatter."""

    def test_format_basic_log(self):
        """Test basic log formatting."""
        result = DocsLogFormatter().format(make_record("Test message"))
        assert "ℹ️" in result
        assert "Test message" in result

    def test_format_with_extra_data(self):
        """Test formatting with extra data."""
        record = make_record("Built index")
        record.extra_data = {"sections": 12, "examples": 4}
        result = DocsLogFormatter().format(record)
        assert "sections=12" in result
        assert "examples=4" in result

    def test_error_emoji(self):
        result = DocsLogFormatter().format(make_record("Broken", logging.ERROR))
        assert "❌" in result


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    """Test logging setup."""

    def test_installs_formatter(self, restore_root_logger):
        setup_logging("DEBUG")
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, DocsLogFormatter)

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "docs.log"
        setup_logging("INFO", log_file)
        logging.getLogger("template_outlet_mcp.test").info("written to file")

        for handler in restore_root_logger.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text()
