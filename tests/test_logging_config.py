"""Tests for logging configuration."""

import json
import logging

from enplace_shopper.logging_config import (
    JsonFormatter,
    ReadableFormatter,
    configure_logging,
    get_logger,
)


def make_record(message: str = "hello", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="enplace_shopper.test",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestFormatters:
    """Tests for the log formatters."""

    def test_json_formatter(self):
        data = json.loads(JsonFormatter().format(make_record("Loaded 2 recipes")))

        assert data["level"] == "INFO"
        assert data["logger"] == "enplace_shopper.test"
        assert data["message"] == "Loaded 2 recipes"
        assert data["location"]["line"] == 10
        assert "timestamp" in data

    def test_readable_formatter(self):
        line = ReadableFormatter().format(make_record("Loaded 2 recipes", logging.WARNING))

        assert "| WARNING  |" in line
        assert line.endswith("| enplace_shopper.test | Loaded 2 recipes")


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_sets_level(self):
        configure_logging("DEBUG")
        assert logging.getLogger("enplace_shopper").level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self):
        configure_logging("CHATTY")
        assert logging.getLogger("enplace_shopper").level == logging.WARNING

    def test_reconfigure_replaces_handlers(self):
        configure_logging("INFO")
        configure_logging("INFO")
        assert len(logging.getLogger("enplace_shopper").handlers) == 1

    def test_json_format(self):
        configure_logging("INFO", json_format=True)
        handler = logging.getLogger("enplace_shopper").handlers[0]
        assert isinstance(handler.formatter, JsonFormatter)

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "enplace.log"
        configure_logging("INFO", log_file=str(log_file))

        get_logger("enplace_shopper.checklist").info("Saved checklist")
        for handler in logging.getLogger("enplace_shopper").handlers:
            handler.flush()

        assert "Saved checklist" in log_file.read_text(encoding="utf-8")


class TestGetLogger:
    """Tests for get_logger function."""

    def test_module_logger(self):
        logger = get_logger("enplace_shopper.export")

        assert logger.name == "enplace_shopper.export"
        assert logger is logging.getLogger("enplace_shopper.export")
