"""
Test suite for logging configuration

Tests structured JSON output and the action logging helper.
"""

import json
import logging

from bank_ledger.logging_config import JSONFormatter, get_logger, log_action, setup_logging


class ListHandler(logging.Handler):
    """Collects formatted records"""

    def __init__(self):
        super().__init__()
        self.lines = []

    def emit(self, record):
        self.lines.append(self.format(record))


class TestJSONFormatter:
    """Test JSON formatting"""

    def test_format_includes_structured_fields(self):
        """Test that action fields land in the JSON document"""
        logger = logging.getLogger("test_bank_ledger.formatter")
        logger.propagate = False
        logger.setLevel(logging.INFO)
        handler = ListHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)

        try:
            log_action(logger, "info", "Deposit posted", action="deposit",
                       resource="SAV-1001", details={"amount": "10"})
        finally:
            logger.removeHandler(handler)

        entry = json.loads(handler.lines[0])
        assert entry["level"] == "INFO"
        assert entry["message"] == "Deposit posted"
        assert entry["action"] == "deposit"
        assert entry["resource"] == "SAV-1001"
        assert entry["details"] == {"amount": "10"}
        assert "timestamp" in entry

    def test_none_fields_omitted(self):
        """Test that absent fields are dropped"""
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "plain", (), None)
        entry = json.loads(JSONFormatter().format(record))

        assert entry["message"] == "plain"
        assert "action" not in entry
        assert "details" not in entry

    def test_disabled_level_is_skipped(self):
        """Test that log_action honours the logger level"""
        logger = logging.getLogger("test_bank_ledger.quiet")
        logger.propagate = False
        logger.setLevel(logging.WARNING)
        handler = ListHandler()
        logger.addHandler(handler)

        try:
            log_action(logger, "info", "ignored")
            log_action(logger, "warning", "kept")
        finally:
            logger.removeHandler(handler)

        assert handler.lines == ["kept"]


class TestSetupLogging:
    """Test logger setup"""

    def test_setup_replaces_handlers(self):
        """Test that repeated setup does not duplicate handlers"""
        name = "test_bank_ledger.setup"
        setup_logging("DEBUG", logger_name=name)
        logger = setup_logging("INFO", logger_name=name)

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.level == logging.INFO
        assert logger.propagate is False
        assert get_logger(name) is logger

    def test_text_format_and_file(self, tmp_path):
        """Test plain text output to a file"""
        name = "test_bank_ledger.file"
        log_file = tmp_path / "ledger.log"
        logger = setup_logging("INFO", logger_name=name, log_format="text", log_file=str(log_file))

        logger.info("Account opened")
        for handler in logger.handlers:
            handler.flush()

        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert "INFO test_bank_ledger.file: Account opened" in log_file.read_text()

        setup_logging("INFO", logger_name=name)  # Closes the file handler
