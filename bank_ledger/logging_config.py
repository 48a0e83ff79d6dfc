"""
Logging Configuration

JSON (or plain text) output for the bank_ledger loggers, plus a helper
that attaches the ledger's action fields to a record.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

ROOT_LOGGER = "bank_ledger"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Record attributes set by log_action
ACTION_FIELDS = ("action", "resource", "details")


class JSONFormatter(logging.Formatter):
    """One JSON object per record; absent action fields are left out"""

    def format(self, record):
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in ACTION_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(
    level: str = "INFO",
    logger_name: str = ROOT_LOGGER,
    log_format: str = "json",
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route a logger to stderr or a file

    Calling it again replaces the previous handler, so it is safe to call
    once per process start and again after a config reload.
    """
    logger = logging.getLogger(logger_name)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler()
    if log_format == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(JSONFormatter())

    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    return logging.getLogger(name)


def log_action(logger: logging.Logger, level: str, message: str,
               action: Optional[str] = None, resource: Optional[str] = None,
               details: Optional[dict] = None):
    """
    Log a ledger action

    Args:
        logger: Logger instance
        level: Level name (info, warning, ...)
        message: Log message
        action: Ledger operation, e.g. "transfer"
        resource: Account or customer id the action touched
        details: Extra structured data (amounts, balances, error kind)
    """
    logger.log(
        logging.getLevelName(level.upper()),
        message,
        extra={"action": action, "resource": resource, "details": details}
    )
