"""Logging setup for the API, the CLI and the Streamlit page."""

import json
import logging
import sys
from typing import Any

ROOT_LOGGER_NAME = "namespace_search"

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class JSONExceptionFormatter(logging.Formatter):
    """One JSON object per record, with the exception type and traceback when present."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.filename}:{record.lineno} ({record.funcName})",
        }

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


def setup_logging(level: str = "INFO", json_format: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling it again replaces the handler, so the CLI callback and the API
    module can both configure logging without duplicating output. Stderr
    keeps ``search --json`` output on stdout parseable.

    Args:
        level: Level name such as ``DEBUG`` or ``WARNING``.
        json_format: Emit JSON lines instead of the text format.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        JSONExceptionFormatter()
        if json_format
        else logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)
    return logger
