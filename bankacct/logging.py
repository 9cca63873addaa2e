"""Logging setup for bankacct.

curses owns the terminal for the whole session, so records are written
to a log file only.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    log_file: str | Path = "bankacct.log",
) -> logging.Handler:
    """Send every bankacct log record to ``log_file``.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    format_type : str
        "standard" for one line of text per record, "json" for one JSON
        object per record.
    log_file : str | Path
        File receiving log records; appended to.

    Returns
    -------
    logging.Handler
        The file handler installed on the root logger.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)

    # Opened first so a bad path leaves the current setup untouched
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Replace whatever was configured before
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.addHandler(file_handler)

    logging.getLogger("bankacct").setLevel(log_level)

    # Faker logs locale loading at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)
    return file_handler


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    A dict passed as ``extra={"extra": {...}}`` is merged into the object,
    which is how sinks attach a (masked) account to a record.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if isinstance(getattr(record, "extra", None), dict):
            log_data.update(record.extra)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Logger for a bankacct module (pass ``__name__``)."""
    return logging.getLogger(name)
