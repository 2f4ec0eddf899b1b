"""
Logging utilities for pingwatch.

Provides unified structured logging:
- pretty console output via Rich, on stderr so the live display stays clean
- structured (JSON) file output when PINGWATCH_LOG_FILE is set
"""

import logging
import os
import json
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FILE_ENV = "PINGWATCH_LOG_FILE"


class JSONFormatter(logging.Formatter):
    """
    Formatter that serializes log records to JSON.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level":     record.levelname,
            "logger":    record.name,
            "message":   record.getMessage(),
        }
        return json.dumps(log_record)


def get_logger(name: str, level: int | str = logging.INFO) -> logging.Logger:
    """
    Return a configured logger for the given name.

    Attaches:
    - a RichHandler writing to stderr
    - when PINGWATCH_LOG_FILE is set, a FileHandler writing JSON lines there

    Parameters
    ----------
    name
        Logger name (typically __name__).
    level
        Log level (int or string), defaults to INFO.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        console_handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

        log_file = os.environ.get(LOG_FILE_ENV)
        if log_file:
            file_handler = logging.FileHandler(Path(log_file), mode="a", encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            logger.addHandler(file_handler)

    return logger


def set_level(level: int | str) -> None:
    """
    Change the level of every pingwatch logger created so far.
    """
    for name, logger in logging.root.manager.loggerDict.items():
        if not name.startswith("pingwatch") or not isinstance(logger, logging.Logger):
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
