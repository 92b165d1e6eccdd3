"""
Logging configuration.

Every module gets its logger through ``setup_logger(__name__)`` so the
Streamlit console shows one consistent format:

    [TIMESTAMP] [LEVEL] [MODULE:FUNCTION:LINE] MESSAGE
"""

import logging
import sys
from datetime import datetime
from typing import Optional

from zurich_perspectives.config import LOG_LEVEL


class StructuredFormatter(logging.Formatter):
    """Single-line formatter with source location."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        location = f"{record.module}:{record.funcName}:{record.lineno}"

        message = f"[{timestamp}] [{record.levelname:8s}] [{location}] {record.getMessage()}"

        if record.exc_info:
            message += f"\n{self.formatException(record.exc_info)}"

        return message


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger writing structured lines to stdout.

    Args:
        name: Logger name (usually __name__)
        level: Log level name. Defaults to the LOG_LEVEL environment variable or INFO

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Streamlit re-executes page scripts on every interaction
    if logger.handlers:
        return logger

    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(StructuredFormatter())
    logger.addHandler(handler)

    logger.propagate = False

    return logger
