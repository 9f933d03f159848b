"""
Structured logging configuration for ministore.

Provides JSON-formatted logs with trace_id support, so that the debug
records emitted around dispatch can be correlated per store or request.

Environment Variables:
    MINISTORE_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) - default: INFO
    MINISTORE_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from ministore.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="todo-store")
    logger.info("Store ready")
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    return logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(stream=None) -> logging.Handler:
    """
    Configure the ministore logger.

    Reads MINISTORE_LOG_LEVEL and MINISTORE_LOG_FORMAT at call time. Logs go
    to stderr unless stream is given, keeping stdout for command output.
    Calling it again replaces the handler installed by the previous call.

    Returns:
        The installed handler
    """
    level = LEVELS.get(os.getenv("MINISTORE_LOG_LEVEL", "INFO").upper(), logging.INFO)
    log_format = os.getenv("MINISTORE_LOG_FORMAT", "json").lower()

    logger = logging.getLogger("ministore")
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())
    handler.setFormatter(build_formatter(log_format))
    logger.addHandler(handler)
    return handler


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Example:
        logger = get_logger(__name__, trace_id="cart-store")
        logger.info("Dispatching checkout")
        # Output (JSON): {"timestamp": "...", "level": "INFO", "message": "Dispatching checkout", "trace_id": "cart-store"}
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})

