# cmdrunner/utils/logging.py
"""Structured logging with JSON format and invocation ID support.

Provides:
- JSON-formatted log output for structured logging
- Invocation correlation ID via ContextVar, one per command run
- Centralized logger configuration (stderr or a log file)
"""

import json
import logging
import uuid
from contextvars import ContextVar
from typing import Any

# Correlation ID shared by every log line of a single command invocation
invocation_id_var: ContextVar[str] = ContextVar("invocation_id", default="")

_handler: logging.Handler | None = None


def set_invocation_id(invocation_id: str | None = None) -> str:
    """Set the invocation correlation ID for the current context.

    Args:
        invocation_id: Identifier to use. A short random one is generated
            when omitted.

    Returns:
        The identifier that was set.
    """
    if invocation_id is None:
        invocation_id = uuid.uuid4().hex[:12]
    invocation_id_var.set(invocation_id)
    return invocation_id


def get_invocation_id() -> str:
    """Get the invocation correlation ID for the current context.

    Returns:
        Current invocation ID, or empty string if not set.
    """
    return invocation_id_var.get()


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Outputs log records as JSON with timestamp, level, logger name,
    message, and optional invocation_id for correlation.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: Log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        invocation_id = get_invocation_id()
        if invocation_id:
            log_data["invocation_id"] = invocation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_structured_logging(
    level: int | str = logging.WARNING, log_file: str = ""
) -> logging.Handler:
    """Configure structured JSON logging for the application.

    Sets up a handler with StructuredFormatter and applies it to the
    root logger. The interactive menu shares the terminal with stderr,
    so the default level is WARNING and a log file can be used instead.
    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Logging level name or number (default: logging.WARNING).
        log_file: Path of a file to append to. Empty logs to stderr.

    Returns:
        The installed handler.
    """
    global _handler
    if _handler is not None:
        logging.root.removeHandler(_handler)
        _handler.close()

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(level.upper() if isinstance(level, str) else level)
    _handler = handler
    return handler
