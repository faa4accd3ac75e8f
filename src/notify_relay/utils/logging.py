"""Logging setup with job correlation IDs and secret redaction.

Every log line emitted while a job's action runs carries that job's id,
so a single notification can be followed through retries and handler
output. Handler credentials are redacted before any handler formats the
record.
"""

import contextvars
import logging
import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import Final, override

from notify_relay.utils.sanitization import sanitize_args, sanitize_value

# Job id of the action currently running in this context
# Inherited by asyncio tasks created within the same context
correlation_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "correlation_id",
    default=None,
)

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] - %(message)s"

# LogRecord attributes that are never user-supplied extra fields
_STANDARD_ATTRS: Final[frozenset[str]] = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
        "message",
        "asctime",
        "correlation_id",
    }
)


class CorrelationIDFilter(logging.Filter):
    """Add the current job id to every log record as ``correlation_id``."""

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        correlation_id = correlation_id_var.get()
        record.correlation_id = correlation_id if correlation_id is not None else "N/A"
        return True


class SecretRedactingFilter(logging.Filter):
    """Redact secrets from the message, its args and any extra fields.

    Examples:
        >>> logger.info("GET %s", "https://api.telegram.org/bot123:ABC/sendMessage")
        # Logged as: "GET https://api.telegram.org/bot<REDACTED>/sendMessage"

        >>> logger.error("Failed", extra={"api_key": "abc"})
        # extra sanitized to: {"api_key": "<REDACTED>"}
    """

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            sanitized_msg = sanitize_value(record.msg)
            if isinstance(sanitized_msg, str):
                record.msg = sanitized_msg

        if record.args and isinstance(record.args, tuple):
            record.args = sanitize_args(record.args)

        for attr_name in list(record.__dict__.keys()):
            if attr_name not in _STANDARD_ATTRS and not attr_name.startswith("_"):
                attr_value: object = getattr(record, attr_name)  # pyright: ignore[reportAny]
                setattr(record, attr_name, sanitize_value(attr_value, field_name=attr_name))

        return True


def configure_logging(
    *,
    log_level: str = "INFO",
    enable_console: bool = True,
    log_file: str | None = None,
) -> None:
    """Configure root logging with correlation IDs and secret redaction.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Log to stderr
        log_file: Optional file receiving the same records

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> with correlation_id_context("4f1c..."):
        ...     logging.getLogger(__name__).info("Dispatching")
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.handlers.clear()

    correlation_filter = CorrelationIDFilter()
    secret_filter = SecretRedactingFilter()
    formatter = logging.Formatter(DEFAULT_LOG_FORMAT)

    handlers: list[logging.Handler] = []
    if enable_console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(correlation_filter)
        handler.addFilter(secret_filter)
        root_logger.addHandler(handler)


def get_correlation_id() -> str | None:
    """Get the job id bound to the current context, if any."""
    return correlation_id_var.get()


@contextmanager
def correlation_id_context(correlation_id: str) -> Generator[None, None, None]:
    """Bind ``correlation_id`` to log records for the duration of the block."""
    token = correlation_id_var.set(correlation_id)
    try:
        yield
    finally:
        correlation_id_var.reset(token)
