r"""Structured logging utilities for machine-readable retry logs.

The retry loop logs every attempt through ``log_structured`` so the
attempt number, wait time, and error travel as separate fields. The
fields only show up as JSON when the caller installs
``StructuredFormatter``; aretry itself never configures handlers.

Example:
    Enable structured logging for aretry:

    ```python
    import logging
    from aretry.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    ```

    Tag the logs of one retry session:

    ```python
    from aretry.utils.structured_logging import clear_session_id, set_session_id

    set_session_id("sync-users")
    try:
        backoff.retry(sync_users)
    finally:
        clear_session_id()
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_session_id",
    "get_session_id",
    "log_structured",
    "set_session_id",
]

import contextvars
import json
import logging
import time
from typing import Any

_session_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "session_id", default=None
)

# Attributes every LogRecord carries, everything else came in through ``extra``
_RESERVED_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def get_session_id() -> str | None:
    """Get the retry session ID of the current context.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import get_session_id, set_session_id
        >>> set_session_id("session-1")
        >>> get_session_id()
        'session-1'

        ```
    """
    return _session_id.get()


def set_session_id(session_id: str) -> None:
    """Set the retry session ID for the current context.

    The ID is stored in a context variable, so concurrent threads and
    tasks each see their own value.

    Args:
        session_id: The ID attached to every structured log entry.
    """
    _session_id.set(session_id)


def clear_session_id() -> None:
    """Clear the retry session ID for the current context."""
    _session_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record becomes one JSON object with the fields ``timestamp``,
    ``level``, ``logger``, ``message``, ``module``, ``function``, and
    ``line``, plus ``session_id`` when set, ``exception`` when present,
    and every field passed through ``extra``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("Attempt failed", extra={"attempt": 2})
        >>> json.loads(stream.getvalue())["attempt"]
        2

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        session_id = get_session_id()
        if session_id is not None:
            log_data["session_id"] = session_id
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value
        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the timestamp as ISO 8601 UTC with millisecond
        precision."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log a message with structured fields.

    Args:
        logger: Logger to use.
        level: Log level (e.g., ``logging.INFO``).
        message: Log message.
        **extra: Additional fields. They are emitted as JSON keys by
            ``StructuredFormatter``.
    """
    logger.log(level, message, extra=extra)
