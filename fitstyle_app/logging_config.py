"""JSON logging for FitStyle.

Every record is rendered as one JSON object carrying the correlation id and
the name of the engine operation that produced it. Free text a user typed
into a look (notes, titles in some events) never reaches the log verbatim.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import uuid
from typing import Any, Dict, Iterator, Optional

CORRELATION_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "correlation_id", default=None
)
CURRENT_OPERATION: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "current_operation", default=None
)

# Attributes every LogRecord has; anything else was passed through ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "taskName"}
_SENSITIVE_FIELDS = frozenset({"notes", "thumbnail", "image", "email"})
_EMAIL_PATTERN = re.compile(r"[\w.\-]+@[\w.\-]+")


class JsonFormatter(logging.Formatter):
    """Render records as JSON with correlation and operation metadata."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = super().format(record)
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
            "event": getattr(record, "event", message),
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
            "operation": getattr(record, "operation", None) or CURRENT_OPERATION.get(),
        }
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key not in payload
        }
        payload.update(redact_for_log(extras))
        return json.dumps(payload, default=str)


def configure_logging(level: int | str | None = None) -> None:
    """Install a single JSON handler on the root logger."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level or os.getenv("LOG_LEVEL", "INFO"))


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def redact_for_log(value: Any) -> Any:
    """Return ``value`` with look notes, images and e-mail addresses masked."""

    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        if value.lower().startswith(("http://", "https://")):
            return "[redacted-url]"
        return _EMAIL_PATTERN.sub("[redacted-email]", value)
    if isinstance(value, (bytes, bytearray)):
        return f"[{len(value)} bytes]"
    if isinstance(value, dict):
        return {
            key: "[redacted]" if key in _SENSITIVE_FIELDS else redact_for_log(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple, set, frozenset)):
        return [redact_for_log(item) for item in value]
    return str(value)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Adopt ``correlation_id``, else keep the active one, else mint a new one."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    active = CORRELATION_ID.get()
    if active:
        return active
    minted = uuid.uuid4().hex
    CORRELATION_ID.set(minted)
    return minted


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    token = CORRELATION_ID.set(correlation_id or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


@contextlib.contextmanager
def operation_context(name: str, correlation_id: str | None = None) -> Iterator[str]:
    """Tag everything logged inside the block with ``name`` and one correlation id.

    A top-level operation gets a fresh id unless one is passed in. Nested
    operations reuse the outer id so a facade call and the store writes it
    triggers can be joined in the log.
    """

    inherited = CORRELATION_ID.get() if CURRENT_OPERATION.get() is not None else None
    operation_token = CURRENT_OPERATION.set(name)
    try:
        with correlation_context(correlation_id or inherited) as scoped_id:
            yield scoped_id
    finally:
        CURRENT_OPERATION.reset(operation_token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with ``fields`` as redacted structured extras."""

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **redact_for_log(fields)},
    )


__all__ = [
    "CORRELATION_ID",
    "CURRENT_OPERATION",
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "operation_context",
    "redact_for_log",
]
