"""Structured JSON logger for listdelta.

Every log record is emitted as a single-line JSON object so that a pass
summary can be consumed by log aggregation pipelines without extra parsing.

Typical structured output::

    {"ts": "2026-10-18T12:00:00.123456+00:00", "level": "DEBUG",
     "logger": "listdelta.reconciler", "message": "reconcile complete",
     "old_size": 3, "new_size": 4, "force_full": false, "ops": 2}

Usage::

    from listdelta.observability import get_logger

    log = get_logger()
    log.info("snapshot reset", extra={"extra_fields": {"size": 0}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    The formatter produces a JSON object with the following guaranteed keys:

    * ``ts`` -- ISO-8601 UTC timestamp
    * ``level`` -- Python log level name (``DEBUG``, ``INFO``, ...)
    * ``logger`` -- Logger name
    * ``message`` -- Formatted log message

    Extra structured fields passed via ``extra={"extra_fields": {...}}`` are
    merged into the top-level object.  ``exc_info`` and ``stack_info`` are
    serialised when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(
            record, "extra_fields", None
        )
        if extra_fields is not None:
            log_entry.update(extra_fields)

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_entry, default=str)


# One handler per logger name so that ``get_logger`` is idempotent.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "listdelta",
    *,
    level: int | str = logging.WARNING,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name.  Defaults to ``"listdelta"``.
    level:
        Minimum log level, as an ``int`` or a case-insensitive string.
        Defaults to ``WARNING`` so that per-pass DEBUG summaries stay quiet
        unless the caller lowers the level.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        A logger with a :class:`StructuredFormatter` handler attached.
        Repeated calls with the same *name* return the same logger and do
        **not** add duplicate handlers.
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        resolved_level = (
            logging.getLevelName(level.upper())
            if isinstance(level, str)
            else level
        )
        logger.setLevel(resolved_level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

        logger.propagate = False

        _configured_loggers.add(name)

    return logger
