"""Structured logging configuration.

Records are written as one JSON object per line. Bloc handlers run in asyncio
tasks, so the task name (for example ``UserBloc-events``) is lifted into its
own field; values passed through ``extra=`` are rendered with `to_json` when
they offer one (states, entities, failures) and enums by value.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from enum import Enum
from typing import Any, TextIO

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_STANDARD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

_NOISY_LOGGERS = ("urllib3", "asyncio")


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    to_json = getattr(value, "to_json", None)
    if callable(to_json):
        return to_json()
    return value


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (record)
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        task = getattr(record, "taskName", None)
        if task:
            payload["task"] = task

        extra = {
            key: _jsonable(value)
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        }
        if extra:
            payload["extra"] = extra

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str, *, stream: TextIO | None = None) -> None:
    """Send all logging to ``stream`` (stderr by default) as JSON lines.

    stdout stays reserved for command output such as ``clean-bloc fetch-user``.
    Calling this again replaces the previous handler.
    """

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    root.setLevel(level.upper())

    # urllib3 logs every pooled connection and asyncio every slow callback.
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(root.level, logging.WARNING))
