"""Centralized JSON formatter and logging setup for the ``fars`` CLI."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Union

_TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_RESERVED = {
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName", "asctime",
}


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs (e.g. ``year``, ``state``) directly into the
    payload.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in getattr(record, "__dict__", {}).items():
            if key not in _RESERVED:
                payload[key] = value

        # safe fallback for non-serializable objects
        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    json_format: bool = False,
) -> logging.Handler:
    """Attach a single stderr handler to the ``fars`` logger.

    Repeated calls replace the previously installed handler.

    Args:
        level: Logging level name or number.
        json_format: Use :class:`JsonFormatter` instead of plain text.

    Returns:
        The installed handler.
    """
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        if getattr(handler, "_fars_cli", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT)
    )
    handler._fars_cli = True
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return handler
