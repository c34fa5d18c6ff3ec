"""Structured JSON logging for detrand.

Every detrand module logs through a child of the ``detrand`` logger.
Records propagate to the host application's handlers; on its own the
package emits nothing. ``add_json_handler`` opts in to one JSON object
per line on stdout.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import IO, Any

ROOT_LOGGER = "detrand"
DEFAULT_LEVEL = "WARNING"

# Extra fields copied from ``extra=`` into the JSON payload.
CONTEXT_KEYS = ("generator", "seed", "sequence", "source")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in CONTEXT_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=True)


def _root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if root.handlers:
        return root

    root.setLevel(DEFAULT_LEVEL)
    root.addHandler(logging.NullHandler())
    return root


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Return a logger under the ``detrand`` hierarchy.

    Args:
        name: Logger name, prefixed with ``detrand.`` if it is not already.
        level: Optional threshold for this logger only. Default: inherit
            from ``detrand`` (``WARNING`` unless changed by ``set_level``).

    """
    _root()
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level.upper())
    return logger


def set_level(level: str) -> None:
    """Set the threshold for every detrand logger."""
    _root().setLevel(level.upper())


def add_json_handler(stream: IO[str] | None = None) -> logging.Handler:
    """Attach a JSON stream handler to the ``detrand`` logger.

    Idempotent: a second call returns the handler added by the first.
    """
    root = _root()
    for handler in root.handlers:
        if isinstance(handler.formatter, JsonFormatter):
            return handler

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    return handler
