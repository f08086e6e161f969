"""Logging configuration for docpipe."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, TextIO

__all__ = ["JsonFormatter", "setup_logging"]

_ROOT_LOGGER_NAME = "docpipe"
_HANDLER_MARKER = "_docpipe_handler"

# Attributes every LogRecord carries; anything else was passed via ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON documents."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, sort_keys=True)


def _resolve_level(raw: Any) -> int:
    if isinstance(raw, int):
        return raw
    level = logging.getLevelName(str(raw).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level '{raw}'")
    return level


def _build_handler(output: str) -> logging.Handler:
    streams: Mapping[str, TextIO] = {"stderr": sys.stderr, "stdout": sys.stdout}
    stream = streams.get(output)
    if stream is not None:
        return logging.StreamHandler(stream)
    return logging.FileHandler(output, encoding="utf-8")


def setup_logging(config: Mapping[str, Any] | None = None) -> logging.Logger:
    """Configure the ``docpipe`` logger from the ``logging`` table of ``config``.

    Recognised keys are ``level`` (name or number, default ``info``),
    ``output`` (``stderr``, ``stdout`` or a file path, default ``stderr``)
    and ``format`` (``json`` or ``text``, default ``text``).  Handlers
    installed by a previous call are replaced only once the new handler
    has been built.
    """

    settings = dict((config or {}).get("logging", {}))
    level = _resolve_level(settings.get("level", "info"))
    output = str(settings.get("output", "stderr"))
    fmt = str(settings.get("format", "text")).lower()
    if fmt not in {"json", "text"}:
        raise ValueError(f"Unknown logging format '{fmt}'")

    handler = _build_handler(output)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    setattr(handler, _HANDLER_MARKER, True)

    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    for previous in list(logger.handlers):
        if getattr(previous, _HANDLER_MARKER, False):
            logger.removeHandler(previous)
            previous.close()

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
