from __future__ import annotations

import json
import logging
import sys
import time
from typing import Any, Optional

from app.core.config import settings

APP_NAMESPACE = "ccip"


def _level_from_str(value: str) -> int:
    level = logging.getLevelName((value or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _canonical_name(name: str) -> str:
    """Map module logger names to the canonical 'ccip.*' namespace."""
    if name == APP_NAMESPACE or name.startswith(APP_NAMESPACE + "."):
        return name
    if name == "app":
        return APP_NAMESPACE
    if name.startswith("app."):
        return APP_NAMESPACE + "." + name[len("app."):]
    return f"{APP_NAMESPACE}.{name}"


LOG_FORMAT = "%(asctime)s.%(msecs)03d+0000 %(levelname)-8s %(name)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def init_logging() -> None:
    """
    Attach one stderr handler to the root logger and route uvicorn through
    it, so access lines and the JSON events of the app share one format.
    Calling it again does not add a second handler.
    """
    root = logging.getLogger()
    root.setLevel(_level_from_str(settings.LOG_LEVEL))
    if not any(getattr(h, "_ccip_handler", False) for h in root.handlers):
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler = logging.StreamHandler(stream=sys.stderr)
        handler._ccip_handler = True  # type: ignore[attr-defined]
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger(APP_NAMESPACE).setLevel(_level_from_str(settings.LOG_LEVEL_APP))

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.setLevel(_level_from_str(settings.LOG_LEVEL))
        lg.propagate = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger in the canonical 'ccip.*' namespace."""
    return logging.getLogger(_canonical_name(name or __name__))


class StructuredLogger:
    """
    Emits one JSON object per event on top of a standard logger.

    Serialization problems are reported through the logger itself and
    never reach the caller.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log(self, level: int, message: str, **fields: Any) -> None:
        if not self.logger.isEnabledFor(level):
            return
        try:
            payload = json.dumps({"message": message, **fields}, default=str)
        except (TypeError, ValueError) as exc:
            payload = json.dumps({"message": message, "logError": str(exc)})
        self.logger.log(level, payload)

    def debug(self, message: str, **fields: Any) -> None:
        self.log(logging.DEBUG, message, **fields)

    def info(self, message: str, **fields: Any) -> None:
        self.log(logging.INFO, message, **fields)

    def warning(self, message: str, **fields: Any) -> None:
        self.log(logging.WARNING, message, **fields)

    def error(self, message: str, **fields: Any) -> None:
        self.log(logging.ERROR, message, **fields)


def get_structured_logger(name: Optional[str] = None) -> StructuredLogger:
    return StructuredLogger(get_logger(name))
