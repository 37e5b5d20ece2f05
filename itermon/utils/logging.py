from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional


_RESERVED = {
    "args", "msg", "levelname", "levelno", "pathname", "filename", "module",
    "exc_info", "exc_text", "stack_info", "lineno", "funcName", "created",
    "msecs", "relativeCreated", "thread", "threadName", "processName", "process",
    "name", "taskName", "message", "asctime",
}

_debug_logger = logging.getLogger("itermon.debug")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        # Attach any extra contextual fields
        for key, value in record.__dict__.items():
            if key in _RESERVED:
                continue
            payload[key] = value
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    root.handlers.clear()
    root.addHandler(handler)


def debug_value(label: str, value: Any, logger: Optional[logging.Logger] = None) -> None:
    """Log ``label= value`` at DEBUG, e.g. ``debug_value("3+4", 3 + 4)`` -> ``3+4= 7``."""
    (logger or _debug_logger).debug("%s= %s", label, value)


def debug_message(msg: str, logger: Optional[logging.Logger] = None) -> None:
    (logger or _debug_logger).debug(msg)


def if_verbose(verbose: int, level: int, msg: str, logger: Optional[logging.Logger] = None) -> bool:
    """Log ``msg`` at INFO when ``verbose >= level``. Returns whether it was emitted."""
    if verbose < level:
        return False
    (logger or _debug_logger).info(msg, extra={"verbose": verbose})
    return True
