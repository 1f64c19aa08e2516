from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
    }


def _record_context(record: logging.LogRecord) -> Dict[str, Any]:
    # set by ContextFilter on the emitting thread; the queue listener thread has no context of its own
    ctx = getattr(record, "context", None)
    return ctx if ctx is not None else get_context()


class ConsoleFormatter(logging.Formatter):
    """One coloured line per record: time | level | service | where | message | extras."""

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        md = _record_metadata(record)
        parts = [
            md["timestamp"],
            md["level"],
            md["service"] or "-",
            f"{md['logger']}:{md['function']}:{md['line_number']}",
            record.getMessage(),
        ]
        exec_ms = getattr(record, "execution_time_ms", None)
        if exec_ms is not None:
            parts.append(f"t={exec_ms}ms")
        ctx = _record_context(record)
        if ctx:
            parts.append(" ".join(f"{k}={v}" for k, v in ctx.items()))
        if record.exc_info:
            parts.append(self.formatException(record.exc_info))
        line = " | ".join(parts)
        if not self.use_color:
            return line
        return f"{_LEVEL_COLORS.get(md['level'], '')}{line}{_RESET}"


class JSONFormatter(logging.Formatter):
    """JSON-lines records for the rotating log file."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = _record_metadata(record)
        payload["message"] = record.getMessage()
        ctx = _record_context(record)
        if ctx:
            payload["context"] = ctx
        exec_ms = getattr(record, "execution_time_ms", None)
        if exec_ms is not None:
            payload["execution_time_ms"] = exec_ms
        status = getattr(record, "status_code", None)
        if status is not None:
            payload["status_code"] = status
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False, separators=(",", ":"))
