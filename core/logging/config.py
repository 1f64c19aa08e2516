from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .context import get_context
from .formatter import ConsoleFormatter, JSONFormatter
from .logger import register_levels, to_level

_listener: QueueListener | None = None


class _ServiceFilter(logging.Filter):
    def __init__(self, service: str) -> None:
        super().__init__()
        self._service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "service", None) is None:
            record.service = self._service
        return True


class ContextFilter(logging.Filter):
    """Snapshot the request context onto the record before it changes threads."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "context", None) is None:
            record.context = get_context()
        return True


def bootstrap_logging(
    *,
    service: str = "match-history",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "match_history.jsonl",
    console: bool | None = None,
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Configure the root logger once per process.

    Console output is opt-in (``LOG_CONSOLE=true``) so CLI output stays
    clean; file output is JSON lines behind a queue listener.
    """
    global _listener
    shutdown_logging()
    register_levels()

    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)
    service_filter = _ServiceFilter(service)
    context_filter = ContextFilter()

    if console is None:
        console = os.getenv("LOG_CONSOLE", "false").strip().lower() == "true"
    if console:
        stream = logging.StreamHandler()
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        stream.setLevel(to_level(console_level) if console_level else lvl)
        stream.setFormatter(ConsoleFormatter())
        stream.addFilter(service_filter)
        stream.addFilter(context_filter)
        root.addHandler(stream)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        qh.addFilter(service_filter)
        qh.addFilter(context_filter)
        root.addHandler(qh)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    # httpx logs every request at INFO; keep it quiet unless we are tracing
    logging.getLogger("httpx").setLevel(max(lvl, logging.WARNING))


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
