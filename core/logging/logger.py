from __future__ import annotations

import functools
import logging
import time
from enum import IntEnum
from typing import Any, Awaitable, Callable, Optional, Protocol, TypeVar, Union


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


def register_levels() -> None:
    if logging.getLevelName(LogLevel.TRACE) == "Level 5":
        logging.addLevelName(LogLevel.TRACE, "TRACE")
    if logging.getLevelName(LogLevel.SUCCESS) == "Level 25":
        logging.addLevelName(LogLevel.SUCCESS, "SUCCESS")


def to_level(value: int | str) -> int:
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name in LogLevel.__members__:
        return int(LogLevel[name])
    return logging.INFO


class SupportsStr(Protocol):
    def __str__(self) -> str: ...


Message = Union[SupportsStr, Callable[[], SupportsStr]]


class StructuredLogger:
    """Thin wrapper over ``logging.Logger`` with lazy messages and a fixed ``service`` tag."""

    def __init__(self, logger: logging.Logger, service: Optional[str] = None) -> None:
        self._logger = logger
        self._service = service

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, msg: Message, *args: Any, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        message = msg() if callable(msg) else msg
        extra = dict(kwargs.pop("extra", None) or {})
        if self._service and "service" not in extra:
            extra["service"] = self._service
        # stacklevel points the record at the caller, not at this wrapper
        self._logger.log(level, str(message), *args, extra=extra, stacklevel=3, **kwargs)

    def trace(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(int(LogLevel.TRACE), msg, *args, **kwargs)

    def debug(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)

    def success(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(int(LogLevel.SUCCESS), msg, *args, **kwargs)

    def warning(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: Message, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, *args, **kwargs)


def get_logger(name: str, *, service: Optional[str] = None) -> StructuredLogger:
    return StructuredLogger(logging.getLogger(name), service=service)


T = TypeVar("T")


def timed(label: str) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Emit a TRACE record with ``execution_time_ms`` around an upstream coroutine."""

    def decorator(fn: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        logger = get_logger(fn.__module__, service="riot-api")

        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            start = time.perf_counter()
            try:
                return await fn(*args, **kwargs)
            finally:
                dur_ms = round((time.perf_counter() - start) * 1000.0, 2)
                logger.trace(lambda: f"call {label}", extra={"execution_time_ms": dur_ms})

        return wrapper

    return decorator
