"""Structured logging: bootstrap, formatters, request context and logger wrapper."""
from .config import bootstrap_logging, shutdown_logging
from .context import get_context, request_context
from .logger import LogLevel, StructuredLogger, get_logger, timed

__all__ = [
    'bootstrap_logging',
    'shutdown_logging',
    'get_context',
    'request_context',
    'LogLevel',
    'StructuredLogger',
    'get_logger',
    'timed',
]
