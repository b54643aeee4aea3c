"""Auxiliary logging helpers (formatter, context, events, logger adapters) used by base.logging."""

from .events import log_event
from .json_formatter import ISO, JsonFormatter
from .logger_adapters import NoOpLogger, StructuredLogger
from .logging_context import LogContext

__all__ = ["JsonFormatter", "ISO", "LogContext", "log_event", "StructuredLogger", "NoOpLogger"]
