"""Concrete ``GatewayLogger`` implementations.

- ``StructuredLogger`` writes JSON events through a stdlib ``logging.Logger``
  (the default when no logger is injected into the client).
- ``NoOpLogger`` discards everything; use it to silence tests.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .events import log_event
from .logging_context import LogContext


class StructuredLogger:
    """Adapter from the ``info/warn/error(message, meta)`` protocol to stdlib logging.

    Each call emits one JSON object: ``{"event": message, **context, **meta}``.
    """

    def __init__(self, logger: logging.Logger, ctx: Optional[LogContext] = None) -> None:
        self._logger = logger
        self._ctx = ctx

    def _emit(self, level: int, message: str, meta: Optional[Mapping[str, Any]]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        log_event(self._logger, message, self._ctx, level=level, **dict(meta or {}))

    def info(self, message: str, meta: Optional[Mapping[str, Any]] = None) -> None:
        self._emit(logging.INFO, message, meta)

    def warn(self, message: str, meta: Optional[Mapping[str, Any]] = None) -> None:
        self._emit(logging.WARNING, message, meta)

    def error(self, message: str, meta: Optional[Mapping[str, Any]] = None) -> None:
        self._emit(logging.ERROR, message, meta)


class NoOpLogger:
    """Logger that drops every call."""

    def info(self, message: str, meta: Optional[Mapping[str, Any]] = None) -> None:
        return None

    def warn(self, message: str, meta: Optional[Mapping[str, Any]] = None) -> None:
        return None

    def error(self, message: str, meta: Optional[Mapping[str, Any]] = None) -> None:
        return None


__all__ = ["StructuredLogger", "NoOpLogger"]
