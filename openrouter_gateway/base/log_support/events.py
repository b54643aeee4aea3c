"""Single-line structured log events.

``log_event`` renders one JSON object per call; ``JsonFormatter`` later hoists
its keys to the top level of the emitted line.
"""
from __future__ import annotations

import json
import logging
from typing import Any

from .logging_context import LogContext


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit one structured log event as a single JSON line.

    Parameters
    ----------
    logger: logging.Logger
        Target logger (normally from ``get_logger``).
    event: str
        Event name, e.g. ``"Sending chat request"``.
    ctx: LogContext | None
        Shared request context merged shallowly into the payload.
    level: int
        Logging level for the record.
    keep_none: bool
        Preserve keys whose value is ``None`` (encoded as ``null``).
    **fields: Any
        Additional JSON-serializable key/value pairs.
    """
    payload: dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = ["log_event"]
