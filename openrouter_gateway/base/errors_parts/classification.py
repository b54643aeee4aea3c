"""
Error classification helpers mapping failures to `ErrorKind` values.

Two entry points:
- ``classify_status`` for non-2xx HTTP responses.
- ``classify_exception`` for anything raised while an attempt was in flight
  (transport errors, timeouts, decoding failures).

Both are pure; they never perform I/O.
"""
from __future__ import annotations

import asyncio
import json
from typing import Optional

import httpx

from .error_kind import RETRYABLE_KINDS, ErrorKind
from .gateway_error import GatewayError


def classify_status(status: int) -> ErrorKind:
    """Map an HTTP status code to an :class:`ErrorKind`.

    401/403 are ``auth``, 429 is ``rate_limit``, 5xx is ``server``, any other
    4xx is ``validation`` and everything else is ``unknown``.
    """
    if status in (401, 403):
        return ErrorKind.AUTH
    if status == 429:
        return ErrorKind.RATE_LIMIT
    if 500 <= status < 600:
        return ErrorKind.SERVER
    if 400 <= status < 500:
        return ErrorKind.VALIDATION
    return ErrorKind.UNKNOWN


def is_retryable_status(status: int) -> bool:
    """Return True for statuses the retry policy should attempt again."""
    return status == 429 or 500 <= status < 600


def is_retryable_kind(kind: ErrorKind) -> bool:
    return kind in RETRYABLE_KINDS


def error_from_status(status: int, body: str, request_id: Optional[str] = None) -> GatewayError:
    """Build the ``GatewayError`` for a non-2xx response.

    The response body is captured verbatim into the message.
    """
    return GatewayError(
        message=f"HTTP {status}: {body}",
        kind=classify_status(status),
        http_status=status,
        request_id=request_id,
        retryable=is_retryable_status(status),
    )


def classify_exception(exc: BaseException, request_id: Optional[str] = None) -> GatewayError:
    """Wrap an arbitrary exception into a :class:`GatewayError`.

    Precedence:
        1. ``GatewayError`` passthrough (request id filled in when missing).
        2. Timeouts (``httpx.TimeoutException``, ``asyncio.TimeoutError``).
        3. Other ``httpx`` transport errors -> ``network``.
        4. JSON decoding errors -> ``parse``.
        5. ``unknown`` fallback (not retryable).
    """
    if isinstance(exc, GatewayError):
        if exc.request_id is None:
            exc.request_id = request_id
        return exc
    if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)):
        return GatewayError(
            message="Request timeout",
            kind=ErrorKind.TIMEOUT,
            request_id=request_id,
            retryable=True,
            raw=exc,
        )
    if isinstance(exc, httpx.TransportError):
        return GatewayError(
            message=str(exc) or exc.__class__.__name__,
            kind=ErrorKind.NETWORK,
            request_id=request_id,
            retryable=True,
            raw=exc,
        )
    if isinstance(exc, json.JSONDecodeError):
        return GatewayError(
            message=f"Invalid JSON in response: {exc}",
            kind=ErrorKind.PARSE,
            request_id=request_id,
            retryable=False,
            raw=exc,
        )
    return GatewayError(
        message=str(exc) or "Unknown error occurred",
        kind=ErrorKind.UNKNOWN,
        request_id=request_id,
        retryable=False,
        raw=exc,
    )


__all__ = [
    "classify_status",
    "classify_exception",
    "error_from_status",
    "is_retryable_status",
    "is_retryable_kind",
]
