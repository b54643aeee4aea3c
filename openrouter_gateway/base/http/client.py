"""Async HTTP client construction for gateway attempts.

Purpose:
    Build one ``httpx.AsyncClient`` per attempt from the client's fixed
    configuration. Nothing is pooled or cached at module level, so concurrent
    ``send`` calls share no mutable state; connection reuse within an attempt
    is left to ``httpx``.

External dependencies:
    - ``httpx`` for the underlying asynchronous HTTP client.

Timeout strategy:
    - The ``httpx`` timeout mirrors the configured per-attempt timeout. The
      caller still wraps the whole attempt in ``attempt_timeout`` so that a
      slow body read is bounded too.

Testing:
    - ``transport`` accepts any ``httpx.AsyncBaseTransport``; tests pass an
      ``httpx.MockTransport`` and never touch the network.
"""

from __future__ import annotations

from typing import Mapping, Optional

import httpx


def build_async_client(
    base_url: str,
    timeout_seconds: float,
    *,
    headers: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Return a new ``httpx.AsyncClient`` bound to ``base_url``.

    Use as an async context manager so the connection is released when the
    attempt ends.
    """
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout_seconds),
        headers=dict(headers or {}),
        transport=transport,
    )


__all__ = ["build_async_client"]
