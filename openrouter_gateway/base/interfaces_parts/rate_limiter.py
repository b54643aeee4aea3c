"""RateLimiter Protocol (single-class module).

Optional collaborator consulted before a request is sent. Quota logic and
concurrency safety are the implementation's responsibility; the client only
calls out to it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RateLimiter(Protocol):
    """Per-user request quota check and bookkeeping."""

    async def check_limit(self, user_id: str) -> bool:
        """Return True when ``user_id`` may issue another request now."""
        ...

    async def record_request(self, user_id: str) -> None:
        """Record one completed request for ``user_id``."""
        ...
