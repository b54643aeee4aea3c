"""
Structured gateway error exception type.

The single exception type the client lets cross its public boundary. Wraps
HTTP bodies and transport exceptions with a normalized `ErrorKind` so callers
can decide coarsely (retry? alert?) and still see the original text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .error_kind import ErrorKind


@dataclass
class GatewayError(Exception):
    """Represents a classified gateway failure.

    Attributes:
        message: Original error text (HTTP body or transport message).
        kind: Normalized :class:`ErrorKind` classification.
        http_status: HTTP status code when the failure came from a response.
        request_id: Correlation id of the request that failed.
        retryable: Whether the retry policy may attempt the call again.
        raw: Optional original exception for diagnostics.
    """

    message: str
    kind: ErrorKind
    http_status: Optional[int] = None
    request_id: Optional[str] = None
    retryable: bool = False
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining kind, status and message."""
        status = f" [{self.http_status}]" if self.http_status is not None else ""
        return f"{self.kind.value}{status}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable view without the raw exception."""
        return {
            "message": self.message,
            "kind": self.kind.value,
            "http_status": self.http_status,
            "request_id": self.request_id,
            "retryable": self.retryable,
        }


__all__ = ["GatewayError"]
