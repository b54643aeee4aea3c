"""
Normalized gateway error kinds (taxonomy).

Defines the `ErrorKind` enumeration attached to every `GatewayError`. Values
are lowercase snake_case and are a stable public contract for logging and
caller-side retry/alert decisions.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Enumerated failure categories raised by the gateway client."""

    CONFIG = "config"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"
    NETWORK = "network"
    VALIDATION = "validation"
    PARSE = "parse"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


# Kinds that the retry policy may attempt again.
RETRYABLE_KINDS = frozenset(
    {
        ErrorKind.RATE_LIMIT,
        ErrorKind.SERVER,
        ErrorKind.TIMEOUT,
        ErrorKind.NETWORK,
    }
)


__all__ = ["ErrorKind", "RETRYABLE_KINDS"]
