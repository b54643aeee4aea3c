"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `openrouter_gateway.base.errors` for the stable surface.
"""

from .error_kind import ErrorKind, RETRYABLE_KINDS
from .gateway_error import GatewayError
from .classification import (
    classify_exception,
    classify_status,
    error_from_status,
    is_retryable_kind,
    is_retryable_status,
)

__all__ = [
    "ErrorKind",
    "RETRYABLE_KINDS",
    "GatewayError",
    "classify_exception",
    "classify_status",
    "error_from_status",
    "is_retryable_kind",
    "is_retryable_status",
]
