"""Unified gateway error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``openrouter_gateway.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_kind import ErrorKind, RETRYABLE_KINDS
from .errors_parts.gateway_error import GatewayError
from .errors_parts.classification import (
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
