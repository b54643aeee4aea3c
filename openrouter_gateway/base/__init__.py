"""
Gateway Base Package

Exports the provider-agnostic building blocks used by the OpenRouter client:

- Errors: ``ErrorKind`` taxonomy and the ``GatewayError`` exception
- Models (DTOs): messages, parameters, response format, responses, config
- Interfaces: ``GatewayLogger`` and ``RateLimiter`` collaborator protocols
- Validation: shallow structured-output check
"""

from .errors import ErrorKind, GatewayError, classify_exception, classify_status
from .interfaces import GatewayLogger, RateLimiter
from .models import (
    ChatMessage,
    ChatResponse,
    GatewayConfig,
    HealthStatus,
    ModelParams,
    ResponseFormat,
    UsageStats,
    ValidationResult,
)
from .validation import validate_against_schema, validate_response

__all__ = [
    "ErrorKind",
    "GatewayError",
    "classify_exception",
    "classify_status",
    "GatewayLogger",
    "RateLimiter",
    "ChatMessage",
    "ChatResponse",
    "GatewayConfig",
    "HealthStatus",
    "ModelParams",
    "ResponseFormat",
    "UsageStats",
    "ValidationResult",
    "validate_against_schema",
    "validate_response",
]
