"""openrouter_gateway package

Async client for the OpenRouter chat-completion API used by the flashcard
generator: authentication, per-attempt timeouts, bounded exponential backoff,
strict response parsing, shallow structured-output validation and a single
classified error type.

Public API (re-exported):
    - Client: :class:`OpenRouterGateway`
    - Configuration: :class:`GatewayConfig`, :func:`load_gateway_config`
    - Models: :class:`ChatMessage`, :class:`ModelParams`,
      :class:`ResponseFormat`, :class:`ChatResponse`, :class:`UsageStats`,
      :class:`ValidationResult`, :class:`HealthStatus`
    - Errors: :class:`GatewayError`, :class:`ErrorKind`
    - Collaborators: :class:`GatewayLogger`, :class:`RateLimiter`,
      :class:`StructuredLogger`, :class:`NoOpLogger`,
      :class:`SlidingWindowRateLimiter`
"""

from .base.errors import ErrorKind, GatewayError
from .base.interfaces import GatewayLogger, RateLimiter
from .base.log_support import NoOpLogger, StructuredLogger
from .base.models import (
    ChatMessage,
    ChatResponse,
    GatewayConfig,
    HealthStatus,
    ModelParams,
    ResponseFormat,
    UsageStats,
    ValidationResult,
)
from .base.resilience import SlidingWindowRateLimiter
from .config import load_gateway_config
from .openrouter import OpenRouterGateway

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "OpenRouterGateway",
    "GatewayConfig",
    "load_gateway_config",
    "ChatMessage",
    "ChatResponse",
    "HealthStatus",
    "ModelParams",
    "ResponseFormat",
    "UsageStats",
    "ValidationResult",
    "ErrorKind",
    "GatewayError",
    "GatewayLogger",
    "RateLimiter",
    "NoOpLogger",
    "StructuredLogger",
    "SlidingWindowRateLimiter",
]
