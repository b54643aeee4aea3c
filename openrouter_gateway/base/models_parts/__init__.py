"""Model parts package (one concept per module)."""

from .chat_message import ALLOWED_ROLES, ChatMessage, Role
from .chat_response import ChatResponse, UsageStats
from .gateway_config import GatewayConfig
from .model_params import ModelParams
from .response_format import ResponseFormat
from .results import HealthStatus, ValidationResult

__all__ = [
    "ALLOWED_ROLES",
    "ChatMessage",
    "Role",
    "ChatResponse",
    "UsageStats",
    "GatewayConfig",
    "ModelParams",
    "ResponseFormat",
    "HealthStatus",
    "ValidationResult",
]
