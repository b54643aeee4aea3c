"""
Gateway domain models (DTOs) public surface.

This module re-exports the implementations under
``openrouter_gateway.base.models_parts`` to keep one stable import path.
"""

from .models_parts.chat_message import ALLOWED_ROLES, ChatMessage, Role
from .models_parts.chat_response import ChatResponse, UsageStats
from .models_parts.gateway_config import GatewayConfig
from .models_parts.model_params import ModelParams
from .models_parts.response_format import ResponseFormat
from .models_parts.results import HealthStatus, ValidationResult

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
