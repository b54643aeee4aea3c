"""OpenRouter chat-completion client."""

from .client import OpenRouterGateway

__all__ = ["OpenRouterGateway"]
