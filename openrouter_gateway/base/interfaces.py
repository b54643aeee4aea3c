"""Collaborator protocols public surface.

Re-exports the single-class modules under ``interfaces_parts`` so callers
have one stable import path.
"""

from .interfaces_parts.gateway_logger import GatewayLogger
from .interfaces_parts.rate_limiter import RateLimiter

__all__ = ["GatewayLogger", "RateLimiter"]
