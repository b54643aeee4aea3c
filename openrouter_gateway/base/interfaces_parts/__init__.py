"""Interface parts package (one protocol per module)."""

from .gateway_logger import GatewayLogger
from .rate_limiter import RateLimiter

__all__ = ["GatewayLogger", "RateLimiter"]
