"""
Immutable service configuration for ``OpenRouterGateway``.

The client receives everything it needs through this object and never reads
the environment itself. ``normalized()`` validates and clamps the values once,
at construction time.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

import httpx

from ...config.defaults import OPENROUTER_DEFAULT_BASE_URL, OPENROUTER_DEFAULT_MODEL
from ..errors import ErrorKind, GatewayError
from ..interfaces import GatewayLogger, RateLimiter
from ..timeouts import clamp_retries, clamp_timeout
from .model_params import ModelParams

SleepFn = Callable[[float], Awaitable[Any]]


@dataclass(frozen=True)
class GatewayConfig:
    """Gateway client configuration.

    Attributes:
        api_key: OpenRouter API key; required and non-blank.
        base_url: API root; a trailing slash is stripped.
        default_model: Model used when a call does not name one.
        default_params: Service-level parameter defaults.
        timeout_seconds: Per-attempt timeout, clamped to ``[1, 120]``.
        max_retries: Retries after the first attempt, clamped to ``[0, 5]``.
        logger: Optional ``GatewayLogger``; structured stdlib logging is used
            when omitted.
        rate_limiter: Optional ``RateLimiter`` consulted when a ``user_id``
            is passed to ``send``.
        transport: Optional ``httpx`` async transport (tests inject
            ``httpx.MockTransport`` here). It is closed along with each
            attempt's client, so it must tolerate reuse after ``aclose``.
        sleep: Optional coroutine function used for backoff delays
            (seconds); defaults to ``asyncio.sleep``.
        app_url: Optional ``HTTP-Referer`` attribution header.
        app_title: Optional ``X-Title`` attribution header.
    """

    api_key: str
    base_url: str = OPENROUTER_DEFAULT_BASE_URL
    default_model: str = OPENROUTER_DEFAULT_MODEL
    default_params: Union[ModelParams, Mapping[str, Any], None] = None
    timeout_seconds: Optional[float] = None
    max_retries: Optional[int] = None
    logger: Optional[GatewayLogger] = None
    rate_limiter: Optional[RateLimiter] = None
    transport: Optional[httpx.AsyncBaseTransport] = None
    sleep: Optional[SleepFn] = None
    app_url: Optional[str] = None
    app_title: Optional[str] = None

    def normalized(self) -> "GatewayConfig":
        """Return a validated copy with defaults filled and values clamped.

        Raises:
            GatewayError: ``config`` kind when the API key is missing or blank,
                or when timeout, retry budget or default parameters are not
                numeric.
        """
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise GatewayError(message="API key is required", kind=ErrorKind.CONFIG)
        base_url = (self.base_url or OPENROUTER_DEFAULT_BASE_URL).rstrip("/")
        return replace(
            self,
            base_url=base_url,
            default_model=self.default_model or OPENROUTER_DEFAULT_MODEL,
            default_params=_checked("default_params", _coerce_params, self.default_params),
            timeout_seconds=_checked("timeout_seconds", clamp_timeout, self.timeout_seconds),
            max_retries=_checked("max_retries", clamp_retries, self.max_retries),
        )

    def describe(self) -> dict:
        """Loggable summary; never includes the API key."""
        return {
            "base_url": self.base_url,
            "default_model": self.default_model,
            "timeout_seconds": self.timeout_seconds,
            "max_retries": self.max_retries,
        }


def _coerce_params(value: Any) -> ModelParams:
    if value is not None and not isinstance(value, (ModelParams, Mapping)):
        raise TypeError(f"expected a mapping, got {type(value).__name__}")
    params = ModelParams.from_any(value)
    for name, v in params.to_dict().items():
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise TypeError(f"{name} must be a number, got {v!r}")
    return params


def _checked(field_name: str, normalize: Callable[[Any], Any], value: Any) -> Any:
    """Apply ``normalize`` and report malformed values as ``config`` errors."""
    try:
        return normalize(value)
    except (TypeError, ValueError) as e:
        raise GatewayError(
            message=f"Invalid {field_name}: {e}",
            kind=ErrorKind.CONFIG,
            retryable=False,
            raw=e,
        ) from e


__all__ = ["GatewayConfig", "SleepFn"]
