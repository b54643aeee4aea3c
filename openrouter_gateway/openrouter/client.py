"""OpenRouter gateway client (OpenAI-style chat completions over HTTP).

Summary:
- Async chat completions via ``httpx`` with a per-attempt timeout
- Bounded exponential backoff retries (``base.resilience.retry``)
- Strict response parsing through a pydantic DTO
- Shallow local validation of structured output (``base.validation``)

Errors & Observability:
- Every failure leaves as a classified ``GatewayError``
- Start/retry/success/failure lines go through the injected ``GatewayLogger``;
  the API key and message bodies are never logged

The client holds only its immutable configuration, so one instance can serve
many concurrent ``send`` calls.
"""

from __future__ import annotations

import time
from typing import Any, Mapping, Optional, Sequence, Union

from ..base.errors import ErrorKind, GatewayError, classify_exception
from ..base.interfaces import GatewayLogger
from ..base.log_support import LogContext, StructuredLogger
from ..base.logging import get_logger
from ..base.models import (
    ChatMessage,
    ChatResponse,
    GatewayConfig,
    HealthStatus,
    ModelParams,
    ResponseFormat,
    ValidationResult,
)
from ..base.resilience.retry import RetryConfig, run_with_retry
from ..base.utils.request_ids import generate_request_id
from ..base.validation import validate_response as _validate_response
from ..config.defaults import (
    HEALTH_CHECK_MAX_TOKENS,
    HEALTH_CHECK_PROMPT,
    HEALTH_CHECK_REQUEST_ID,
)
from .chat_helpers import execute_attempt, parse_completion
from .helpers import MessageLike, build_payload, validate_messages

ParamsLike = Union[ModelParams, Mapping[str, Any], None]
FormatLike = Union[ResponseFormat, Mapping[str, Any], None]


class OpenRouterGateway:
    """Single point of contact with the OpenRouter chat-completion endpoint.

    Parameters:
        config: Service configuration. Validated and normalized here: a blank
            API key raises a ``config`` ``GatewayError`` immediately, timeout
            and retry budget are clamped, the base URL loses its trailing slash.

    Side effects:
        - Emits one ``info`` line describing the (masked) configuration.
    """

    provider_name = "openrouter"

    def __init__(self, config: GatewayConfig) -> None:
        self._config = config.normalized()
        self._logger: GatewayLogger = self._config.logger or StructuredLogger(
            get_logger("openrouter_gateway.client"),
            LogContext(provider=self.provider_name),
        )
        self._logger.info("OpenRouterGateway initialized", self._config.describe())

    @classmethod
    def from_env(cls, overrides: Optional[dict] = None, **extras: Any) -> "OpenRouterGateway":
        """Build a client from defaults, config file, environment and overrides.

        See ``openrouter_gateway.config.load_gateway_config``.
        """
        from ..config import load_gateway_config

        return cls(load_gateway_config(overrides, **extras))

    @property
    def config(self) -> GatewayConfig:
        """The normalized, immutable configuration."""
        return self._config

    def default_model(self) -> str:
        return self._config.default_model

    async def send(
        self,
        messages: Sequence[MessageLike],
        *,
        model: Optional[str] = None,
        params: ParamsLike = None,
        response_format: FormatLike = None,
        request_id: Optional[str] = None,
        user_id: Optional[str] = None,
        validate_schema: bool = False,
    ) -> ChatResponse:
        """Send chat messages and return the normalized model response.

        Parameters:
            messages: Ordered, non-empty conversation; sent verbatim.
            model: Model override; defaults to ``config.default_model``.
            params: Call-level parameters; merged over service defaults and
                the baseline, then clamped.
            response_format: Structured-output hint forwarded to the API.
            request_id: Correlation id; generated when omitted.
            user_id: Enables rate-limiter bookkeeping when a limiter is set.
            validate_schema: Re-validate content against ``response_format``
                locally and fail with ``parse`` when it does not conform.

        Returns:
            ``ChatResponse`` with content, model, usage and request id.

        Raises:
            GatewayError: Always classified; see ``ErrorKind``. Retryable kinds
                are raised only after the retry budget is exhausted.
        """
        cfg = self._config
        request_id = request_id or generate_request_id()
        chosen_model = model or cfg.default_model
        ctx = {"requestId": request_id, "model": chosen_model}

        try:
            self._logger.info("Sending chat request", {**ctx, "messageCount": len(messages or ())})

            chat_messages = validate_messages(messages, request_id)
            fmt = ResponseFormat.from_any(response_format)
            await self._check_rate_limit(user_id, request_id)

            payload = build_payload(chosen_model, chat_messages, params, cfg.default_params, fmt)
            retry_cfg = RetryConfig(max_retries=cfg.max_retries, attempt_logger=self._retry_logger(request_id))
            data = await run_with_retry(
                lambda: execute_attempt(cfg, payload, request_id),
                retry_cfg,
                sleep=cfg.sleep,
                request_id=request_id,
            )
            response = parse_completion(data, request_id, chosen_model)

            if validate_schema and fmt is not None:
                result = _validate_response(response.content, fmt)
                if not result.valid:
                    raise GatewayError(
                        message=f"Response does not match schema '{fmt.name}': {result.error}",
                        kind=ErrorKind.PARSE,
                        request_id=request_id,
                        retryable=False,
                    )

            if cfg.rate_limiter is not None and user_id:
                await cfg.rate_limiter.record_request(user_id)

            self._logger.info(
                "Chat request successful",
                {
                    "requestId": request_id,
                    "model": response.model,
                    "tokensUsed": response.usage.total_tokens,
                    "finishReason": response.finish_reason,
                },
            )
            return response
        except Exception as exc:  # noqa: BLE001 - funnelled into GatewayError
            err = classify_exception(exc, request_id)
            self._logger.error(
                "Chat request failed",
                {
                    **ctx,
                    "errorType": err.kind.value,
                    "httpStatus": err.http_status,
                    "retryable": err.retryable,
                    "message": err.message,
                },
            )
            if err is exc:
                raise
            raise err from exc

    def validate_response(self, raw_text: Any, response_format: FormatLike = None) -> ValidationResult:
        """Validate model output against an optional response format.

        Shallow by intent: JSON parse, top-level object type, required keys and
        (when forbidden) extra keys. See ``base.validation``.
        """
        return _validate_response(raw_text, response_format)

    async def health_check(self) -> HealthStatus:
        """Send a minimal request and report connectivity; never raises.

        Returns:
            ``HealthStatus`` with wall-clock latency in milliseconds and, on
            failure, the error message.
        """
        start = time.perf_counter()
        try:
            await self.send(
                [ChatMessage(role="user", content=HEALTH_CHECK_PROMPT)],
                params=ModelParams(max_tokens=HEALTH_CHECK_MAX_TOKENS),
                request_id=HEALTH_CHECK_REQUEST_ID,
            )
        except Exception as exc:  # noqa: BLE001 - reported, not raised
            latency_ms = (time.perf_counter() - start) * 1000.0
            message = exc.message if isinstance(exc, GatewayError) else (str(exc) or "Unknown error")
            self._logger.error("Health check failed", {"latencyMs": latency_ms, "error": message})
            return HealthStatus(healthy=False, latency_ms=latency_ms, message=message)

        latency_ms = (time.perf_counter() - start) * 1000.0
        self._logger.info("Health check successful", {"latencyMs": latency_ms})
        return HealthStatus(healthy=True, latency_ms=latency_ms)

    async def _check_rate_limit(self, user_id: Optional[str], request_id: str) -> None:
        limiter = self._config.rate_limiter
        if limiter is None or not user_id:
            return
        if not await limiter.check_limit(user_id):
            raise GatewayError(
                message=f"Rate limit exceeded for user {user_id}",
                kind=ErrorKind.RATE_LIMIT,
                request_id=request_id,
                retryable=False,
            )

    def _retry_logger(self, request_id: str):
        def _log(*, attempt: int, max_retries: int, delay_ms: int, error: GatewayError) -> None:
            self._logger.warn(
                "Retrying request",
                {
                    "requestId": request_id,
                    "attempt": attempt,
                    "maxRetries": max_retries,
                    "delayMs": delay_ms,
                    "errorType": error.kind.value,
                    "httpStatus": error.http_status,
                },
            )

        return _log


__all__ = ["OpenRouterGateway"]
