"""Attempt execution and response parsing for the OpenRouter client.

``execute_attempt`` performs one bounded HTTP call and raises a classified
``GatewayError`` for non-2xx statuses and undecodable bodies; transport
exceptions and timeouts propagate to the retry policy, which classifies them.
``parse_completion`` turns the decoded body into a ``ChatResponse`` or fails
closed with a ``parse`` error.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..base.dto import CompletionResponseDTO, CompletionUsageDTO
from ..base.errors import ErrorKind, GatewayError, error_from_status
from ..base.http import build_async_client
from ..base.models import ChatResponse, GatewayConfig, UsageStats
from ..base.timeouts import attempt_timeout
from ..config.defaults import CHAT_COMPLETIONS_PATH
from .helpers import build_headers


async def _post_once(config: GatewayConfig, payload: Dict[str, Any], request_id: Optional[str]) -> Any:
    headers = build_headers(config.api_key, config.app_url, config.app_title)
    async with build_async_client(
        config.base_url,
        config.timeout_seconds,
        headers=headers,
        transport=config.transport,
    ) as client:
        resp = await client.post(CHAT_COMPLETIONS_PATH, json=payload)
        if not resp.is_success:
            raise error_from_status(resp.status_code, resp.text, request_id)
        try:
            return resp.json()
        except ValueError as e:
            raise GatewayError(
                message=f"Invalid JSON in response: {e}",
                kind=ErrorKind.PARSE,
                http_status=resp.status_code,
                request_id=request_id,
                retryable=False,
                raw=e,
            ) from e


async def execute_attempt(config: GatewayConfig, payload: Dict[str, Any], request_id: Optional[str]) -> Any:
    """Run one POST bounded by ``config.timeout_seconds``.

    Returns:
        The decoded JSON body of a 2xx response.

    Raises:
        GatewayError: For non-2xx statuses (classified by status) and for
            bodies that are not JSON (``parse``).
        asyncio.TimeoutError / httpx.TransportError: Left for the retry policy
            to classify as ``timeout`` / ``network``.
    """
    return await attempt_timeout(_post_once(config, payload, request_id), config.timeout_seconds)


def parse_completion(data: Any, request_id: Optional[str], requested_model: str) -> ChatResponse:
    """Validate the decoded body and build the normalized ``ChatResponse``.

    Raises:
        GatewayError: ``parse`` kind (not retryable) when the body has the
            wrong shape or the first choice carries no content.
    """
    try:
        dto = CompletionResponseDTO.model_validate(data)
    except ValidationError as e:
        raise GatewayError(
            message=f"Invalid API response shape: {e.error_count()} validation error(s)",
            kind=ErrorKind.PARSE,
            request_id=request_id,
            retryable=False,
            raw=e,
        ) from e

    content = dto.first_content()
    if content is None:
        raise GatewayError(
            message="Invalid API response: missing choices or message content",
            kind=ErrorKind.PARSE,
            request_id=request_id,
            retryable=False,
        )

    usage = dto.usage or CompletionUsageDTO()
    return ChatResponse(
        content=content,
        model=dto.model or requested_model,
        usage=UsageStats(
            prompt_tokens=usage.prompt_tokens or 0,
            completion_tokens=usage.completion_tokens or 0,
            total_tokens=usage.total_tokens or 0,
        ),
        request_id=request_id,
        finish_reason=dto.choices[0].finish_reason,
    )


__all__ = ["execute_attempt", "parse_completion"]
