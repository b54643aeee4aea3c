"""Request-side helpers for the OpenRouter client.

Pure functions that validate input messages and assemble the JSON payload and
headers for ``POST {base_url}/chat/completions``. No I/O happens here.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..base.errors import ErrorKind, GatewayError
from ..base.models import ALLOWED_ROLES, ChatMessage, ModelParams, ResponseFormat
from ..base.utils.params import normalize_params

MessageLike = Union[ChatMessage, Mapping[str, Any]]


def _validation_error(message: str, request_id: Optional[str]) -> GatewayError:
    return GatewayError(message=message, kind=ErrorKind.VALIDATION, request_id=request_id, retryable=False)


def validate_messages(
    messages: Optional[Sequence[MessageLike]], request_id: Optional[str] = None
) -> List[ChatMessage]:
    """Coerce and validate the ordered message list.

    Parameters:
        messages: ``ChatMessage`` objects or ``{"role", "content"}`` mappings.
        request_id: Correlation id attached to any raised error.

    Returns:
        The messages as ``ChatMessage`` objects, order preserved.

    Raises:
        GatewayError: ``validation`` kind for an empty list, an unknown or
            missing role, or empty content.
    """
    if not messages:
        raise _validation_error("Messages array cannot be empty", request_id)

    out: List[ChatMessage] = []
    for item in messages:
        if not isinstance(item, (ChatMessage, Mapping)):
            raise _validation_error(f"Invalid message: {item!r}", request_id)
        msg = ChatMessage.from_any(item)
        if msg.role not in ALLOWED_ROLES:
            raise _validation_error(f"Invalid message role: {msg.role}", request_id)
        if not isinstance(msg.content, str) or not msg.content:
            raise _validation_error("Message content cannot be empty", request_id)
        out.append(msg)
    return out


def build_payload(
    model: str,
    messages: Iterable[ChatMessage],
    params: Union[ModelParams, Mapping[str, Any], None] = None,
    default_params: Union[ModelParams, Mapping[str, Any], None] = None,
    response_format: Optional[ResponseFormat] = None,
) -> Dict[str, Any]:
    """Assemble the JSON body for chat/completions.

    Parameters are merged (baseline, then ``default_params``, then
    ``params``) and clamped; ``response_format`` is attached when given.
    """
    payload: Dict[str, Any] = {
        "model": model,
        "messages": [m.to_dict() for m in messages],
        **normalize_params(params, default_params),
    }
    if response_format is not None:
        payload["response_format"] = response_format.to_dict()
    return payload


def build_headers(api_key: str, app_url: Optional[str] = None, app_title: Optional[str] = None) -> Dict[str, str]:
    """Build request headers; attribution headers are added only when configured."""
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    if app_url:
        headers["HTTP-Referer"] = app_url
    if app_title:
        headers["X-Title"] = app_title
    return headers


__all__ = ["MessageLike", "validate_messages", "build_payload", "build_headers"]
