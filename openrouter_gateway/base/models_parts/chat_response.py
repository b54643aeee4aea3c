"""
Normalized chat response returned by the gateway client.

Owned by the caller once returned; the client keeps no reference to it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class UsageStats:
    """Token counters reported by the API (zero when absent)."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }


@dataclass(frozen=True)
class ChatResponse:
    """Provider-agnostic result of one successful ``send`` call.

    Attributes:
        content: Text of the first choice's message.
        model: Model name reported by the API.
        usage: Token usage counters.
        request_id: Correlation id used for logging.
        finish_reason: Optional finish reason of the first choice.
    """

    content: str
    model: str
    usage: UsageStats = field(default_factory=UsageStats)
    request_id: Optional[str] = None
    finish_reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return {
            "content": self.content,
            "model": self.model,
            "usage": self.usage.to_dict(),
            "request_id": self.request_id,
            "finish_reason": self.finish_reason,
        }


__all__ = ["ChatResponse", "UsageStats"]
