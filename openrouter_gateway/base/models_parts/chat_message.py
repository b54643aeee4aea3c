"""
Chat message DTO sent to the gateway.

Defines the `ChatMessage` dataclass and the `Role` literal. Messages are
forwarded to the API verbatim and in order; validation of role and content
happens in the client before any network call.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, Union

Role = Literal["system", "user", "assistant"]

ALLOWED_ROLES = ("system", "user", "assistant")


@dataclass(frozen=True)
class ChatMessage:
    """One turn in a conversation.

    Attributes:
        role: ``"system"``, ``"user"`` or ``"assistant"``.
        content: Plain text content; must be non-empty.
    """

    role: Role
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}

    @classmethod
    def from_any(cls, value: Union["ChatMessage", Mapping[str, Any]]) -> "ChatMessage":
        """Accept either a ``ChatMessage`` or a ``{"role", "content"}`` mapping."""
        if isinstance(value, ChatMessage):
            return value
        return cls(role=value.get("role"), content=value.get("content"))  # type: ignore[arg-type]


__all__ = ["ChatMessage", "Role", "ALLOWED_ROLES"]
