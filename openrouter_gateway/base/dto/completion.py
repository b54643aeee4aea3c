"""
Pydantic DTOs for the chat-completion wire response.

Purpose
-------
Replace speculative dictionary access on untyped JSON with one strict parse
step. A 2xx body either validates into ``CompletionResponseDTO`` or the
client fails closed with a ``parse`` error; untyped data never reaches the
success path.

External dependencies: Pydantic v2 only (no network calls).

Fallback semantics
------------------
Unknown keys are ignored. Missing ``usage`` (or missing counters inside it)
default to zero. Missing ``choices`` or an empty first-choice content are
rejected by ``first_content`` rather than by the model itself so the error
message can be specific.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CompletionMessageDTO(BaseModel):
    """Assistant message inside a choice."""

    model_config = ConfigDict(extra="ignore")

    role: Optional[str] = None
    content: Optional[str] = None


class CompletionChoiceDTO(BaseModel):
    """One completion choice."""

    model_config = ConfigDict(extra="ignore")

    message: Optional[CompletionMessageDTO] = None
    finish_reason: Optional[str] = None


class CompletionUsageDTO(BaseModel):
    """Token usage counters; ``None`` values are treated as zero."""

    model_config = ConfigDict(extra="ignore")

    prompt_tokens: Optional[int] = Field(default=None, ge=0)
    completion_tokens: Optional[int] = Field(default=None, ge=0)
    total_tokens: Optional[int] = Field(default=None, ge=0)


class CompletionResponseDTO(BaseModel):
    """Top-level ``/chat/completions`` success body.

    Raises:
        pydantic.ValidationError: When the body has the wrong shape (for
            example ``choices`` is not a list or ``content`` is not text).
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[CompletionChoiceDTO] = Field(default_factory=list)
    usage: Optional[CompletionUsageDTO] = None

    def first_content(self) -> Optional[str]:
        """Return the first choice's message content, or ``None`` when absent/empty."""
        if not self.choices or self.choices[0].message is None:
            return None
        content = self.choices[0].message.content
        return content if content else None


__all__ = [
    "CompletionMessageDTO",
    "CompletionChoiceDTO",
    "CompletionUsageDTO",
    "CompletionResponseDTO",
]
