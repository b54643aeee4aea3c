"""Pydantic DTOs for wire-level parsing."""

from .completion import (
    CompletionChoiceDTO,
    CompletionMessageDTO,
    CompletionResponseDTO,
    CompletionUsageDTO,
)

__all__ = [
    "CompletionChoiceDTO",
    "CompletionMessageDTO",
    "CompletionResponseDTO",
    "CompletionUsageDTO",
]
