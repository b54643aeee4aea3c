from __future__ import annotations

import pytest
from pydantic import ValidationError

from openrouter_gateway.base.dto import CompletionResponseDTO


def test_parses_full_body_and_ignores_unknown_keys():
    dto = CompletionResponseDTO.model_validate(
        {
            "id": "gen-1",
            "model": "openai/gpt-4o-mini",
            "provider": "OpenAI",
            "choices": [{"message": {"role": "assistant", "content": "hi"}, "finish_reason": "stop", "logprobs": None}],
            "usage": {"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 3},
        }
    )
    assert dto.first_content() == "hi"  # nosec B101
    assert dto.usage.total_tokens == 3  # nosec B101


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"choices": []},
        {"choices": [{}]},
        {"choices": [{"message": {"role": "assistant", "content": ""}}]},
    ],
)
def test_first_content_none_when_absent(body):
    assert CompletionResponseDTO.model_validate(body).first_content() is None  # nosec B101


@pytest.mark.parametrize(
    "body",
    [
        {"choices": "nope"},
        {"choices": [{"message": {"content": ["not", "text"]}}]},
        {"choices": [], "usage": {"total_tokens": -1}},
    ],
)
def test_wrong_shapes_raise_validation_error(body):
    with pytest.raises(ValidationError):
        CompletionResponseDTO.model_validate(body)
