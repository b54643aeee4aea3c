"""
Model generation parameters.

All fields are optional; ``None`` means "not specified at this layer" so the
next layer down (service defaults, then the hardcoded baseline) supplies the
value. Range handling lives in ``base.utils.params``.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Union


@dataclass(frozen=True)
class ModelParams:
    """Optional sampling knobs forwarded to the chat-completion API."""

    temperature: Optional[float] = None
    top_p: Optional[float] = None
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None
    max_tokens: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return only the parameters that were set."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_any(cls, value: Union["ModelParams", Mapping[str, Any], None]) -> "ModelParams":
        if value is None:
            return cls()
        if isinstance(value, ModelParams):
            return value
        known = {k: value[k] for k in cls.__dataclass_fields__ if k in value}
        return cls(**known)


__all__ = ["ModelParams"]
