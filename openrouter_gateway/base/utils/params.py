"""Pure helpers for model parameter merging and range clamping.

Merge order (later wins): hardcoded baseline -> service defaults -> call values.
Every numeric parameter is clamped into its inclusive range instead of being
rejected; ``max_tokens`` is additionally coerced to ``int``.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from ...config.defaults import DEFAULT_MODEL_PARAMS, PARAM_BOUNDS
from ..models_parts.model_params import ModelParams

ParamsLike = Union[ModelParams, Mapping[str, Any], None]


def clamp(value: float, low: float, high: float) -> float:
    """Return ``value`` limited to ``[low, high]``."""
    return max(low, min(value, high))


def merge_params(service_defaults: ParamsLike = None, call_params: ParamsLike = None) -> Dict[str, Any]:
    """Merge the three parameter layers into one fully populated mapping."""
    merged: Dict[str, Any] = dict(DEFAULT_MODEL_PARAMS)
    merged |= ModelParams.from_any(service_defaults).to_dict()
    merged |= ModelParams.from_any(call_params).to_dict()
    return merged


def normalize_params(
    call_params: ParamsLike = None, service_defaults: Optional[ParamsLike] = None
) -> Dict[str, Any]:
    """Return merged parameters with every value clamped into range.

    Parameters:
        call_params: Values supplied for one ``send`` call.
        service_defaults: Values configured on the client.

    Returns:
        Mapping with all five parameters populated, ready for the payload.
    """
    merged = merge_params(service_defaults, call_params)
    out: Dict[str, Any] = {}
    for name, (low, high) in PARAM_BOUNDS.items():
        value = clamp(merged[name], low, high)
        out[name] = int(value) if name == "max_tokens" else float(value)
    return out


__all__ = ["clamp", "merge_params", "normalize_params"]
