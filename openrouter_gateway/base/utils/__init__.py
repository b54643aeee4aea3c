"""Small pure helpers shared by the gateway client."""

from .params import clamp, merge_params, normalize_params
from .request_ids import generate_request_id

__all__ = ["clamp", "merge_params", "normalize_params", "generate_request_id"]
