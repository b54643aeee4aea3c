"""Request id generation for log correlation.

Ids are ``req_<epoch-ms>_<random suffix>``: unique enough to correlate log
lines, not a cryptographic guarantee.
"""
from __future__ import annotations

import secrets
import time


def generate_request_id() -> str:
    return f"req_{int(time.time() * 1000)}_{secrets.token_hex(6)}"


__all__ = ["generate_request_id"]
