"""openrouter_gateway.config.env
=============================

Environment helpers for the caller-side configuration loader.

The gateway client never reads the environment itself; only the loader in
``openrouter_gateway.config`` (and the CLI built on it) does.

Failure Modes
-------------
- Parsers return ``None`` for unset, blank, placeholder or malformed values
  so the next configuration layer applies.
"""

from __future__ import annotations

import os
from typing import Optional

_PLACEHOLDER_MARKERS = ("placeholder", "changeme", "your_api_key", "your-api-key", "xxx")


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the string looks like a placeholder/test value."""
    if not val:
        return False
    lowered = val.strip().lower()
    return any(marker in lowered for marker in _PLACEHOLDER_MARKERS)


def env_str(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip() or is_placeholder(raw):
        return None
    return raw.strip()


def env_float(name: str) -> Optional[float]:
    raw = env_str(name)
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def env_int(name: str) -> Optional[int]:
    raw = env_str(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def load_dotenv_file(path: str = ".env") -> None:
    """Lightweight ``.env`` loader.

    Parses ``KEY=VALUE`` lines, ignoring comments and blank lines. Existing
    environment variables win unless their current value is a placeholder.
    """
    if not os.path.isfile(path):
        return
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip().strip('"').strip("'")
            if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                os.environ[k] = v


__all__ = ["is_placeholder", "env_str", "env_float", "env_int", "load_dotenv_file"]
