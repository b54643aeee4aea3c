"""Caller-side configuration loader for the gateway client.

Goals
-----
* Keep the client itself free of environment reads: it only accepts a
  ``GatewayConfig``.
* Give applications and the CLI one call that assembles that config from the
  usual sources, merged in a predictable order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Optional JSON file pointed to by ``GATEWAY_CONFIG_FILE``
    3. Environment variables (``OPENROUTER_API_KEY``, ``OPENROUTER_BASE_URL``,
       ``OPENROUTER_DEFAULT_MODEL``, ``OPENROUTER_TIMEOUT_SECONDS``,
       ``OPENROUTER_MAX_RETRIES``, ``OPENROUTER_APP_URL``, ``OPENROUTER_APP_TITLE``)
    4. Explicit overrides passed to the loader

A ``.env`` file in the working directory (or at ``DOTENV_FILE``) is loaded
first without overriding real environment values.

External Config File
--------------------
```
{
  "api_key": "sk-or-...",
  "default_model": "openai/gpt-4o-mini",
  "timeout_seconds": 60,
  "max_retries": 3,
  "default_params": {"temperature": 0.2}
}
```

Public API
----------
* load_gateway_settings(overrides=None) -> dict
* load_gateway_config(overrides=None, **extras) -> GatewayConfig
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

from .defaults import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_API_KEY,
    ENV_APP_TITLE,
    ENV_APP_URL,
    ENV_BASE_URL,
    ENV_CONFIG_FILE,
    ENV_DEFAULT_MODEL,
    ENV_MAX_RETRIES,
    ENV_TIMEOUT_SECONDS,
    OPENROUTER_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_MODEL,
)
from .env import env_float, env_int, env_str, load_dotenv_file

if TYPE_CHECKING:
    from ..base.models import GatewayConfig

DEFAULTS: Dict[str, Any] = {
    "base_url": OPENROUTER_DEFAULT_BASE_URL,
    "default_model": OPENROUTER_DEFAULT_MODEL,
    "timeout_seconds": DEFAULT_TIMEOUT_SECONDS,
    "max_retries": DEFAULT_MAX_RETRIES,
}

# settings key -> (env var, parser)
ENV_FIELD_MAP = {
    "api_key": (ENV_API_KEY, env_str),  # pragma: allowlist secret - env var name
    "base_url": (ENV_BASE_URL, env_str),
    "default_model": (ENV_DEFAULT_MODEL, env_str),
    "timeout_seconds": (ENV_TIMEOUT_SECONDS, env_float),
    "max_retries": (ENV_MAX_RETRIES, env_int),
    "app_url": (ENV_APP_URL, env_str),
    "app_title": (ENV_APP_TITLE, env_str),
}

_FILE_KEYS = frozenset(ENV_FIELD_MAP) | {"default_params"}


def _load_file_settings() -> Dict[str, Any]:
    path = os.getenv(ENV_CONFIG_FILE)
    if not path:
        return {}
    p = Path(path)
    if not p.is_file():
        return {}
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        return {}
    return {k: v for k, v in data.items() if k in _FILE_KEYS}


def _env_settings() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, (env_name, parser) in ENV_FIELD_MAP.items():
        val = parser(env_name)
        if val is not None:
            out[key] = val
    return out


def load_gateway_settings(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged plain settings.

    Merge order (later wins): defaults -> config file -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored.
    """
    load_dotenv_file(os.getenv("DOTENV_FILE", ".env"))
    settings: Dict[str, Any] = dict(DEFAULTS)
    settings |= _load_file_settings()
    settings |= _env_settings()
    if overrides:
        settings |= {k: v for k, v in overrides.items() if v is not None}
    return settings


def load_gateway_config(overrides: Optional[Dict[str, Any]] = None, **extras: Any) -> "GatewayConfig":
    """Build a ``GatewayConfig`` from merged settings.

    Parameters:
        overrides: Plain settings that win over file and environment.
        **extras: Non-serializable collaborators passed straight through
            (``logger``, ``rate_limiter``, ``transport``, ``sleep``).

    The returned config is not yet validated; ``OpenRouterGateway`` validates
    it (a missing API key raises a ``config`` ``GatewayError`` there).
    """
    from ..base.models import GatewayConfig

    settings = load_gateway_settings(overrides)
    return GatewayConfig(
        api_key=settings.get("api_key", ""),
        base_url=settings["base_url"],
        default_model=settings["default_model"],
        default_params=settings.get("default_params"),
        timeout_seconds=settings["timeout_seconds"],
        max_retries=settings["max_retries"],
        app_url=settings.get("app_url"),
        app_title=settings.get("app_title"),
        **extras,
    )


__all__ = ["DEFAULTS", "load_gateway_settings", "load_gateway_config"]
