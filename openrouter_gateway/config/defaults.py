"""openrouter_gateway.config.defaults
==================================

Central place for small, stable default values used by the gateway client
and its CLI. These can be overridden through ``GatewayConfig`` or the
caller-side loader in ``openrouter_gateway.config``.

This module intentionally avoids importing from other packages to prevent
circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Endpoint ----
OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
OPENROUTER_DEFAULT_MODEL = "openai/gpt-4o-mini"
CHAT_COMPLETIONS_PATH = "/chat/completions"

# ---- Timeouts (seconds) ----
DEFAULT_TIMEOUT_SECONDS = 30.0
MIN_TIMEOUT_SECONDS = 1.0
MAX_TIMEOUT_SECONDS = 120.0

# ---- Retries ----
DEFAULT_MAX_RETRIES = 3
MIN_MAX_RETRIES = 0
MAX_MAX_RETRIES = 5
# Backoff: min(BASE * 2**attempt, CAP) milliseconds
BACKOFF_BASE_MS = 1000
BACKOFF_CAP_MS = 10000

# ---- Model parameters ----
# Baseline applied beneath service-level defaults and call-level values.
DEFAULT_MODEL_PARAMS = {
    "temperature": 0.7,
    "top_p": 0.9,
    "frequency_penalty": 0.0,
    "presence_penalty": 0.0,
    "max_tokens": 1000,
}
# Inclusive (low, high) bounds used for clamping.
PARAM_BOUNDS = {
    "temperature": (0.0, 2.0),
    "top_p": (0.0, 1.0),
    "frequency_penalty": (-2.0, 2.0),
    "presence_penalty": (-2.0, 2.0),
    "max_tokens": (1, 4096),
}

# ---- Health check ----
HEALTH_CHECK_PROMPT = "Hello"
HEALTH_CHECK_MAX_TOKENS = 5
HEALTH_CHECK_REQUEST_ID = "health-check"

# ---- Environment variable names (caller-side loader only) ----
ENV_API_KEY = "OPENROUTER_API_KEY"  # pragma: allowlist secret - env var name, not a secret
ENV_BASE_URL = "OPENROUTER_BASE_URL"
ENV_DEFAULT_MODEL = "OPENROUTER_DEFAULT_MODEL"
ENV_TIMEOUT_SECONDS = "OPENROUTER_TIMEOUT_SECONDS"
ENV_MAX_RETRIES = "OPENROUTER_MAX_RETRIES"
ENV_APP_URL = "OPENROUTER_APP_URL"
ENV_APP_TITLE = "OPENROUTER_APP_TITLE"
ENV_CONFIG_FILE = "GATEWAY_CONFIG_FILE"
ENV_LOG_LEVEL = "GATEWAY_LOG_LEVEL"


__all__ = [
    "OPENROUTER_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_MODEL",
    "CHAT_COMPLETIONS_PATH",
    "DEFAULT_TIMEOUT_SECONDS",
    "MIN_TIMEOUT_SECONDS",
    "MAX_TIMEOUT_SECONDS",
    "DEFAULT_MAX_RETRIES",
    "MIN_MAX_RETRIES",
    "MAX_MAX_RETRIES",
    "BACKOFF_BASE_MS",
    "BACKOFF_CAP_MS",
    "DEFAULT_MODEL_PARAMS",
    "PARAM_BOUNDS",
    "HEALTH_CHECK_PROMPT",
    "HEALTH_CHECK_MAX_TOKENS",
    "HEALTH_CHECK_REQUEST_ID",
    "ENV_API_KEY",
    "ENV_BASE_URL",
    "ENV_DEFAULT_MODEL",
    "ENV_TIMEOUT_SECONDS",
    "ENV_MAX_RETRIES",
    "ENV_APP_URL",
    "ENV_APP_TITLE",
    "ENV_CONFIG_FILE",
    "ENV_LOG_LEVEL",
]
