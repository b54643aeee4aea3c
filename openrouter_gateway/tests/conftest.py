"""Pytest configuration for the gateway test suite.

Fixtures isolate every test from the caller's environment (API keys, config
files, ``.env``) and provide recording doubles for the client's injectable
collaborators: the backoff sleep and the ``GatewayLogger``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator

import httpx
import pytest

from openrouter_gateway.base.logging import configure_logger
from openrouter_gateway.config import ENV_FIELD_MAP
from openrouter_gateway.config.defaults import ENV_CONFIG_FILE, ENV_LOG_LEVEL

from .helpers import RecordingLogger, RecordingSleep


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear gateway env vars and point the ``.env`` loader at a missing file."""
    for env_name, _parser in ENV_FIELD_MAP.values():
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.delenv(ENV_CONFIG_FILE, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    yield
    configure_logger(level="INFO")


@pytest.fixture()
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture()
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture()
def make_gateway(recording_sleep: RecordingSleep, recording_logger: RecordingLogger):
    """Factory building an ``OpenRouterGateway`` wired to a ``MockTransport``."""
    from openrouter_gateway import GatewayConfig, OpenRouterGateway

    def _make(handler: Callable[[httpx.Request], httpx.Response], **overrides: Any) -> OpenRouterGateway:
        fields: Dict[str, Any] = {
            "api_key": "sk-or-test",  # pragma: allowlist secret - test value
            "transport": httpx.MockTransport(handler),
            "sleep": recording_sleep,
            "logger": recording_logger,
        }
        fields.update(overrides)
        return OpenRouterGateway(GatewayConfig(**fields))

    return _make
