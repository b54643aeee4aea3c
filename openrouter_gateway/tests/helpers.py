"""Shared test doubles for the gateway suite.

``RecordingSleep`` and ``RecordingLogger`` stand in for the client's
injectable collaborators; ``RecordingHandler`` scripts an
``httpx.MockTransport``. ``ok``/``status``/``raises`` build script steps.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import httpx


class RecordingSleep:
    """Async sleep double that records requested delays (seconds) and returns at once."""

    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)

    @property
    def delays_ms(self) -> List[int]:
        return [round(d * 1000) for d in self.delays]


class RecordingLogger:
    """``GatewayLogger`` double capturing ``(level, message, meta)`` tuples."""

    def __init__(self) -> None:
        self.entries: List[Tuple[str, str, Dict[str, Any]]] = []

    def info(self, message: str, meta: Optional[Mapping[str, Any]] = None) -> None:
        self.entries.append(("info", message, dict(meta or {})))

    def warn(self, message: str, meta: Optional[Mapping[str, Any]] = None) -> None:
        self.entries.append(("warn", message, dict(meta or {})))

    def error(self, message: str, meta: Optional[Mapping[str, Any]] = None) -> None:
        self.entries.append(("error", message, dict(meta or {})))

    def messages(self, level: Optional[str] = None) -> List[str]:
        return [m for lvl, m, _ in self.entries if level is None or lvl == level]


class RecordingHandler:
    """``httpx.MockTransport`` handler replaying scripted steps.

    Each step is a callable taking the request and returning an
    ``httpx.Response`` (or raising). The last step repeats once the script
    is exhausted; every request is recorded.
    """

    def __init__(self, *script: Callable[[httpx.Request], httpx.Response]) -> None:
        self.script = list(script)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.script[min(len(self.requests), len(self.script)) - 1]
        return step(request)

    @property
    def calls(self) -> int:
        return len(self.requests)


def completion_body(
    content: Optional[str] = "Hello there",
    *,
    model: str = "openai/gpt-4o-mini",
    usage: Optional[Dict[str, int]] = None,
    finish_reason: str = "stop",
) -> Dict[str, Any]:
    """Build a minimal successful chat/completions JSON body."""
    body: Dict[str, Any] = {
        "id": "gen-1",
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": finish_reason,
            }
        ],
    }
    if usage is not None:
        body["usage"] = usage
    return body


def ok(body: Optional[Dict[str, Any]] = None) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(200, json=body if body is not None else completion_body())


def status(code: int, text: str = "error") -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(code, text=text)


def raises(exc_type: type) -> Callable[[httpx.Request], httpx.Response]:
    def _step(request: httpx.Request) -> httpx.Response:
        raise exc_type("simulated", request=request)

    return _step

