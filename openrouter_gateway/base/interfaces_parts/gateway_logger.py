"""GatewayLogger Protocol (single-class module).

Structural contract for the logger collaborator injected into the client.
Any object with these three methods works, including the no-op adapter used
in tests.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class GatewayLogger(Protocol):
    """Three-level structured logger accepted by ``OpenRouterGateway``."""

    def info(self, message: str, meta: Optional[Mapping[str, Any]] = None) -> None: ...

    def warn(self, message: str, meta: Optional[Mapping[str, Any]] = None) -> None: ...

    def error(self, message: str, meta: Optional[Mapping[str, Any]] = None) -> None: ...
