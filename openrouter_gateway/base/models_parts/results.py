"""
Small result objects for validation and health checks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating model output against a response format.

    ``data`` carries the parsed JSON value on success (or the raw string when
    no format was supplied); ``error`` describes the first failed check.
    """

    valid: bool
    error: Optional[str] = None
    data: Any = None


@dataclass(frozen=True)
class HealthStatus:
    """Result of ``health_check``; never raised, always returned."""

    healthy: bool
    latency_ms: float
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"healthy": self.healthy, "latency_ms": self.latency_ms, "message": self.message}


__all__ = ["ValidationResult", "HealthStatus"]
