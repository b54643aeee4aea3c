"""CLI action handlers.

Purpose
-------
Subcommand handlers for the gateway CLI, kept apart from the entrypoint so
they can be unit tested with an injected gateway factory. No top-level side
effects.

Exit Codes
----------
- ``0`` success
- ``1`` gateway failure (or invalid content for ``validate``)
- ``2`` configuration failure (missing API key, unreadable schema file)

Errors are printed as JSON to stderr; results as JSON (or plain text) to stdout.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ...base.errors import ErrorKind, GatewayError
from ...base.models import ChatMessage, ModelParams, ResponseFormat
from ...base.validation import validate_response
from ...openrouter import OpenRouterGateway

GatewayFactory = Callable[[Optional[Dict[str, Any]]], OpenRouterGateway]


def _print_error(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)


def load_response_format(path: str) -> ResponseFormat:
    """Read a response format from a JSON file.

    Accepts the same shapes as ``ResponseFormat.from_any``: the wire shape
    (``{"type": "json_schema", "json_schema": {...}}``) or a bare object schema.

    Raises
    ------
    OSError, ValueError
        When the file cannot be read, is not a JSON object, or holds an
        unsupported format.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("schema file must contain a JSON object")
    try:
        return ResponseFormat.from_any(data)  # type: ignore[return-value]
    except GatewayError as e:
        raise ValueError(e.message) from e


def build_gateway(overrides: Optional[Dict[str, Any]], factory: Optional[GatewayFactory] = None) -> Optional[OpenRouterGateway]:
    """Create the gateway, printing a JSON error and returning ``None`` on config failure."""
    make = factory or OpenRouterGateway.from_env
    try:
        return make(overrides)
    except GatewayError as e:
        if e.kind is not ErrorKind.CONFIG:
            raise
        _print_error({"error": e.message, "kind": e.kind.value, "hint": "check OPENROUTER_API_KEY and the other OPENROUTER_* settings"})
        return None


def _chat_messages(args: argparse.Namespace) -> List[ChatMessage]:
    messages: List[ChatMessage] = []
    if args.system:
        messages.append(ChatMessage(role="system", content=args.system))
    messages.append(ChatMessage(role="user", content=args.prompt))
    return messages


def handle_chat(args: argparse.Namespace, factory: Optional[GatewayFactory] = None) -> int:
    """Send one prompt and print the response."""
    fmt: Optional[ResponseFormat] = None
    if args.schema_file:
        try:
            fmt = load_response_format(args.schema_file)
        except (OSError, ValueError) as e:
            _print_error({"error": f"cannot read schema file: {e}"})
            return 2

    gateway = build_gateway({"default_model": args.model}, factory)
    if gateway is None:
        return 2

    params = ModelParams(max_tokens=args.max_tokens, temperature=args.temperature)
    try:
        response = asyncio.run(
            gateway.send(
                _chat_messages(args),
                params=params,
                response_format=fmt,
                validate_schema=fmt is not None,
            )
        )
    except GatewayError as e:
        _print_error({"error": e.to_dict()})
        return 1

    if args.json:
        print(json.dumps(response.to_dict(), ensure_ascii=False))
    else:
        print(response.content)
    return 0


def handle_health(args: argparse.Namespace, factory: Optional[GatewayFactory] = None) -> int:
    """Run ``health_check`` and print the status as JSON."""
    gateway = build_gateway(None, factory)
    if gateway is None:
        return 2
    status = asyncio.run(gateway.health_check())
    print(json.dumps(status.to_dict(), ensure_ascii=False))
    return 0 if status.healthy else 1


def handle_validate(args: argparse.Namespace) -> int:
    """Validate ``--text`` against the schema file; no network access."""
    try:
        fmt = load_response_format(args.schema_file)
    except (OSError, ValueError) as e:
        _print_error({"error": f"cannot read schema file: {e}"})
        return 2
    result = validate_response(args.text, fmt)
    print(json.dumps({"valid": result.valid, "error": result.error}, ensure_ascii=False))
    return 0 if result.valid else 1


__all__ = [
    "GatewayFactory",
    "load_response_format",
    "build_gateway",
    "handle_chat",
    "handle_health",
    "handle_validate",
]
