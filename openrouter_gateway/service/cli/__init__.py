"""Gateway smoke-test CLI (package entrypoint).

Wires argument parsing to the handlers in ``cli_actions``; performs no
gateway logic directly.

Usage::

    python -m openrouter_gateway.service.cli chat --prompt "Say hello"
    python -m openrouter_gateway.service.cli health
    python -m openrouter_gateway.service.cli validate --text '{"front": "Q", "back": "A"}' --schema-file card.json
"""

from __future__ import annotations

from typing import Optional

from ...base.logging import configure_logger
from .cli_actions import GatewayFactory, handle_chat, handle_health, handle_validate
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None, gateway_factory: Optional[GatewayFactory] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.
    gateway_factory: Optional[GatewayFactory]
        Replaces ``OpenRouterGateway.from_env`` (tests).

    Returns
    -------
    int
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    if args.log_level:
        configure_logger(level=args.log_level)
    if args.cmd == "chat":
        return handle_chat(args, gateway_factory)
    if args.cmd == "health":
        return handle_health(args, gateway_factory)
    return handle_validate(args)


__all__ = ["main"]
