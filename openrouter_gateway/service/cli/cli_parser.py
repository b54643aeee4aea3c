"""CLI parser construction for gateway-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions`` to keep files small and testable.
"""

from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``chat``, ``health`` and ``validate`` subcommands. No I/O
        or network calls occur here.
    """
    p = argparse.ArgumentParser(prog="gateway-cli", description="OpenRouter gateway smoke-test CLI")
    p.add_argument("--log-level", default=None, help="Override GATEWAY_LOG_LEVEL for this run")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_chat = sub.add_parser("chat", help="Send one prompt and print the response")
    p_chat.add_argument("--prompt", required=True)
    p_chat.add_argument("--system", default=None, help="Optional system message")
    p_chat.add_argument("--model", default=None)
    p_chat.add_argument("--max-tokens", type=int, default=None)
    p_chat.add_argument("--temperature", type=float, default=None)
    p_chat.add_argument("--schema-file", default=None, help="JSON response_format to request and enforce")
    p_chat.add_argument("--json", action="store_true", help="Print the full normalized response as JSON")

    sub.add_parser("health", help="Run a minimal request and report latency")

    p_val = sub.add_parser("validate", help="Validate a JSON text against a response_format (offline)")
    p_val.add_argument("--text", required=True)
    p_val.add_argument("--schema-file", required=True)

    return p


__all__ = ["build_parser"]
