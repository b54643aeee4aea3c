from __future__ import annotations

import json

import httpx
import pytest

from openrouter_gateway import GatewayConfig, NoOpLogger, OpenRouterGateway
from openrouter_gateway.service.cli import main
from openrouter_gateway.service.cli.cli_actions import load_response_format
from openrouter_gateway.service.cli.cli_parser import build_parser

from .helpers import RecordingHandler, RecordingSleep, completion_body, ok, status

CARD_SCHEMA = {
    "type": "object",
    "properties": {"front": {"type": "string"}, "back": {"type": "string"}},
    "required": ["front", "back"],
    "additionalProperties": False,
}


def _factory(handler: RecordingHandler):
    def _make(overrides):
        overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        return OpenRouterGateway(
            GatewayConfig(
                api_key="sk-or-cli",  # pragma: allowlist secret - test value
                transport=httpx.MockTransport(handler),
                sleep=RecordingSleep(),
                logger=NoOpLogger(),
                max_retries=0,
                **overrides,
            )
        )

    return _make


@pytest.fixture()
def schema_file(tmp_path):
    path = tmp_path / "card.json"
    path.write_text(json.dumps(CARD_SCHEMA), encoding="utf-8")
    return str(path)


def test_parser_requires_subcommand():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_chat_prints_content(capsys):
    handler = RecordingHandler(ok(completion_body("Paris")))
    code = main(["chat", "--prompt", "Capital of France?", "--system", "Be terse"], gateway_factory=_factory(handler))
    assert code == 0  # nosec B101
    assert capsys.readouterr().out.strip() == "Paris"  # nosec B101
    payload = json.loads(handler.requests[0].content)
    assert [m["role"] for m in payload["messages"]] == ["system", "user"]  # nosec B101


def test_chat_json_output_and_overrides(capsys):
    handler = RecordingHandler(ok(completion_body("ok", model="meta/llama-3")))
    code = main(
        ["chat", "--prompt", "hi", "--model", "meta/llama-3", "--max-tokens", "7", "--json"],
        gateway_factory=_factory(handler),
    )
    assert code == 0  # nosec B101
    out = json.loads(capsys.readouterr().out)
    assert out["content"] == "ok"  # nosec B101
    assert out["model"] == "meta/llama-3"  # nosec B101
    payload = json.loads(handler.requests[0].content)
    assert payload["model"] == "meta/llama-3"  # nosec B101
    assert payload["max_tokens"] == 7  # nosec B101


def test_chat_with_schema_enforces_format(capsys, schema_file):
    handler = RecordingHandler(ok(completion_body('{"front": "Q"}')))
    code = main(["chat", "--prompt", "card", "--schema-file", schema_file], gateway_factory=_factory(handler))
    assert code == 1  # nosec B101
    err = json.loads(capsys.readouterr().err)
    assert err["error"]["kind"] == "parse"  # nosec B101
    assert json.loads(handler.requests[0].content)["response_format"]["json_schema"]["schema"] == CARD_SCHEMA  # nosec B101


def test_chat_gateway_failure_exit_1(capsys):
    handler = RecordingHandler(status(401, "bad key"))
    code = main(["chat", "--prompt", "hi"], gateway_factory=_factory(handler))
    assert code == 1  # nosec B101
    err = json.loads(capsys.readouterr().err)
    assert err["error"]["kind"] == "auth"  # nosec B101
    assert err["error"]["http_status"] == 401  # nosec B101


def test_chat_missing_key_exit_2(capsys):
    code = main(["chat", "--prompt", "hi"])
    assert code == 2  # nosec B101
    err = json.loads(capsys.readouterr().err)
    assert err["kind"] == "config"  # nosec B101
    assert "OPENROUTER_API_KEY" in err["hint"]  # nosec B101


def test_chat_unreadable_schema_file_exit_2(capsys, tmp_path):
    code = main(["chat", "--prompt", "hi", "--schema-file", str(tmp_path / "nope.json")])
    assert code == 2  # nosec B101
    assert "cannot read schema file" in json.loads(capsys.readouterr().err)["error"]  # nosec B101


def test_health_success_and_failure(capsys):
    assert main(["health"], gateway_factory=_factory(RecordingHandler(ok()))) == 0  # nosec B101
    assert json.loads(capsys.readouterr().out)["healthy"] is True  # nosec B101

    assert main(["health"], gateway_factory=_factory(RecordingHandler(status(500, "down")))) == 1  # nosec B101
    out = json.loads(capsys.readouterr().out)
    assert out["healthy"] is False  # nosec B101
    assert out["message"] == "HTTP 500: down"  # nosec B101


def test_health_missing_key_exit_2(capsys):
    assert main(["health"]) == 2  # nosec B101


def test_validate_is_offline(capsys, schema_file):
    assert main(["validate", "--text", '{"front": "Q", "back": "A"}', "--schema-file", schema_file]) == 0  # nosec B101
    assert json.loads(capsys.readouterr().out) == {"valid": True, "error": None}  # nosec B101

    assert main(["validate", "--text", '{"front": "Q", "x": 1}', "--schema-file", schema_file]) == 1  # nosec B101
    assert json.loads(capsys.readouterr().out)["error"] == "Missing required property: back"  # nosec B101


def test_load_response_format_accepts_wire_shape(tmp_path):
    path = tmp_path / "wire.json"
    path.write_text(
        json.dumps({"type": "json_schema", "json_schema": {"name": "card", "strict": False, "schema": CARD_SCHEMA}}),
        encoding="utf-8",
    )
    fmt = load_response_format(str(path))
    assert fmt.name == "card"  # nosec B101
    assert fmt.strict is False  # nosec B101
    assert fmt.schema == CARD_SCHEMA  # nosec B101


def test_load_response_format_rejects_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_response_format(str(path))


def test_unsupported_format_file_exit_2(capsys, tmp_path):
    path = tmp_path / "fmt.json"
    path.write_text(json.dumps({"type": "json_object"}), encoding="utf-8")
    assert main(["validate", "--text", "{}", "--schema-file", str(path)]) == 2  # nosec B101
    assert "Unsupported response_format" in json.loads(capsys.readouterr().err)["error"]  # nosec B101
