"""
Structured output descriptor (``response_format``).

Mirrors the OpenRouter/OpenAI ``json_schema`` response format. The client
forwards it verbatim as a hint and can re-validate returned content against
``schema`` locally.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from ..errors import ErrorKind, GatewayError

DEFAULT_FORMAT_NAME = "response"


@dataclass(frozen=True)
class ResponseFormat:
    """Named JSON object schema the model output must conform to.

    Attributes:
        name: Schema name sent as ``json_schema.name``.
        schema: JSON schema description. Only ``type``, ``properties``,
            ``required`` and ``additionalProperties`` are checked locally.
        strict: Forwarded as ``json_schema.strict``.
    """

    name: str
    schema: Dict[str, Any] = field(default_factory=dict)
    strict: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "json_schema",
            "json_schema": {
                "name": self.name,
                "strict": self.strict,
                "schema": self.schema,
            },
        }

    @classmethod
    def from_any(
        cls, value: Union["ResponseFormat", Mapping[str, Any], None]
    ) -> Optional["ResponseFormat"]:
        """Accept a ``ResponseFormat``, its wire-shaped mapping or a bare object schema.

        Recognised mappings:
            - ``{"type": "json_schema", "json_schema": {"name", "strict", "schema"}}``
            - a bare schema whose top-level ``type`` is ``"object"``
              (wrapped under the name ``"response"``)

        Raises:
            GatewayError: ``validation`` kind for any other shape.
        """
        if value is None or isinstance(value, ResponseFormat):
            return value
        if not isinstance(value, Mapping):
            raise _unsupported(value)

        if value.get("type") == "json_schema":
            spec = value.get("json_schema")
            if not isinstance(spec, Mapping) or not isinstance(spec.get("schema"), Mapping):
                raise _unsupported(value)
            return cls(
                name=str(spec.get("name", DEFAULT_FORMAT_NAME)),
                schema=dict(spec["schema"]),
                strict=bool(spec.get("strict", True)),
            )
        if value.get("type") == "object":
            return cls(name=DEFAULT_FORMAT_NAME, schema=dict(value))
        raise _unsupported(value)


def _unsupported(value: Any) -> GatewayError:
    return GatewayError(
        message=f"Unsupported response_format: {value!r}; expected a json_schema format or an object schema",
        kind=ErrorKind.VALIDATION,
        retryable=False,
    )


__all__ = ["ResponseFormat", "DEFAULT_FORMAT_NAME"]
