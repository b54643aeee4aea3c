"""Shallow structural validation of model output against a response format.

This is deliberately not a JSON-Schema validator. It answers one question:
did the model ignore the structured-output instructions? Checks performed:

1. The raw text parses as JSON.
2. When the schema's ``type`` is ``"object"``, the value is a JSON object.
3. Every key in ``required`` is present.
4. When ``additionalProperties`` is ``False`` and ``properties`` is declared,
   no key outside ``properties`` appears.

Nested schemas and per-property types are not inspected.
"""
from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Union

from .models import ResponseFormat, ValidationResult

FormatLike = Union[ResponseFormat, Mapping[str, Any], None]


def validate_against_schema(data: Any, schema: Mapping[str, Any]) -> ValidationResult:
    """Run the top-level checks of ``schema`` against parsed ``data``."""
    if schema.get("type") == "object":
        if not isinstance(data, dict):
            return ValidationResult(valid=False, error="Data must be an object")

        for prop in schema.get("required") or ():
            if prop not in data:
                return ValidationResult(valid=False, error=f"Missing required property: {prop}")

        properties = schema.get("properties")
        if schema.get("additionalProperties") is False and properties:
            for prop in data:
                if prop not in properties:
                    return ValidationResult(valid=False, error=f"Additional property not allowed: {prop}")

    return ValidationResult(valid=True, data=data)


def validate_response(raw_text: Any, response_format: FormatLike = None) -> ValidationResult:
    """Validate raw model output, optionally against ``response_format``.

    Parameters:
        raw_text: Content returned by the model.
        response_format: ``ResponseFormat``, its wire-shaped mapping or a bare
            object schema.

    Returns:
        ``ValidationResult``; ``data`` holds the parsed JSON value on success,
        or the raw string when no format was supplied.

    Raises:
        GatewayError: ``validation`` kind when ``response_format`` is neither a
            json_schema format nor an object schema.
    """
    if not isinstance(raw_text, str):
        return ValidationResult(valid=False, error="Response must be a string")

    fmt: Optional[ResponseFormat] = ResponseFormat.from_any(response_format)
    if fmt is None:
        return ValidationResult(valid=True, data=raw_text)

    try:
        parsed = json.loads(raw_text)
    except json.JSONDecodeError as e:
        return ValidationResult(valid=False, error=f"Invalid JSON: {e}")

    return validate_against_schema(parsed, fmt.schema)


__all__ = ["validate_against_schema", "validate_response"]
