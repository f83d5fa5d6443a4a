"""
AWS JSON 1.0 protocol: JSON bodies dispatched through ``X-Amz-Target``.

Used by DynamoDB. Blobs travel base64-encoded and timestamps as epoch
seconds.
"""

from __future__ import annotations

import base64
import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar

from pydantic import ValidationError

from cloudwire.base.exceptions import UnparsableResponse
from cloudwire.base.request import Request
from cloudwire.base.response import ErrorInfo
from cloudwire.base.shape import LIST, MAP, STRUCTURE, Input, Shape, classify

_CONTENT_TYPE = "application/x-amz-json-1.0"


class JsonInput(Input):
    """Input of a JSON protocol operation."""

    target_prefix: ClassVar[str] = ""

    def request(self) -> Request:
        return Request(
            "POST",
            "/",
            headers={
                "Content-Type": _CONTENT_TYPE,
                "X-Amz-Target": f"{self.target_prefix}.{self.action}",
            },
            body=json.dumps(serialize(self)).encode(),
        )


# ── Serialization ─────────────────────────────────────────────────────
def serialize(shape: Shape) -> dict[str, Any]:
    """Convert *shape* into a JSON-ready dict keyed by wire names.

    Raises:
        InvalidArgument: If a required member is None.
    """
    payload: dict[str, Any] = {}
    for name, field, meta in shape.wire_fields():
        value = shape.required_value(name, field, meta)
        if value is not None:
            payload[field.alias] = _serialize_value(value, field.annotation)
    return payload


def _serialize_value(value: Any, annotation: Any) -> Any:
    kind, inner = classify(annotation)
    if kind == STRUCTURE:
        return serialize(value)
    if kind == LIST:
        return [_serialize_value(item, inner) for item in value]
    if kind == MAP:
        return {key: _serialize_value(item, inner) for key, item in value.items()}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bytes):
        return base64.b64encode(value).decode()
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    return value


# ── Deserialization ───────────────────────────────────────────────────
def load_json(content: bytes) -> dict[str, Any]:
    if not content:
        return {}
    try:
        data = json.loads(content)
    except ValueError as e:
        raise UnparsableResponse(f"Invalid JSON response body: {e}") from e
    if not isinstance(data, dict):
        raise UnparsableResponse("JSON response body is not an object")
    return data


def parse_result(content: bytes, shape: type[Shape]) -> Shape:
    """Build *shape* from a JSON response body."""
    data = load_json(content)
    try:
        return shape.model_validate(_from_json(data, shape))
    except ValidationError as e:
        raise UnparsableResponse(f"Unexpected {shape.__name__} payload: {e}") from e


def _from_json(value: Any, annotation: Any) -> Any:
    if value is None:
        return None
    kind, inner = classify(annotation)
    if kind == STRUCTURE:
        if not isinstance(value, dict):
            return value
        return {
            field.alias: _from_json(value[field.alias], field.annotation)
            for _, field, _ in inner.wire_fields()
            if field.alias in value
        }
    if kind == LIST and isinstance(value, list):
        return [_from_json(item, inner) for item in value]
    if kind == MAP and isinstance(value, dict):
        return {key: _from_json(item, inner) for key, item in value.items()}
    if inner is bytes and isinstance(value, str):
        return base64.b64decode(value)
    return value


def parse_error(content: bytes, headers: dict[str, str]) -> ErrorInfo:
    """Extract code and message from a JSON error body."""
    try:
        data = load_json(content)
    except UnparsableResponse:
        data = {}
    code = data.pop("__type", None) or headers.get("x-amzn-errortype", "")
    code = code.split("#")[-1].split(":")[0]
    message = data.pop("message", None) or data.pop("Message", None) or ""
    return ErrorInfo(code, message, headers.get("x-amzn-requestid"), data)
