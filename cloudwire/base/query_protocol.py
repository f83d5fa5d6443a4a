"""
AWS query protocol: form-encoded requests, XML responses.

Used by CloudFormation and SQS. Requests are ``POST /`` with an
``Action=...&Version=...`` body; responses wrap the payload in
``<{Action}Response><{Action}Result>...``.
"""

from __future__ import annotations

import base64
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar
from urllib.parse import urlencode
from xml.etree import ElementTree

from pydantic import ValidationError

from cloudwire.base.exceptions import UnparsableResponse
from cloudwire.base.request import Request
from cloudwire.base.response import ErrorInfo
from cloudwire.base.shape import LIST, MAP, STRUCTURE, Input, Shape, classify

_CONTENT_TYPE = "application/x-www-form-urlencoded"


class QueryInput(Input):
    """Input of a query protocol operation."""

    version: ClassVar[str] = ""

    def request(self) -> Request:
        params = {"Action": self.action, "Version": self.version}
        params.update(serialize(self))
        return Request(
            "POST",
            "/",
            headers={"content-type": _CONTENT_TYPE},
            body=urlencode(params).encode(),
        )


# ── Serialization ─────────────────────────────────────────────────────
def serialize(shape: Shape, prefix: str = "") -> dict[str, str]:
    """Flatten *shape* into query parameters.

    Raises:
        InvalidArgument: If a required member is None.
    """
    params: dict[str, str] = {}
    for name, field, meta in shape.wire_fields():
        value = shape.required_value(name, field, meta)
        if value is None:
            continue
        key = prefix + meta.get("location", field.alias)
        _serialize_member(params, key, value, field.annotation, meta)
    return params


def _serialize_member(
    params: dict[str, str], key: str, value: Any, annotation: Any, meta: dict[str, Any]
) -> None:
    kind, inner = classify(annotation)
    if kind == STRUCTURE:
        params.update(serialize(value, key + "."))
    elif kind == LIST:
        if not value:
            params[key] = ""
            return
        base = key if meta.get("flattened") else f"{key}.{meta.get('item', 'member')}"
        for index, item in enumerate(value, 1):
            _serialize_member(params, f"{base}.{index}", item, inner, {})
    elif kind == MAP:
        base = key if meta.get("flattened") else f"{key}.entry"
        for index, (map_key, item) in enumerate(value.items(), 1):
            params[f"{base}.{index}.{meta.get('key', 'key')}"] = map_key
            _serialize_member(
                params, f"{base}.{index}.{meta.get('value', 'value')}", item, inner, {}
            )
    else:
        params[key] = _scalar(value)


def _scalar(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(value, bytes):
        return base64.b64encode(value).decode()
    return str(value)


# ── Deserialization ───────────────────────────────────────────────────
def load_xml(content: bytes) -> ElementTree.Element:
    """Parse *content* and strip XML namespaces from every tag."""
    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError as e:
        raise UnparsableResponse(f"Invalid XML response body: {e}") from e
    for element in root.iter():
        if isinstance(element.tag, str) and "}" in element.tag:
            element.tag = element.tag.split("}", 1)[1]
    return root


def parse_result(content: bytes, wrapper: str, shape: type[Shape]) -> Shape:
    """Build *shape* from the ``<wrapper>`` element of an XML response."""
    root = load_xml(content)
    node = root if root.tag == wrapper else root.find(wrapper)
    if node is None:
        return shape()
    try:
        return shape.model_validate(_element_to_dict(node, shape))
    except ValidationError as e:
        raise UnparsableResponse(f"Unexpected {wrapper} payload: {e}") from e


def _element_to_dict(node: ElementTree.Element, shape: type[Shape]) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for _, field, meta in shape.wire_fields():
        location = meta.get("location", field.alias)
        kind, inner = classify(field.annotation)
        if meta.get("flattened"):
            children = node.findall(location)
            if not children:
                continue
            if kind == MAP:
                data[field.alias] = {
                    child.findtext(meta["key"]): _convert(child.find(meta["value"]), inner)
                    for child in children
                }
            else:
                data[field.alias] = [_convert(child, inner) for child in children]
            continue
        child = node.find(location)
        if child is not None:
            data[field.alias] = _convert(child, field.annotation, meta)
    return data


def _convert(
    element: ElementTree.Element | None, annotation: Any, meta: dict[str, Any] | None = None
) -> Any:
    if element is None:
        return None
    meta = meta or {}
    kind, inner = classify(annotation)
    if kind == STRUCTURE:
        return _element_to_dict(element, inner)
    if kind == LIST:
        return [_convert(item, inner) for item in element.findall(meta.get("item", "member"))]
    if kind == MAP:
        return {
            entry.findtext(meta.get("key", "key")): _convert(
                entry.find(meta.get("value", "value")), inner
            )
            for entry in element.findall("entry")
        }
    if element.text is None:
        return None
    if inner is bytes:
        return base64.b64decode(element.text)
    return element.text


def parse_error(content: bytes) -> ErrorInfo:
    """Extract code, message and request id from an XML error body."""
    try:
        root = load_xml(content)
    except UnparsableResponse:
        return ErrorInfo("", content.decode("utf-8", errors="replace")[:200])
    error = root if root.tag == "Error" else root.find(".//Error")
    request_id = root.findtext(".//RequestId")
    if error is None:
        return ErrorInfo("", "", request_id)
    details = {
        child.tag: child.text for child in error if child.tag not in ("Code", "Message")
    }
    return ErrorInfo(
        error.findtext("Code") or "",
        error.findtext("Message") or "",
        request_id,
        details,
    )
