"""Handle on an HTTP call running on the client's thread pool."""

from __future__ import annotations

from concurrent.futures import Future, TimeoutError as FutureTimeout
from dataclasses import dataclass, field
from typing import Any, NamedTuple
from xml.etree import ElementTree


class ErrorInfo(NamedTuple):
    """Error fields extracted from a non-2xx body by a protocol parser."""

    code: str
    message: str
    request_id: str | None = None
    details: dict[str, Any] | None = None


@dataclass
class HttpResponse:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    content: bytes = b""

    @property
    def request_id(self) -> str | None:
        return self.headers.get("x-amzn-requestid") or self.headers.get("x-amz-request-id")


class Response:
    """Lazy response of one operation call.

    The HTTP exchange (signing, sending, retrying, error mapping) runs on the
    client's pool; this object only waits for it. Errors raised by the
    exchange surface on the first call that needs the response.
    """

    def __init__(self, future: Future, operation: str) -> None:
        self._future = future
        self.operation = operation
        self._json: dict[str, Any] | None = None
        self._xml: ElementTree.Element | None = None

    def resolve(self, timeout: float | None = None) -> bool:
        """Wait for the call.

        Returns:
            True once a 2xx response arrived, False if *timeout* elapsed first.

        Raises:
            HttpException: The service answered with an error.
            NetworkException: The call could not be completed.
        """
        try:
            self._future.result(timeout)
        except FutureTimeout:
            return False
        return True

    def cancel(self) -> bool:
        """Abandon the call if it has not started yet."""
        return self._future.cancel()

    @property
    def done(self) -> bool:
        return self._future.done()

    @property
    def http_response(self) -> HttpResponse:
        return self._future.result()

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> dict[str, str]:
        return self.http_response.headers

    @property
    def content(self) -> bytes:
        return self.http_response.content

    def info(self) -> dict[str, Any]:
        response = self.http_response
        return {
            "status": response.status_code,
            "headers": response.headers,
            "request_id": response.request_id,
        }

    def to_json(self) -> dict[str, Any]:
        if self._json is None:
            from cloudwire.base.json_protocol import load_json

            self._json = load_json(self.content)
        return self._json

    def to_xml(self) -> ElementTree.Element:
        if self._xml is None:
            from cloudwire.base.query_protocol import load_xml

            self._xml = load_xml(self.content)
        return self._xml
