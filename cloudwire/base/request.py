"""Wire request built by an input, before endpoint resolution and signing."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlencode


@dataclass
class Request:
    method: str
    uri: str
    query: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def url(self, endpoint: str) -> str:
        """Absolute URL of the request against *endpoint*."""
        url = endpoint.rstrip("/") + self.uri
        if self.query:
            url += "?" + urlencode(self.query)
        return url
