"""Shared fixtures: a fake HTTP session recording the signed requests."""

import json
import threading
from types import SimpleNamespace
from urllib.parse import parse_qsl

import pytest


class FakeHttpSession:
    """Stands in for botocore's URLLib3Session.

    Canned responses are returned in order; every prepared request is kept
    in ``requests``.
    """

    def __init__(self):
        self.requests = []
        self._responses = []
        self._lock = threading.Lock()

    def add_response(self, body=b"", status=200, headers=None):
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode()
        elif isinstance(body, str):
            body = body.encode()
        self._responses.append(
            SimpleNamespace(
                status_code=status,
                headers=headers or {"x-amzn-RequestId": "req-1"},
                content=body,
            )
        )

    def add_error(self, exc):
        self._responses.append(exc)

    def send(self, prepared):
        with self._lock:
            self.requests.append(prepared)
            if not self._responses:
                raise AssertionError(f"unexpected request to {prepared.url}")
            response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def form(prepared) -> dict:
    """Decode a query protocol request body."""
    body = prepared.body
    if isinstance(body, bytes):
        body = body.decode()
    return dict(parse_qsl(body, keep_blank_values=True))


def json_body(prepared) -> dict:
    body = prepared.body
    if isinstance(body, bytes):
        body = body.decode()
    return json.loads(body)


CONFIG = {
    "aws_access_key_id": "AKIDEXAMPLE",
    "aws_secret_access_key": "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY",
    "region_name": "us-east-1",
    "max_attempts": 1,
    "retry_base_delay": 0,
}


@pytest.fixture(autouse=True)
def _clean_aws_env(monkeypatch):
    for var in (
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "AWS_SESSION_TOKEN",
        "AWS_PROFILE",
        "AWS_REGION",
        "AWS_DEFAULT_REGION",
        "AWS_ENDPOINT_URL",
        "AWS_MAX_ATTEMPTS",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def http():
    return FakeHttpSession()
