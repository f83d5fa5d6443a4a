"""
Shared client machinery.

:class:`AbstractApi` resolves credentials and region through boto3, builds
the endpoint, signs every request with SigV4 (botocore) and sends it on a
thread pool, so each operation returns a lazy result immediately. Non-2xx
responses are mapped onto the exception hierarchy by service error code.
"""

from __future__ import annotations

from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any, ClassVar, TypeVar

import boto3
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.exceptions import ConnectionError as BotocoreConnectionError
from botocore.exceptions import HTTPClientError
from botocore.httpsession import URLLib3Session

from cloudwire.base import json_protocol, query_protocol
from cloudwire.base.async_support import AsyncMixin
from cloudwire.base.config import AWSConfig, validate_config
from cloudwire.base.exceptions import (
    ClientClosed,
    ClientException,
    HttpException,
    MissingCredentials,
    NetworkException,
    ServerException,
    ThrottlingError,
)
from cloudwire.base.logger import cw_logger
from cloudwire.base.request import Request
from cloudwire.base.response import ErrorInfo, HttpResponse, Response
from cloudwire.base.retry import retry
from cloudwire.base.shape import Input

USER_AGENT = "cloudwire/0.1.0"

# Throttling codes shared by every service.
_COMMON_ERROR_MAP: dict[str, type[HttpException]] = {
    "Throttling": ThrottlingError,
    "ThrottlingException": ThrottlingError,
    "ThrottledException": ThrottlingError,
    "RequestThrottled": ThrottlingError,
    "RequestThrottledException": ThrottlingError,
    "TooManyRequestsException": ThrottlingError,
}

R = TypeVar("R")


class AbstractApi(AsyncMixin):
    """Base class of every service client.

    Attributes:
        config: Validated client configuration.
        credentials: botocore credentials resolved by boto3, or None.
        region: Default region of the requests.
    """

    service: ClassVar[str] = ""
    endpoint_prefix: ClassVar[str] = ""
    signing_name: ClassVar[str] = ""
    _ERROR_MAP: ClassVar[dict[str, type[HttpException]]] = {}

    def __init__(
        self,
        config: AWSConfig | dict | None = None,
        *,
        http_session: Any = None,
        executor: Executor | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Client configuration (see :class:`AWSConfig`). Missing
                credentials and region fall back to boto3's resolution chain.
            http_session: Object with a botocore-style ``send(prepared_request)``;
                defaults to a botocore ``URLLib3Session``.
            executor: Pool running the HTTP calls; defaults to a thread pool
                sized by ``config.max_concurrency``.
        """
        self.config = validate_config(config)
        session = boto3.Session(
            aws_access_key_id=self.config.aws_access_key_id,
            aws_secret_access_key=self.config.aws_secret_access_key,
            aws_session_token=self.config.aws_session_token,
            region_name=self.config.region_name,
            profile_name=self.config.profile_name,
        )
        self.credentials = session.get_credentials()
        self.region = self.config.region_name or session.region_name or "us-east-1"
        self._http = http_session or URLLib3Session(
            timeout=self.config.timeout,
            max_pool_connections=self.config.max_concurrency,
        )
        self.closed = False
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=self.config.max_concurrency,
            thread_name_prefix=f"cloudwire-{self.service}",
        )

    def close(self) -> None:
        """Release the thread pool (pending calls still complete)."""
        self.closed = True
        if self._owns_executor:
            self._executor.shutdown(wait=False)

    def __enter__(self) -> AbstractApi:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def endpoint_for(self, region: str) -> str:
        if self.config.endpoint:
            return self.config.endpoint
        suffix = "amazonaws.com.cn" if region.startswith("cn-") else "amazonaws.com"
        return f"https://{self.endpoint_prefix}.{region}.{suffix}"

    # --- Dispatch ---

    def _call(self, input: Input, result_class: type[R]) -> R:
        """Send *input* and wrap the pending response in *result_class*."""
        response = self._get_response(input.request(), input.action, input.region)
        return result_class(response, self, input)  # type: ignore[call-arg]

    def _get_response(self, request: Request, operation: str, region: str | None = None) -> Response:
        if self.closed:
            raise ClientClosed(f"{type(self).__name__} is closed; create a new client")
        future = self._executor.submit(self._send, request, operation, region or self.region)
        return Response(future, operation)

    def _send(self, request: Request, operation: str, region: str) -> HttpResponse:
        send = retry(
            max_attempts=self.config.max_attempts,
            base_delay=self.config.retry_base_delay,
        )(self._send_once)
        return send(request, operation, region)

    def _send_once(self, request: Request, operation: str, region: str) -> HttpResponse:
        aws_request = AWSRequest(
            method=request.method,
            url=request.url(self.endpoint_for(region)),
            data=request.body,
            headers={**request.headers, "User-Agent": USER_AGENT},
        )
        self._sign(aws_request, region)
        cw_logger.debug(f"Sending {operation}", service=self.service, operation=operation)
        try:
            raw = self._http.send(aws_request.prepare())
        except (HTTPClientError, BotocoreConnectionError) as e:
            raise NetworkException(f'Could not send "{operation}" to {aws_request.url}: {e}') from e

        response = HttpResponse(
            status_code=raw.status_code,
            headers={key.lower(): value for key, value in raw.headers.items()},
            content=raw.content or b"",
        )
        if not 200 <= response.status_code < 300:
            self._raise_for_status(response, operation)
        return response

    def _sign(self, aws_request: AWSRequest, region: str) -> None:
        if self.credentials is None:
            raise MissingCredentials("Unable to locate credentials to sign the request")
        SigV4Auth(
            self.credentials.get_frozen_credentials(),
            self.signing_name or self.endpoint_prefix,
            region,
        ).add_auth(aws_request)

    # --- Errors ---

    def _parse_error(self, response: HttpResponse) -> ErrorInfo:
        raise NotImplementedError

    def _raise_for_status(self, response: HttpResponse, operation: str) -> None:
        error = self._parse_error(response)
        exc_class = (
            self._ERROR_MAP.get(error.code)
            or _COMMON_ERROR_MAP.get(error.code)
            or (ServerException if response.status_code >= 500 else ClientException)
        )
        request_id = response.request_id or error.request_id
        cw_logger.warning(
            f"{operation} failed: {error.code or 'HTTP error'}",
            service=self.service,
            operation=operation,
            request_id=request_id,
            status=response.status_code,
        )
        raise exc_class(
            f'HTTP {response.status_code} returned for "{operation}". '
            f"Code: {error.code or 'n/a'} Message: {error.message or 'n/a'}",
            status_code=response.status_code,
            code=error.code,
            aws_message=error.message,
            request_id=request_id,
            details=error.details,
        )


class QueryApi(AbstractApi):
    """Client of a query protocol (form + XML) service."""

    def _parse_error(self, response: HttpResponse) -> ErrorInfo:
        return query_protocol.parse_error(response.content)


class JsonApi(AbstractApi):
    """Client of a JSON 1.0 protocol service."""

    def _parse_error(self, response: HttpResponse) -> ErrorInfo:
        return json_protocol.parse_error(response.content, response.headers)
