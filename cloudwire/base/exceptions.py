"""
Cloudwire exception hierarchy.

Local failures (missing required parameter, unreadable payload) inherit
directly from :class:`CloudwireError`. Errors returned by a service are
:class:`HttpException` subclasses, with service-specific sub-exceptions
for the error codes callers commonly branch on.
"""

from __future__ import annotations

from typing import Any


# ── Base ──────────────────────────────────────────────────────────────
class CloudwireError(Exception):
    """Root exception for all Cloudwire errors."""


class InvalidArgument(CloudwireError, ValueError):
    """An input could not be serialized (e.g. a required field is None)."""


class ClientClosed(CloudwireError):
    """An operation was called on a client after close()."""


class MissingCredentials(CloudwireError):
    """No credentials could be resolved to sign the request."""


class UnparsableResponse(CloudwireError):
    """The response body does not match the expected wire format."""


class NetworkException(CloudwireError):
    """The HTTP call failed before a response was received."""


class WaiterFailure(CloudwireError):
    """A waiter reached a terminal failure state."""


# ── HTTP / service errors ─────────────────────────────────────────────
class HttpException(CloudwireError):
    """The service answered with a non-2xx status.

    Attributes:
        status_code: HTTP status of the response.
        code: Service error code (e.g. ``ResourceNotFoundException``).
        aws_message: Error message returned by the service.
        request_id: Request id assigned by the service, when known.
        details: Remaining fields of the error payload.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        code: str = "",
        aws_message: str = "",
        request_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.aws_message = aws_message
        self.request_id = request_id
        self.details = details or {}


class ClientException(HttpException):
    """4xx response."""


class ServerException(HttpException):
    """5xx response."""


class ThrottlingError(ClientException):
    """The request was throttled and may succeed when retried."""


# ── CloudFormation ────────────────────────────────────────────────────
class StackAlreadyExistsError(ClientException):
    """A stack with the same name already exists."""


class InsufficientCapabilitiesError(ClientException):
    """The template requires capabilities that were not acknowledged."""


class TokenAlreadyExistsError(ClientException):
    """A request with the same client request token is already in flight."""


class LimitExceededError(ClientException):
    """An account or service quota was reached."""


class InvalidOperationError(ClientException):
    """The operation is not valid in the current stack state."""


# ── DynamoDB ──────────────────────────────────────────────────────────
class ResourceNotFoundError(ClientException):
    """Table or index not found, or not ACTIVE yet."""


class ResourceInUseError(ClientException):
    """Table is being created, updated or deleted."""


class ConditionalCheckFailedError(ClientException):
    """A condition expression evaluated to false."""


class TransactionCanceledError(ClientException):
    """The transaction was cancelled; see ``details["CancellationReasons"]``."""


class ProvisionedThroughputExceededError(ThrottlingError):
    """Request rate exceeded the table's provisioned throughput."""


class ItemCollectionSizeLimitExceededError(ClientException):
    """An item collection grew beyond 10 GB."""


# ── SQS ───────────────────────────────────────────────────────────────
class QueueNotFoundError(ClientException):
    """Queue does not exist."""


class QueueAlreadyExistsError(ClientException):
    """A queue with the same name but different attributes exists."""


class ReceiptHandleInvalidError(ClientException):
    """The receipt handle is not valid for this queue."""
