"""Universal service factory.

Provides :func:`universal_factory`, the single entry-point for creating
service clients. It returns a typed instance via ``@overload`` signatures so
IDEs can autocomplete operations, and reuses clients per service + config
through :class:`~cloudwire.base.client_cache.ClientCache`.
"""

from typing import Any, Literal, overload

from cloudwire.base import AWSConfig, existing_services
from cloudwire.base.client_cache import ClientCache
from cloudwire.base.config import validate_config
from cloudwire.cloudformation import CloudFormationClient
from cloudwire.dynamodb import DynamoDbClient
from cloudwire.sqs import SqsClient

SERVICE_REGISTRY: dict[str, type] = {
    "cloudformation": CloudFormationClient,
    "dynamodb": DynamoDbClient,
    "sqs": SqsClient,
}


@overload
def universal_factory(
    service_name: Literal["cloudformation"],
    config: AWSConfig | dict | None = None,
    *,
    cache: bool = True,
) -> CloudFormationClient: ...


@overload
def universal_factory(
    service_name: Literal["dynamodb"],
    config: AWSConfig | dict | None = None,
    *,
    cache: bool = True,
) -> DynamoDbClient: ...


@overload
def universal_factory(
    service_name: Literal["sqs"],
    config: AWSConfig | dict | None = None,
    *,
    cache: bool = True,
) -> SqsClient: ...


def universal_factory(
    service_name: existing_services,
    config: AWSConfig | dict | None = None,
    *,
    cache: bool = True,
) -> Any:
    """
    Create (or reuse) the client of a service.

    Args:
        service_name: The name of the service (e.g., 'dynamodb').
        config: Client configuration; see :class:`AWSConfig`.
        cache: Return the client already built for the same service and
            config, if any.
    Returns:
        An instance of the requested client class.
    Raises:
        ValueError: If the service is not supported.
        InvalidArgument: If the configuration is invalid.
    """
    if service_name not in SERVICE_REGISTRY:
        raise ValueError(f"Unsupported service '{service_name}'")

    service_class = SERVICE_REGISTRY[service_name]
    config_obj = validate_config(config)
    if not cache:
        return service_class(config_obj)
    return ClientCache().get_or_create(
        service_name,
        config_obj.model_dump(),
        lambda _: service_class(config_obj),
    )
