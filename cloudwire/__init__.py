"""cloudwire: typed clients for AWS query and JSON protocol services.

Entry point for the library. Import :func:`universal_factory` to create
any service client with a single call::

    from cloudwire import universal_factory

    dynamodb = universal_factory("dynamodb", {"region_name": "us-east-1"})
    for name in dynamodb.list_tables():
        print(name)
"""

from .cloudformation import CloudFormationClient
from .dynamodb import DynamoDbClient
from .factory import universal_factory
from .sqs import SqsClient

__version__ = "0.1.0"

__all__ = [
    "CloudFormationClient",
    "DynamoDbClient",
    "SqsClient",
    "universal_factory",
]
