"""Amazon SQS bindings."""

from .client import SqsClient
from .inputs import (
    CreateQueueRequest,
    DeleteMessageRequest,
    DeleteQueueRequest,
    GetQueueUrlRequest,
    ListQueuesRequest,
    ReceiveMessageRequest,
    SendMessageRequest,
)
from .results import (
    CreateQueueResult,
    GetQueueUrlResult,
    ListQueuesResult,
    ReceiveMessageResult,
    SendMessageResult,
)
from .value_objects import Message, MessageAttributeValue
from .waiters import QueueExistsWaiter

__all__ = [
    "SqsClient",
    "CreateQueueRequest",
    "DeleteMessageRequest",
    "DeleteQueueRequest",
    "GetQueueUrlRequest",
    "ListQueuesRequest",
    "ReceiveMessageRequest",
    "SendMessageRequest",
    "CreateQueueResult",
    "GetQueueUrlResult",
    "ListQueuesResult",
    "ReceiveMessageResult",
    "SendMessageResult",
    "Message",
    "MessageAttributeValue",
    "QueueExistsWaiter",
]
