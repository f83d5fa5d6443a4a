"""Amazon SQS client."""

from __future__ import annotations

from typing import Any

from cloudwire.base.client import QueryApi
from cloudwire.base.exceptions import (
    QueueAlreadyExistsError,
    QueueNotFoundError,
    ReceiptHandleInvalidError,
)
from cloudwire.base.result import Result
from cloudwire.sqs.inputs import (
    CreateQueueRequest,
    DeleteMessageRequest,
    DeleteQueueRequest,
    GetQueueUrlRequest,
    ListQueuesRequest,
    ReceiveMessageRequest,
    SendMessageRequest,
)
from cloudwire.sqs.results import (
    CreateQueueResult,
    GetQueueUrlResult,
    ListQueuesResult,
    ReceiveMessageResult,
    SendMessageResult,
)
from cloudwire.sqs.waiters import QueueExistsWaiter


class SqsClient(QueryApi):
    """SQS bindings::

        client = SqsClient({"region_name": "eu-west-1"})
        url = client.create_queue(QueueName="jobs").queue_url
        client.send_message(QueueUrl=url, MessageBody="hello").resolve()
        for message in client.receive_message(QueueUrl=url, WaitTimeSeconds=10):
            client.delete_message(QueueUrl=url, ReceiptHandle=message.receipt_handle)
    """

    service = "sqs"
    endpoint_prefix = "sqs"
    _ERROR_MAP = {
        "AWS.SimpleQueueService.NonExistentQueue": QueueNotFoundError,
        "QueueDoesNotExist": QueueNotFoundError,
        "QueueAlreadyExists": QueueAlreadyExistsError,
        "ReceiptHandleIsInvalid": ReceiptHandleInvalidError,
    }

    def create_queue(self, input: Any = None, /, **kwargs: Any) -> CreateQueueResult:
        """Raises QueueAlreadyExistsError when a queue with other attributes exists."""
        return self._call(CreateQueueRequest.create(input, **kwargs), CreateQueueResult)

    def delete_queue(self, input: Any = None, /, **kwargs: Any) -> Result:
        return self._call(DeleteQueueRequest.create(input, **kwargs), Result)

    def get_queue_url(self, input: Any = None, /, **kwargs: Any) -> GetQueueUrlResult:
        return self._call(GetQueueUrlRequest.create(input, **kwargs), GetQueueUrlResult)

    def list_queues(self, input: Any = None, /, **kwargs: Any) -> ListQueuesResult:
        """List queue URLs (paginated)."""
        return self._call(ListQueuesRequest.create(input, **kwargs), ListQueuesResult)

    def send_message(self, input: Any = None, /, **kwargs: Any) -> SendMessageResult:
        return self._call(SendMessageRequest.create(input, **kwargs), SendMessageResult)

    def receive_message(self, input: Any = None, /, **kwargs: Any) -> ReceiveMessageResult:
        return self._call(ReceiveMessageRequest.create(input, **kwargs), ReceiveMessageResult)

    def delete_message(self, input: Any = None, /, **kwargs: Any) -> Result:
        """Raises ReceiptHandleInvalidError for an unknown receipt handle."""
        return self._call(DeleteMessageRequest.create(input, **kwargs), Result)

    def queue_exists(self, input: Any = None, /, **kwargs: Any) -> QueueExistsWaiter:
        return self._call(GetQueueUrlRequest.create(input, **kwargs), QueueExistsWaiter)
