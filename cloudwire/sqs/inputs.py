"""SQS operation inputs (query protocol, API version 2012-11-05)."""

from __future__ import annotations

from typing import ClassVar

from cloudwire.base.query_protocol import QueryInput
from cloudwire.base.shape import member
from cloudwire.sqs.value_objects import MessageAttributeValue


class SqsInput(QueryInput):
    version: ClassVar[str] = "2012-11-05"


class CreateQueueRequest(SqsInput):
    """Create a queue, or return the URL of an identical existing one.

    Names of FIFO queues end with ``.fifo``.
    """

    action: ClassVar[str] = "CreateQueue"

    queue_name: str | None = member("QueueName", required=True)
    attributes: dict[str, str] | None = member(
        "Attributes", flattened=True, location="Attribute", key="Name", value="Value"
    )
    tags: dict[str, str] | None = member(
        "Tags", flattened=True, location="Tag", key="Key", value="Value"
    )


class DeleteQueueRequest(SqsInput):
    action: ClassVar[str] = "DeleteQueue"

    queue_url: str | None = member("QueueUrl", required=True)


class GetQueueUrlRequest(SqsInput):
    action: ClassVar[str] = "GetQueueUrl"

    queue_name: str | None = member("QueueName", required=True)
    queue_owner_aws_account_id: str | None = member("QueueOwnerAWSAccountId")


class ListQueuesRequest(SqsInput):
    action: ClassVar[str] = "ListQueues"

    queue_name_prefix: str | None = member("QueueNamePrefix")
    next_token: str | None = member("NextToken")
    max_results: int | None = member("MaxResults")


class SendMessageRequest(SqsInput):
    """Deliver a message (up to 256 KiB) to a queue."""

    action: ClassVar[str] = "SendMessage"

    queue_url: str | None = member("QueueUrl", required=True)
    message_body: str | None = member("MessageBody", required=True)
    delay_seconds: int | None = member("DelaySeconds")
    message_attributes: dict[str, MessageAttributeValue] | None = member(
        "MessageAttributes",
        flattened=True,
        location="MessageAttribute",
        key="Name",
        value="Value",
    )
    message_deduplication_id: str | None = member("MessageDeduplicationId")
    message_group_id: str | None = member("MessageGroupId")


class ReceiveMessageRequest(SqsInput):
    """Retrieve up to 10 messages; ``WaitTimeSeconds`` enables long polling."""

    action: ClassVar[str] = "ReceiveMessage"

    queue_url: str | None = member("QueueUrl", required=True)
    attribute_names: list[str] | None = member(
        "AttributeNames", flattened=True, location="AttributeName"
    )
    message_attribute_names: list[str] | None = member(
        "MessageAttributeNames", flattened=True, location="MessageAttributeName"
    )
    max_number_of_messages: int | None = member("MaxNumberOfMessages")
    visibility_timeout: int | None = member("VisibilityTimeout")
    wait_time_seconds: int | None = member("WaitTimeSeconds")
    receive_request_attempt_id: str | None = member("ReceiveRequestAttemptId")


class DeleteMessageRequest(SqsInput):
    action: ClassVar[str] = "DeleteMessage"

    queue_url: str | None = member("QueueUrl", required=True)
    receipt_handle: str | None = member("ReceiptHandle", required=True)
