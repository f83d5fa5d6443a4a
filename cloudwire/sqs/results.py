"""SQS operation results."""

from __future__ import annotations

from typing import Iterator

from cloudwire.base.result import QueryResult, ResultField
from cloudwire.base.shape import Shape, member
from cloudwire.sqs.value_objects import Message


class CreateQueueResult(QueryResult):
    class _Payload(Shape):
        queue_url: str | None = member("QueueUrl")

    _shape = _Payload
    _wrapper = "CreateQueueResult"

    queue_url = ResultField()


class GetQueueUrlResult(QueryResult):
    class _Payload(Shape):
        queue_url: str | None = member("QueueUrl")

    _shape = _Payload
    _wrapper = "GetQueueUrlResult"

    queue_url = ResultField()


class ListQueuesResult(QueryResult):
    """Queue URLs of the account, following ``NextToken`` across pages."""

    class _Payload(Shape):
        queue_urls: list[str] | None = member("QueueUrls", flattened=True, location="QueueUrl")
        next_token: str | None = member("NextToken")

    _shape = _Payload
    _wrapper = "ListQueuesResult"

    next_token = ResultField()

    def __iter__(self) -> Iterator[str]:
        return self.get_queue_urls()

    def get_queue_urls(self, current_page_only: bool = False) -> Iterator[str]:
        if current_page_only:
            self._initialize()
            yield from self._data.queue_urls or []
            return
        yield from self._paginate(
            lambda page: page.queue_urls or [],
            lambda page: (
                self._input.model_copy(update={"next_token": page.next_token})
                if page.next_token
                else None
            ),
            "list_queues",
        )


class SendMessageResult(QueryResult):
    class _Payload(Shape):
        md5_of_message_body: str | None = member("MD5OfMessageBody")
        md5_of_message_attributes: str | None = member("MD5OfMessageAttributes")
        message_id: str | None = member("MessageId")
        sequence_number: str | None = member("SequenceNumber")

    _shape = _Payload
    _wrapper = "SendMessageResult"

    md5_of_message_body = ResultField()
    md5_of_message_attributes = ResultField()
    message_id = ResultField()
    sequence_number = ResultField()


class ReceiveMessageResult(QueryResult):
    """Messages received; empty when the queue had none to hand out."""

    class _Payload(Shape):
        messages: list[Message] | None = member("Messages", flattened=True, location="Message")

    _shape = _Payload
    _wrapper = "ReceiveMessageResult"

    messages = ResultField(list)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)
